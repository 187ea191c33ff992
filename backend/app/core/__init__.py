"""Core building blocks: configuration, errors, logging."""
