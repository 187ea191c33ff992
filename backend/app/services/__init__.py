"""Services - business logic layer."""
