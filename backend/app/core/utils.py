"""Utility functions for timestamps and validation error formatting."""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision.

    Uses the ``Z`` suffix (``2026-10-19T08:30:00.123Z``) so stored values sort
    lexicographically in chronological order.
    """
    now = datetime.now(UTC)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_validation_errors(errors: Sequence[Any]) -> list[dict[str, str]]:
    """Flatten Pydantic/FastAPI validation errors into field-level violations.

    Args:
        errors: Error dicts as returned by ``RequestValidationError.errors()``

    Returns:
        List of ``{"field", "message", "type"}`` dicts, one per violation.
        ``field`` is the dotted location, e.g. ``body.attachment.r2Key``.
    """
    violations = []
    for error in errors:
        loc = error.get("loc") or ()
        field = ".".join(str(part) for part in loc) or "request"
        violations.append(
            {
                "field": field,
                "message": str(error.get("msg", "Invalid value")),
                "type": str(error.get("type", "value_error")),
            }
        )
    return violations
