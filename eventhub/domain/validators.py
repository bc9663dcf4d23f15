"""
Structural validation of inbound values.

These checks look only at the shape of the input, never at stored data,
so they run before any store lookup. Pydantic schemas call them for HTTP
bodies and services call them again for direct callers.
"""

from datetime import datetime, timezone
from typing import Any

from eventhub.domain.errors import InvalidArgumentError, UnprocessableInputError

# Largest value an INTEGER id column holds (PostgreSQL int4)
MAX_ID = 2**31 - 1


def _to_positive_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.isascii() and raw.isdigit() and len(raw) <= len(str(MAX_ID)):
        value = int(raw)
    else:
        return None
    return value if 0 < value <= MAX_ID else None


def parse_resource_id(raw: Any) -> int:
    """Parse an id taken from the request path.

    Raises:
        InvalidArgumentError: If the id is not a positive integer that fits an id column.
    """
    value = _to_positive_int(raw)
    if value is None:
        raise InvalidArgumentError("Invalid id")
    return value


def parse_reference_id(field: str, raw: Any) -> int:
    """Parse an id that arrives inside a request body, e.g. ``eventId``."""
    value = _to_positive_int(raw)
    if value is None:
        raise UnprocessableInputError(f"{field} must be a positive integer")
    return value


def require_text(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise UnprocessableInputError(f"{field} is required")
    return value


def as_utc(value: datetime) -> datetime:
    """Normalise to an aware UTC datetime, taking naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Any, field: str = "date") -> datetime:
    """Parse an ISO-8601 string or datetime into an aware UTC datetime.

    Raises:
        UnprocessableInputError: If the value is missing or not a valid timestamp.
    """
    try:
        if isinstance(value, datetime):
            return as_utc(value)
        if isinstance(value, str) and value.strip():
            return as_utc(datetime.fromisoformat(value.strip()))
    except (ValueError, OverflowError):
        # OverflowError: an offset pushes the instant outside years 1..9999
        pass
    raise UnprocessableInputError(f"{field} must be a valid ISO-8601 timestamp")


def format_timestamp(value: datetime) -> str:
    """Render as ``YYYY-MM-DDTHH:MM:SS.mmmZ``, the format clients send."""
    return as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")
