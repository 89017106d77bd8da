"""Timezone-aware datetime utilities.

All timestamps exposed by the API are UTC and serialized the way browsers
expect them (ISO 8601 with millisecond precision and a ``Z`` suffix).
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current datetime with UTC timezone.

    Always use this function instead of datetime.utcnow() or datetime.now().

    Returns:
        Current datetime with UTC timezone
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure datetime has UTC timezone.

    If datetime is naive (no timezone), assumes UTC and adds it.
    If datetime has different timezone, converts to UTC.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def datetime_to_iso(dt: datetime | None) -> str | None:
    """Convert datetime to an ISO 8601 string ending in ``Z``.

    Args:
        dt: Datetime to convert

    Returns:
        ISO 8601 formatted string, or None if input is None
    """
    if dt is None:
        return None
    return ensure_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string."""
    return datetime_to_iso(utc_now())
