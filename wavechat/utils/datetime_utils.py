"""
Datetime utilities for WaveChat.

Stored timestamps are ISO 8601 strings. These helpers keep timezone handling
consistent (naive values are treated as UTC).
"""

import time
from datetime import datetime, timezone
from typing import Optional


def ensure_tz_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure a datetime is timezone-aware (UTC if naive).

    Args:
        dt: The datetime to process, can be None

    Returns:
        The timezone-aware datetime (or None if input was None)
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO 8601 string with millisecond precision."""
    return to_isoformat(utc_now())


def to_isoformat(dt: datetime) -> str:
    """Format a datetime as ISO 8601 with milliseconds and a trailing 'Z'."""
    dt = ensure_tz_aware(dt).astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def from_isoformat(iso_string: str) -> datetime:
    """
    Create a timezone-aware datetime from an ISO format string.

    Accepts the trailing 'Z' produced by JavaScript clients. If the string has
    no timezone info, UTC is assumed.

    Args:
        iso_string: ISO 8601 formatted datetime string

    Returns:
        Timezone-aware datetime
    """
    if iso_string.endswith("Z"):
        iso_string = iso_string[:-1] + "+00:00"
    dt = datetime.fromisoformat(iso_string)
    return ensure_tz_aware(dt)


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)
