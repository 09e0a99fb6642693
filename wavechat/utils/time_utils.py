"""
Display formatting for durations and message timestamps.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from wavechat.utils.datetime_utils import ensure_tz_aware, from_isoformat, utc_now


Timestamp = Union[str, datetime]


def _as_datetime(timestamp: Timestamp) -> datetime:
    if isinstance(timestamp, datetime):
        return ensure_tz_aware(timestamp)
    return from_isoformat(timestamp)


def format_time(seconds: Optional[float]) -> str:
    """
    Format seconds as MM:SS.

    Args:
        seconds: Time in seconds (None gives '00:00')

    Returns:
        str: Zero-padded minutes and seconds
    """
    if seconds is None:
        return "00:00"

    mins = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{mins:02d}:{secs:02d}"


def format_duration(seconds: float) -> str:
    """Format seconds as m:ss, the form used in voice message previews."""
    minutes = int(seconds // 60)
    remaining = int(seconds % 60)
    return f"{minutes}:{remaining:02d}"


def voice_message_preview(duration: float) -> str:
    return f"🎤 Voice message ({format_duration(duration)})"


def format_relative_time(timestamp: Optional[Timestamp], now: Optional[datetime] = None) -> str:
    """
    Format a timestamp relative to now.

    Args:
        timestamp: ISO timestamp or datetime
        now: Reference time, defaults to the current UTC time

    Returns:
        str: 'Just now', 'Nm ago', 'Nh ago', 'Nd ago', or 'Mon D' for a week or older
    """
    if not timestamp:
        return ""

    now = ensure_tz_aware(now) if now else utc_now()
    date = _as_datetime(timestamp)

    diff_sec = int((now - date).total_seconds())
    diff_min = diff_sec // 60
    diff_hour = diff_min // 60
    diff_day = diff_hour // 24

    if diff_sec < 60:
        return "Just now"
    if diff_min < 60:
        return f"{diff_min}m ago"
    if diff_hour < 24:
        return f"{diff_hour}h ago"
    if diff_day < 7:
        return f"{diff_day}d ago"
    return f"{date.strftime('%b')} {date.day}"


def format_message_time(timestamp: Optional[Timestamp]) -> str:
    """Format a timestamp as a 12-hour clock time, e.g. '03:05 PM'."""
    if not timestamp:
        return ""
    return _as_datetime(timestamp).strftime("%I:%M %p")


def is_today(timestamp: Optional[Timestamp], now: Optional[datetime] = None) -> bool:
    if not timestamp:
        return False
    now = ensure_tz_aware(now) if now else utc_now()
    return _as_datetime(timestamp).date() == now.date()


def group_messages_by_date(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Sort messages by timestamp and flag the first message of each day.

    Every returned message is a copy carrying 'showDateSeparator'; the first
    message of a day also carries 'dateString' (e.g. 'Mon Jan 01 2024').

    Args:
        messages: Message documents with ISO 'timestamp' fields

    Returns:
        List[Dict[str, Any]]: Sorted, annotated copies
    """
    if not messages:
        return []

    result = []
    current_date = None

    for message in sorted(messages, key=lambda m: _as_datetime(m["timestamp"])):
        date_string = _as_datetime(message["timestamp"]).strftime("%a %b %d %Y")
        if date_string != current_date:
            result.append({**message, "showDateSeparator": True, "dateString": date_string})
            current_date = date_string
        else:
            result.append({**message, "showDateSeparator": False})

    return result
