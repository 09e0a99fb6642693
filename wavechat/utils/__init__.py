"""
Utility modules for WaveChat.

This package contains utility modules that provide common functionality
across the storage, service and controller layers.
"""

from wavechat.utils.config import get_component_config, load_config
from wavechat.utils.datetime_utils import (
    ensure_tz_aware,
    from_isoformat,
    to_isoformat,
    utc_now,
    utc_now_iso,
)
from wavechat.utils.load_env import load_env
from wavechat.utils.print_banner import print_banner
from wavechat.utils.time_utils import (
    format_time,
    format_duration,
    format_relative_time,
    format_message_time,
    is_today,
    group_messages_by_date,
    voice_message_preview,
)

__all__ = [
    "get_component_config",
    "load_config",
    "ensure_tz_aware",
    "from_isoformat",
    "to_isoformat",
    "utc_now",
    "utc_now_iso",
    "load_env",
    "print_banner",
    "format_time",
    "format_duration",
    "format_relative_time",
    "format_message_time",
    "is_today",
    "group_messages_by_date",
    "voice_message_preview",
]
