from wavechat.core.interfaces.logger import Logger
from wavechat.core.interfaces.key_value_store import KeyValueStore
from wavechat.core.interfaces.audio_store import AudioStore
from wavechat.core.interfaces.audio_analyzer import AudioAnalyzer

__all__ = [
    "Logger",
    "KeyValueStore",
    "AudioStore",
    "AudioAnalyzer",
]
