"""
WaveChat

Local data layer for a voice-first chat app: conversations, text and voice
messages, timestamp-anchored reactions and replies, kept as JSON collections
in a key-value store with the recordings on disk.
"""

__version__ = "0.1.0"

# Import core interfaces and exceptions
from wavechat.core import (
    # Interfaces
    Logger,
    KeyValueStore,
    AudioStore,
    AudioAnalyzer,
    # Exceptions
    WaveChatError,
    StorageError,
    StorageKeyError,
    SerializationError,
    AudioStorageError,
    DatabaseServiceError,
    ConversationNotFoundError,
    MessageNotFoundError,
    ValidationError,
    AnalysisError,
    ConfigurationError,
    LoggerError,
)

# Import utilities
from wavechat.utils import (
    load_config,
    get_component_config,
)

# Export core interfaces and exceptions
__all__ = [
    # Interfaces
    "Logger",
    "KeyValueStore",
    "AudioStore",
    "AudioAnalyzer",
    # Exceptions
    "WaveChatError",
    "StorageError",
    "StorageKeyError",
    "SerializationError",
    "AudioStorageError",
    "DatabaseServiceError",
    "ConversationNotFoundError",
    "MessageNotFoundError",
    "ValidationError",
    "AnalysisError",
    "ConfigurationError",
    "LoggerError",
    # Utilities
    "load_config",
    "get_component_config",
]
