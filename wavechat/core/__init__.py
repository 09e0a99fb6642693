"""
Core module for WaveChat.

This module contains the core interfaces, document shapes and exceptions
that every storage and service implementation follows.
"""

# Import all interfaces
from wavechat.core.interfaces import (
    Logger,
    KeyValueStore,
    AudioStore,
    AudioAnalyzer,
)

# Import all exceptions
from wavechat.core.exceptions import (
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

# Export all interfaces and exceptions
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
]
