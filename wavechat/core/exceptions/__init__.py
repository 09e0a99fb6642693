"""
Exception hierarchy for WaveChat.

This module defines the base exception types for all components, providing
a structured hierarchy for error handling and recovery.
"""


class WaveChatError(Exception):
    """Base exception for all WaveChat-related errors."""

    pass


# Storage Errors


class StorageError(WaveChatError):
    """Base exception for all key-value and file storage errors."""

    pass


class StorageKeyError(StorageError):
    """Raised when a storage key is invalid."""

    pass


class SerializationError(StorageError):
    """Raised when a stored collection cannot be encoded, decoded or validated."""

    pass


class AudioStorageError(StorageError):
    """Raised when audio file operations fail."""

    pass


# Service Errors


class DatabaseServiceError(WaveChatError):
    """Base exception for all database service errors."""

    pass


class ConversationNotFoundError(DatabaseServiceError):
    """Raised when a conversation ID is not found."""

    pass


class MessageNotFoundError(DatabaseServiceError):
    """Raised when a message ID is not found."""

    pass


class ValidationError(WaveChatError):
    """Raised when input validation fails."""

    pass


class AnalysisError(WaveChatError):
    """Raised when audio analysis (waveform, segments, transcription) fails."""

    pass


# Other Errors


class ConfigurationError(WaveChatError):
    """Raised when configuration is invalid."""

    pass


class LoggerError(WaveChatError):
    """Raised when logging encounters an error."""

    pass


# Exporting all exception types
__all__ = [
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
