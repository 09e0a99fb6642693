"""
Adapters module for WaveChat.

This module contains concrete implementations of the interfaces defined in the core module.
"""

# Import logger implementations
from wavechat.adapters.loggers import StructuredLogger

# Import storage implementations
from wavechat.adapters.storage import (
    JSONFileKeyValueStore,
    InMemoryKeyValueStore,
    LocalAudioStore,
    CollectionSerializer,
)

# Import audio analysis implementations
from wavechat.adapters.analysis import MockAudioAnalyzer

# Import service implementations
from wavechat.adapters.services import DatabaseService, ConversationSession

# Export all implementations
__all__ = [
    # Logger implementations
    "StructuredLogger",

    # Storage implementations
    "JSONFileKeyValueStore",
    "InMemoryKeyValueStore",
    "LocalAudioStore",
    "CollectionSerializer",

    # Audio analysis implementations
    "MockAudioAnalyzer",

    # Service implementations
    "DatabaseService",
    "ConversationSession",
]
