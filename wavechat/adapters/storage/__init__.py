"""
Storage module.

Key-value stores holding the JSON collections, the local audio file store
and the serializer that validates each collection.
"""

from wavechat.adapters.storage.json_file_store import JSONFileKeyValueStore
from wavechat.adapters.storage.memory_store import InMemoryKeyValueStore
from wavechat.adapters.storage.audio_file_store import LocalAudioStore
from wavechat.adapters.storage.serializer import CollectionSerializer
from wavechat.adapters.storage.schema import (
    CONVERSATIONS_STORAGE_KEY,
    MESSAGES_STORAGE_KEY,
    REACTIONS_STORAGE_KEY,
    REPLIES_STORAGE_KEY,
    ALL_STORAGE_KEYS,
)

__all__ = [
    "JSONFileKeyValueStore",
    "InMemoryKeyValueStore",
    "LocalAudioStore",
    "CollectionSerializer",
    "CONVERSATIONS_STORAGE_KEY",
    "MESSAGES_STORAGE_KEY",
    "REACTIONS_STORAGE_KEY",
    "REPLIES_STORAGE_KEY",
    "ALL_STORAGE_KEYS",
]
