"""
In-memory key-value store, for tests and throwaway sessions.
"""

from typing import Any, Dict, List, Optional

from wavechat.core.interfaces import KeyValueStore
from wavechat.core.exceptions import StorageError
from wavechat.adapters.storage.json_file_store import validate_key


class InMemoryKeyValueStore(KeyValueStore):
    """KeyValueStore backed by a plain dict. Nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})
        self.initialized = False

    async def initialize(self) -> None:
        self.initialized = True

    async def get_item(self, key: str) -> Optional[str]:
        validate_key(key)
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        validate_key(key)
        if not isinstance(value, str):
            raise StorageError(f"Value for key {key} must be a string, got {type(value).__name__}")
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        validate_key(key)
        self._items.pop(key, None)

    async def get_all_keys(self) -> List[str]:
        return sorted(self._items)

    async def healthcheck(self) -> Dict[str, Any]:
        return {
            "healthy": self.initialized,
            "message": "In-memory store is healthy" if self.initialized else "In-memory store not initialized",
            "details": {"key_count": len(self._items), "initialized": self.initialized},
        }
