"""
Key-value store implementation using one JSON file per key.
"""

import os
import re
import asyncio
from typing import Any, Dict, List, Optional

from wavechat.core.interfaces import KeyValueStore
from wavechat.core.exceptions import ConfigurationError, StorageError, StorageKeyError
from wavechat.adapters.loggers import StructuredLogger
from wavechat.utils.config import get_component_config


KEY_PATTERN = re.compile(r"^[A-Za-z0-9_\-][A-Za-z0-9_.\-]*$")
DEFAULT_BASE_PATH = os.path.join("db", "wavechat", "store")


def validate_key(key: str) -> None:
    """
    Check that a key is usable as a file name.

    Raises:
        StorageKeyError: If the key is empty, not a string or has unsafe characters
    """
    if not key or not isinstance(key, str) or not KEY_PATTERN.match(key):
        raise StorageKeyError(f"Invalid storage key: {key!r}")


class JSONFileKeyValueStore(KeyValueStore):
    """
    Implementation of KeyValueStore keeping each value in its own file.

    Storage structure:
    ./base_path/
        local_conversations.json
        local_messages.json
        ...

    Values are written to a temporary file and renamed into place, so a
    single key is never left half-written. Nothing spans several keys.
    """

    def __init__(
        self,
        base_path: Optional[str] = None,
        file_permissions: int = 0o600,
        logger: Optional[StructuredLogger] = None,
        config_path: Optional[str] = None,
    ):
        """
        Initialize the store.

        Args:
            base_path: Directory holding the value files. If None, uses config.
            file_permissions: Mode applied to every written file.
            logger: Logger instance for reporting operations. If None, creates a new one.
            config_path: Optional configuration file path.
        """
        if logger is None:
            logger = StructuredLogger(name="key_value_store")
            logger.initialize(config_path)
        self.logger = logger

        if base_path is None:
            try:
                config = get_component_config("storage.key_value_store", config_path)
                base_path = config.get("base_path", DEFAULT_BASE_PATH)
            except ConfigurationError as e:
                self.logger.warning({
                    "action": "CONFIG_LOAD_FAILED",
                    "message": "Could not load config, using default store directory",
                    "data": {"error": str(e), "default_directory": DEFAULT_BASE_PATH},
                })
                base_path = DEFAULT_BASE_PATH

        self.base_path = base_path
        self.file_permissions = file_permissions
        self.initialized = False
        self.lock = asyncio.Lock()

    async def initialize(self) -> None:
        try:
            os.makedirs(self.base_path, exist_ok=True)
        except OSError as e:
            self.logger.error({
                "action": "KV_STORE_INIT_FAILED",
                "message": "Failed to create store directory",
                "data": {"base_path": self.base_path},
                "exception": e,
            })
            raise StorageError(f"Initialization failed: {e}") from e

        self.initialized = True
        self.logger.info({
            "action": "KV_STORE_INITIALIZED",
            "message": "Initialized JSONFileKeyValueStore",
            "data": {"base_path": self.base_path},
        })

    def _check_initialized(self) -> None:
        if not self.initialized:
            raise StorageError("KeyValueStore not initialized. Call initialize() first.")

    def _get_path(self, key: str) -> str:
        validate_key(key)
        return os.path.join(self.base_path, f"{key}.json")

    async def get_item(self, key: str) -> Optional[str]:
        self._check_initialized()
        path = self._get_path(key)
        try:
            async with self.lock:
                if not os.path.exists(path):
                    return None
                with open(path, "r", encoding="utf-8") as f:
                    return f.read()
        except OSError as e:
            raise StorageError(f"Failed to read key {key} from {path}: {e}") from e

    async def set_item(self, key: str, value: str) -> None:
        self._check_initialized()
        if not isinstance(value, str):
            raise StorageError(f"Value for key {key} must be a string, got {type(value).__name__}")

        path = self._get_path(key)
        temp_path = f"{path}.tmp"
        try:
            async with self.lock:
                os.makedirs(self.base_path, exist_ok=True)

                # Write to a temporary file first, then rename
                with open(temp_path, "w", encoding="utf-8") as f:
                    f.write(value)
                os.chmod(temp_path, self.file_permissions)
                os.replace(temp_path, path)
        except OSError as e:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise StorageError(f"Failed to write key {key} to {path}: {e}") from e

        self.logger.debug({
            "action": "KV_STORE_SET",
            "message": "Stored value",
            "data": {"key": key, "size": len(value)},
        })

    async def remove_item(self, key: str) -> None:
        self._check_initialized()
        path = self._get_path(key)
        try:
            async with self.lock:
                if os.path.exists(path):
                    os.remove(path)
        except OSError as e:
            raise StorageError(f"Failed to remove key {key}: {e}") from e

    async def get_all_keys(self) -> List[str]:
        self._check_initialized()
        try:
            async with self.lock:
                if not os.path.isdir(self.base_path):
                    return []
                return sorted(
                    name[: -len(".json")]
                    for name in os.listdir(self.base_path)
                    if name.endswith(".json")
                )
        except OSError as e:
            raise StorageError(f"Failed to list keys in {self.base_path}: {e}") from e

    async def healthcheck(self) -> Dict[str, Any]:
        base_path_exists = os.path.isdir(self.base_path)
        base_path_writable = os.access(self.base_path, os.W_OK) if base_path_exists else False

        if not self.initialized:
            message = "Key-value store not initialized"
        elif not base_path_exists:
            message = f"Base path does not exist: {self.base_path}"
        elif not base_path_writable:
            message = f"Base path is not writable: {self.base_path}"
        else:
            message = "Key-value store is healthy"

        return {
            "healthy": self.initialized and base_path_writable,
            "message": message,
            "details": {
                "base_path": self.base_path,
                "base_path_exists": base_path_exists,
                "base_path_writable": base_path_writable,
                "initialized": self.initialized,
            },
        }
