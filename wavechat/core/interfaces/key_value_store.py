from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class KeyValueStore(ABC):
    """
    Interface for an asynchronous string key-value store.

    Values are opaque strings (serialized JSON blobs). Writes replace the
    whole value for a key; there are no multi-key transactions.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """
        Prepare the backing storage.

        Raises:
            StorageError: If the storage cannot be prepared.
        """
        pass

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: The storage key

        Returns:
            Optional[str]: The stored value, or None if the key does not exist

        Raises:
            StorageKeyError: If the key is invalid
            StorageError: If the value cannot be read
        """
        pass

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Args:
            key: The storage key
            value: The string value to store

        Raises:
            StorageKeyError: If the key is invalid
            StorageError: If the value cannot be written
        """
        pass

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """
        Remove a key. Removing a missing key is not an error.

        Raises:
            StorageKeyError: If the key is invalid
            StorageError: If the key cannot be removed
        """
        pass

    @abstractmethod
    async def get_all_keys(self) -> List[str]:
        """
        List every key currently stored.

        Returns:
            List[str]: The stored keys, sorted
        """
        pass

    @abstractmethod
    async def healthcheck(self) -> Dict[str, Any]:
        """
        Check whether the store is configured and usable.

        Returns:
            Dict[str, Any]: {'healthy': bool, 'message': str, 'details': dict}
        """
        pass
