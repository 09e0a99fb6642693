from abc import ABC, abstractmethod
from typing import Any, Dict, List


class AudioStore(ABC):
    """
    Interface for the storage of voice message audio files.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """
        Create the audio directory (with intermediates) if it does not exist.

        Raises:
            AudioStorageError: If the directory cannot be created.
        """
        pass

    @abstractmethod
    def path_for(self, file_name: str) -> str:
        """Return the storage path for a file name inside the audio directory."""
        pass

    @abstractmethod
    async def save_from(self, source_path: str, file_name: str) -> str:
        """
        Copy a recording into the audio directory.

        Args:
            source_path: Path of the temporary recording
            file_name: Name to give the stored file

        Returns:
            str: The path of the stored copy

        Raises:
            AudioStorageError: If the source is missing or the copy fails
        """
        pass

    @abstractmethod
    async def delete(self, path: str) -> None:
        """
        Delete an audio file.

        Raises:
            AudioStorageError: If the file is missing or cannot be deleted
        """
        pass

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Return True if the audio file exists."""
        pass

    @abstractmethod
    async def list_files(self) -> List[str]:
        """Return the names of all files in the audio directory, sorted."""
        pass

    @abstractmethod
    async def clear(self) -> int:
        """
        Delete every file in the audio directory.

        Returns:
            int: Number of files deleted
        """
        pass

    @abstractmethod
    async def healthcheck(self) -> Dict[str, Any]:
        """Return {'healthy': bool, 'message': str, 'details': dict}."""
        pass
