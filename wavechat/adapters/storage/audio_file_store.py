"""
Local file storage for voice message recordings.
"""

import os
import shutil
from typing import Any, Dict, List, Optional

from wavechat.core.interfaces import AudioStore
from wavechat.core.exceptions import AudioStorageError, ConfigurationError
from wavechat.adapters.loggers import StructuredLogger
from wavechat.utils.config import get_component_config


DEFAULT_AUDIO_DIRECTORY = os.path.join("db", "wavechat", "audio")


class LocalAudioStore(AudioStore):
    """
    Keeps recordings as plain files in a single directory.
    """

    def __init__(
        self,
        directory: Optional[str] = None,
        logger: Optional[StructuredLogger] = None,
        config_path: Optional[str] = None,
    ):
        """
        Initialize the audio store.

        Args:
            directory: Audio directory. If None, uses config.
            logger: Logger instance for reporting operations. If None, creates a new one.
            config_path: Optional configuration file path.
        """
        if logger is None:
            logger = StructuredLogger(name="audio_store")
            logger.initialize(config_path)
        self.logger = logger

        if directory is None:
            try:
                config = get_component_config("storage.audio", config_path)
                directory = config.get("directory", DEFAULT_AUDIO_DIRECTORY)
            except ConfigurationError as e:
                self.logger.warning({
                    "action": "CONFIG_LOAD_FAILED",
                    "message": "Could not load config, using default audio directory",
                    "data": {"error": str(e), "default_directory": DEFAULT_AUDIO_DIRECTORY},
                })
                directory = DEFAULT_AUDIO_DIRECTORY

        self.directory = directory

    async def initialize(self) -> None:
        try:
            if not os.path.isdir(self.directory):
                os.makedirs(self.directory, exist_ok=True)
                self.logger.info({
                    "action": "AUDIO_DIRECTORY_CREATED",
                    "message": "Created audio directory",
                    "data": {"directory": self.directory},
                })
        except OSError as e:
            raise AudioStorageError(f"Failed to create audio directory {self.directory}: {e}") from e

    def path_for(self, file_name: str) -> str:
        if not file_name or os.path.basename(file_name) != file_name:
            raise AudioStorageError(f"Invalid audio file name: {file_name!r}")
        return os.path.join(self.directory, file_name)

    async def save_from(self, source_path: str, file_name: str) -> str:
        destination = self.path_for(file_name)

        if not source_path or not os.path.isfile(source_path):
            raise AudioStorageError(f"Recording not found: {source_path}")

        try:
            os.makedirs(self.directory, exist_ok=True)
            shutil.copy2(source_path, destination)
        except OSError as e:
            self.logger.error({
                "action": "AUDIO_COPY_FAILED",
                "message": "Failed to copy recording into audio directory",
                "data": {"source": source_path, "destination": destination},
                "exception": e,
            })
            raise AudioStorageError(f"Failed to copy {source_path} to {destination}: {e}") from e

        self.logger.info({
            "action": "AUDIO_SAVED",
            "message": "Saved recording",
            "data": {"source": source_path, "destination": destination},
        })
        return destination

    async def delete(self, path: str) -> None:
        if not os.path.isfile(path):
            raise AudioStorageError(f"Audio file not found: {path}")
        try:
            os.remove(path)
        except OSError as e:
            raise AudioStorageError(f"Failed to delete audio file {path}: {e}") from e

        self.logger.info({
            "action": "AUDIO_DELETED",
            "message": "Deleted audio file",
            "data": {"path": path},
        })

    async def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    async def list_files(self) -> List[str]:
        if not os.path.isdir(self.directory):
            return []
        return sorted(
            name for name in os.listdir(self.directory)
            if os.path.isfile(os.path.join(self.directory, name))
        )

    async def clear(self) -> int:
        deleted = 0
        for name in await self.list_files():
            await self.delete(os.path.join(self.directory, name))
            deleted += 1

        self.logger.info({
            "action": "AUDIO_FILES_CLEARED",
            "message": "All audio files cleared",
            "data": {"directory": self.directory, "deleted": deleted},
        })
        return deleted

    async def healthcheck(self) -> Dict[str, Any]:
        exists = os.path.isdir(self.directory)
        writable = os.access(self.directory, os.W_OK) if exists else False
        if not exists:
            message = f"Audio directory does not exist: {self.directory}"
        elif not writable:
            message = f"Audio directory is not writable: {self.directory}"
        else:
            message = "Audio store is healthy"
        return {
            "healthy": writable,
            "message": message,
            "details": {"directory": self.directory, "exists": exists, "writable": writable},
        }
