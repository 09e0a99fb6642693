from abc import ABC, abstractmethod
from typing import Any, Dict, Union


LogPayload = Union[Dict[str, Any], str]


class Logger(ABC):
    """
    Interface for the structured loggers used by every WaveChat component.

    A log call takes a payload dictionary:

        {
            "action": "MESSAGE_SENT",     # Upper-case event name
            "message": "Sent text message",
            "data": {"conversation_id": "1"},   # Optional
            "exception": error,           # Optional, usually at error level
        }

    A plain string is accepted too and logged with the generic action "LOG".
    """

    @abstractmethod
    def initialize(self) -> None:
        """
        Apply settings from config.yaml.

        Raises:
            LoggerError: If the configured settings are invalid.
        """
        pass

    @abstractmethod
    def debug(self, log_data: LogPayload) -> None:
        pass

    @abstractmethod
    def info(self, log_data: LogPayload) -> None:
        pass

    @abstractmethod
    def warning(self, log_data: LogPayload) -> None:
        pass

    @abstractmethod
    def error(self, log_data: LogPayload) -> None:
        pass

    @abstractmethod
    def critical(self, log_data: LogPayload) -> None:
        pass
