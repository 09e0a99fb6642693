"""
Structured Logger implementation providing well-formatted logs.

This implementation uses Python's built-in logging module to generate structured logs:
one JSON object per record, holding the action name, message, logger name,
additional data and exception details.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from wavechat.core.exceptions import ConfigurationError, LoggerError
from wavechat.core.interfaces import Logger
from wavechat.utils.config import get_component_config


class JSONFormatter(logging.Formatter):
    """Render the structured payload attached to a record as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = dict(getattr(record, "structured", {}))
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "action": payload.get("action", "LOG"),
            "message": payload.get("message", record.getMessage()),
        }
        if payload.get("data") is not None:
            entry["data"] = payload["data"]

        exception = payload.get("exception")
        if isinstance(exception, BaseException):
            entry["exception"] = {
                "type": type(exception).__name__,
                "message": str(exception),
                "traceback": traceback.format_exception(
                    type(exception), exception, exception.__traceback__
                ),
            }
        return json.dumps(entry, default=str, ensure_ascii=False)


class StructuredLogger(Logger):
    """Structured JSON logger with console and optional file output."""

    CONFIG_SECTION = "system.loggers.structured_logger"

    def __init__(
        self,
        name: str = "wavechat",
        level: str = "INFO",
        log_file: Optional[str] = None,
        console_output: bool = True,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name, shown in every record
            level: Minimum level name ('DEBUG', 'INFO', ...)
            log_file: Optional path of a file that receives the JSON lines
            console_output: Whether records are also written to stdout
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.propagate = False
        self._configure(level, log_file, console_output)

    def _configure(self, level: str, log_file: Optional[str], console_output: bool) -> None:
        numeric_level = logging.getLevelName(str(level).upper())
        if not isinstance(numeric_level, int):
            raise LoggerError(f"Invalid log level: {level}")

        self.level = numeric_level
        self.log_file = log_file
        self.console_output = console_output

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = JSONFormatter()
        if console_output:
            stream_handler = logging.StreamHandler(sys.stdout)
            stream_handler.setFormatter(formatter)
            self.logger.addHandler(stream_handler)
        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

        self.logger.setLevel(numeric_level)

    def initialize(self, config_path: Optional[str] = None) -> None:
        """
        Apply the `system.loggers.structured_logger` configuration section.

        Settings absent from the section keep their current values. A missing
        configuration file leaves the logger unchanged.
        """
        try:
            config = get_component_config(self.CONFIG_SECTION, config_path)
        except ConfigurationError:
            return

        self._configure(
            config.get("level", logging.getLevelName(self.level)),
            config.get("log_file", self.log_file),
            config.get("console_output", self.console_output),
        )

    def _log(self, level: int, message: Any) -> None:
        """Internal logging method."""
        if isinstance(message, dict):
            payload = message
        else:
            payload = {"message": str(message)}
        self.logger.log(level, payload.get("message", ""), extra={"structured": payload})

    def debug(self, message: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message)

    def info(self, message: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message)

    def warning(self, message: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message)

    def error(self, message: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message)

    def critical(self, message: Any) -> None:
        """Log critical message."""
        self._log(logging.CRITICAL, message)
