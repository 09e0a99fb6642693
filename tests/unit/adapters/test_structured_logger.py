"""
Unit tests for the StructuredLogger implementation.
"""

import json
import logging

import pytest

from wavechat.adapters.loggers import StructuredLogger
from wavechat.core.exceptions import LoggerError


def read_single_record(path):
    with open(path, "r", encoding="utf-8") as f:
        lines = [line for line in f.read().splitlines() if line]
    assert len(lines) == 1
    return json.loads(lines[0])


class TestStructuredLogger:
    """Test cases for the StructuredLogger."""

    def test_initialization(self):
        """Test logger initialization."""
        logger = StructuredLogger(name="test_logger")
        assert logger.name == "test_logger"
        assert logger.logger.level == logging.INFO

    def test_invalid_level(self):
        with pytest.raises(LoggerError):
            StructuredLogger(name="test_bad_level", level="LOUD")

    def test_log_levels(self):
        """Test all log levels work correctly."""
        logger = StructuredLogger(name="test_levels_logger", console_output=False)

        # These should not raise exceptions
        logger.debug({"action": "TEST", "message": "Debug message"})
        logger.info({"action": "TEST", "message": "Info message"})
        logger.warning({"action": "TEST", "message": "Warning message"})
        logger.error({"action": "TEST", "message": "Error message"})
        logger.critical({"action": "TEST", "message": "Critical message"})

    def test_log_to_file(self, tmp_path):
        """Test logging to a file."""
        log_file = tmp_path / "wavechat.log"
        logger = StructuredLogger(
            name="test_file_logger",
            level="INFO",
            log_file=str(log_file),
            console_output=False,
        )

        logger.info({"action": "FILE_TEST", "message": "File logging test"})

        log_data = read_single_record(log_file)
        assert log_data["action"] == "FILE_TEST"
        assert log_data["message"] == "File logging test"
        assert log_data["logger"] == "test_file_logger"
        assert log_data["level"] == "INFO"

    def test_level_filtering(self, tmp_path):
        log_file = tmp_path / "filtered.log"
        logger = StructuredLogger(
            name="test_filter_logger", level="WARNING", log_file=str(log_file), console_output=False
        )

        logger.info({"action": "IGNORED", "message": "Below threshold"})
        logger.warning({"action": "KEPT", "message": "At threshold"})

        assert read_single_record(log_file)["action"] == "KEPT"

    def test_plain_string_message(self, tmp_path):
        log_file = tmp_path / "plain.log"
        logger = StructuredLogger(name="test_plain_logger", log_file=str(log_file), console_output=False)

        logger.info("just text")

        log_data = read_single_record(log_file)
        assert log_data["action"] == "LOG"
        assert log_data["message"] == "just text"

    def test_structured_data(self, tmp_path):
        """Test logging with structured data."""
        log_file = tmp_path / "data.log"
        logger = StructuredLogger(name="test_data_logger", log_file=str(log_file), console_output=False)

        test_data = {
            "conversation_id": "1",
            "tags": ["Question", "Task"],
            "metadata": {"source": "test"},
        }
        logger.info({
            "action": "DATA_TEST",
            "message": "Testing structured data",
            "data": test_data,
        })

        log_data = read_single_record(log_file)
        assert log_data["action"] == "DATA_TEST"
        assert log_data["data"] == test_data

    def test_exception_logging(self, tmp_path):
        """Test logging exceptions."""
        log_file = tmp_path / "exception.log"
        logger = StructuredLogger(name="test_exception_logger", log_file=str(log_file), console_output=False)

        try:
            raise ValueError("Test exception")
        except ValueError as e:
            logger.error({
                "action": "EXCEPTION_TEST",
                "message": "Testing exception logging",
                "exception": e,
            })

        log_data = read_single_record(log_file)
        assert log_data["action"] == "EXCEPTION_TEST"
        assert log_data["exception"]["type"] == "ValueError"
        assert log_data["exception"]["message"] == "Test exception"
        assert isinstance(log_data["exception"]["traceback"], list)

    def test_initialize_from_config(self, tmp_path):
        log_file = tmp_path / "configured.log"
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "system:\n"
            "  loggers:\n"
            "    structured_logger:\n"
            "      level: DEBUG\n"
            f"      log_file: {log_file}\n"
            "      console_output: false\n"
        )

        logger = StructuredLogger(name="test_configured_logger")
        logger.initialize(str(config_file))
        logger.debug({"action": "CONFIGURED", "message": "Debug now enabled"})

        assert logger.level == logging.DEBUG
        assert logger.console_output is False
        assert read_single_record(log_file)["action"] == "CONFIGURED"

    def test_initialize_without_config_file(self, tmp_path):
        logger = StructuredLogger(name="test_unconfigured_logger", level="ERROR", console_output=False)
        logger.initialize(str(tmp_path / "missing.yaml"))

        assert logger.level == logging.ERROR
