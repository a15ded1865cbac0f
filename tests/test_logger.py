"""
Tests for logging setup.
"""

import logging

import pytest
from rich.logging import RichHandler

from docflow.utils.logger import configure_logging, get_logger, set_log_level


class TestLogger:
    """Test cases for logging helpers."""

    def test_get_logger(self):
        assert get_logger("docflow.engine").name == "docflow.engine"

    def test_get_logger_requires_name(self):
        with pytest.raises(ValueError):
            get_logger("")

    def test_rich_console_handler(self):
        configure_logging("DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)

    def test_plain_handler_and_file(self, temp_dir):
        log_file = temp_dir / "docflow.log"
        configure_logging("INFO", use_rich=False, log_file=str(log_file))

        logging.getLogger("docflow.test").info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert len(logging.getLogger().handlers) == 2
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_set_log_level(self):
        configure_logging("INFO")
        set_log_level("error")

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert all(handler.level == logging.ERROR for handler in root.handlers)

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")
