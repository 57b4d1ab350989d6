"""
Unit tests for LoggingManager.
"""

import logging
import logging.handlers
import sys

import pytest

from nullbool.logging.config import LoggingConfig, create_default_config
from nullbool.logging.formatters import StructuredFormatter
from nullbool.logging.manager import LoggingManager


@pytest.mark.unit
class TestLoggingManager:
    """Test handler installation on the nullbool logger."""

    def setup_method(self):
        self._original_instance = LoggingManager._instance
        self._original_initialized = LoggingManager._initialized
        self._package_logger = logging.getLogger("nullbool")
        self._original_handlers = self._package_logger.handlers[:]
        self._original_level = self._package_logger.level

        LoggingManager._instance = None
        LoggingManager._initialized = False
        self.manager = LoggingManager()

    def teardown_method(self):
        for handler in self.manager.handlers:
            handler.close()
        self._package_logger.handlers[:] = self._original_handlers
        self._package_logger.setLevel(self._original_level)

        LoggingManager._instance = self._original_instance
        LoggingManager._initialized = self._original_initialized

    def test_singleton_pattern(self):
        assert LoggingManager() is self.manager

    def test_default_config(self):
        config = create_default_config()
        assert config.level == logging.INFO
        assert config.output == ["console"]
        assert config.service_name == "nullbool"

    def test_level_names_are_resolved(self):
        assert LoggingConfig(level="debug").level == logging.DEBUG

    def test_configure_console_output(self):
        self.manager.configure(LoggingConfig(level=logging.DEBUG))

        assert self._package_logger.level == logging.DEBUG
        assert len(self.manager.handlers) == 1
        handler = self.manager.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_configure_json_output(self):
        self.manager.configure(LoggingConfig(format_type="json"))
        assert isinstance(self.manager.handlers[0].formatter, StructuredFormatter)

    def test_configure_file_output(self, temp_dir):
        log_file = temp_dir / "logs" / "nullbool.log"

        self.manager.configure(
            LoggingConfig(output=["console", "file"], file_path=log_file)
        )

        handler_types = [type(h) for h in self.manager.handlers]
        assert logging.handlers.RotatingFileHandler in handler_types
        assert log_file.parent.exists()

    def test_reconfigure_replaces_handlers(self):
        self.manager.configure(LoggingConfig())
        first = self.manager.handlers[0]

        self.manager.configure(LoggingConfig())

        assert len(self.manager.handlers) == 1
        assert first not in self._package_logger.handlers

    def test_root_logger_untouched(self):
        root_handlers = logging.getLogger().handlers[:]
        self.manager.configure(LoggingConfig())
        assert logging.getLogger().handlers == root_handlers
