"""
nullbool logging package.

- config: logging configuration object
- formatters: JSON, console and Rich output
- loggers: logger wrapper carrying correlation IDs and context
- manager: singleton that installs handlers on the ``nullbool`` logger
"""

from .config import LoggingConfig, create_default_config
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler
from .loggers import NullBoolLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "create_default_config",
    "LoggingManager",
    "configure_logging",
    "logging_manager",
    "NullBoolLogger",
    "get_logger",
    "StructuredFormatter",
    "create_console_formatter",
    "create_rich_handler",
]
