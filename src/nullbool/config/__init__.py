"""
Configuration management for nullbool.
"""

from .manager import ConfigManager
from .models import LoggingConfig, LogLevel, NullBoolConfig, NullBoolSettings

__all__ = [
    "ConfigManager",
    "LoggingConfig",
    "LogLevel",
    "NullBoolConfig",
    "NullBoolSettings",
]
