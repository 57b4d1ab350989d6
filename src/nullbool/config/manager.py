"""
Configuration manager for nullbool.

Loads an optional TOML file, applies environment overrides and validates the
result.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from nullbool.exceptions.config import (
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from nullbool.logging import LoggingConfig as RuntimeLoggingConfig
from nullbool.logging import configure_logging, get_logger

from .models import NullBoolConfig, NullBoolSettings

logger = get_logger(__name__)

_LOGGING_OVERRIDES = {
    "nullbool_logging_level": "level",
    "nullbool_logging_format": "format",
    "nullbool_logging_output": "output",
    "nullbool_logging_file_path": "file_path",
}


class ConfigManager:
    """Load and validate nullbool configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else None
        self._config: Optional[NullBoolConfig] = None

    def load_config(self) -> NullBoolConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file and self.config_file.exists():
            config_data = self._load_toml_file()
            logger.debug("Loaded configuration file", path=str(self.config_file))

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = NullBoolConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            ) from e

        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        settings = NullBoolSettings()
        section = config_data.setdefault("logging", {})
        for setting_name, config_key in _LOGGING_OVERRIDES.items():
            value = getattr(settings, setting_name, None)
            if value:
                section[config_key] = value
        return config_data

    def reset(self) -> None:
        """Drop the cached configuration."""
        self._config = None

    def to_logging_config(self) -> RuntimeLoggingConfig:
        """Translate the validated logging section for the logging manager."""
        section = self.load_config().logging
        return RuntimeLoggingConfig(
            level=section.level.value,
            format_type=section.format,
            output=list(section.output),
            file_path=section.file_path,
            max_file_size=section.max_file_size,
            backup_count=section.backup_count,
        )

    def configure_logging(self) -> None:
        """Apply the configured logging setup."""
        configure_logging(self.to_logging_config())
        logger.debug("Logging configured")
