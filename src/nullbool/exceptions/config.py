"""
Configuration-related exceptions.
"""

from typing import Any, List

from .base import NullBoolError


class ConfigurationError(NullBoolError):
    """Base class for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration source cannot be read."""

    error_code = "CONFIG_INVALID"

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid configuration for '{field}': got {value!r}, expected {expected}",
            field=field,
        )


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    error_code = "CONFIG_VALIDATION"
    help_text = "Fix the validation errors listed above"

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"
        super().__init__(message)
