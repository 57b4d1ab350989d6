"""
nullbool Exception Hierarchy

Exception Hierarchy:
    NullBoolError (base)
    ├── DecodeError
    │   ├── TypeMismatchError
    │   └── InvalidInputError
    └── ConfigurationError
        ├── InvalidConfigurationError
        └── ConfigurationValidationError

Construction, algebra and accessors never raise; absence is carried in-band
by the ``valid`` flag. Only the decode boundaries and configuration loading
raise.
"""

from .base import NullBoolError

# Configuration exceptions
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

# Decode exceptions
from .decoding import DecodeError, InvalidInputError, TypeMismatchError

__all__ = [
    # Base
    "NullBoolError",
    # Decoding
    "DecodeError",
    "TypeMismatchError",
    "InvalidInputError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
