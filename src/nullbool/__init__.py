"""
nullbool: a tri-state boolean for database, JSON and text boundaries

NullableBool pairs a boolean with a validity flag and defines conversion rules
between relational NULL, JSON and free-text boolean forms, plus a small
three-valued algebra in which an unknown operand makes the result unknown.
False and null are written identically on every output path.

Package layout:
- models: the NullableBool value type and its parse modes
- codecs: structured (JSON) and text decode/encode hooks
- integrations: pydantic field support and a SQLAlchemy column type
- exceptions, logging, config: shared plumbing
"""

__version__ = "0.1.0"

from .exceptions import (
    DecodeError,
    InvalidInputError,
    NullBoolError,
    TypeMismatchError,
)
from .models import NullableBool, NullBoolPair, ParseMode

__all__ = [
    "NullableBool",
    "NullBoolPair",
    "ParseMode",
    "NullBoolError",
    "DecodeError",
    "TypeMismatchError",
    "InvalidInputError",
]
