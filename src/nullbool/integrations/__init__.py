"""
Adapters plugging NullableBool into pydantic and SQLAlchemy.
"""

from .pydantic_schema import nullable_bool_core_schema
from .sqlalchemy_type import NullableBoolType

__all__ = [
    "NullableBoolType",
    "nullable_bool_core_schema",
]
