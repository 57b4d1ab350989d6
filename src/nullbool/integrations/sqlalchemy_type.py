"""
SQLAlchemy column type for NullableBool.

Maps a nullable BOOLEAN column to NullableBool: NULL reads as a null value,
any stored boolean reads as a valid value. Reads keep a stored false valid;
the false/null collapse only applies to JSON and text.
"""

from typing import Any, Optional

from sqlalchemy import Boolean
from sqlalchemy.types import TypeDecorator

from nullbool.exceptions import TypeMismatchError
from nullbool.logging import get_logger
from nullbool.models import NullableBool

logger = get_logger(__name__)


class NullableBoolType(TypeDecorator):
    """Nullable BOOLEAN column holding NullableBool values."""

    impl = Boolean
    cache_ok = True

    @property
    def python_type(self):
        return NullableBool

    def process_bind_param(self, value: Any, dialect) -> Optional[bool]:
        if value is None:
            return None
        if isinstance(value, NullableBool):
            return value.ptr()
        if isinstance(value, bool):
            return value
        logger.debug("Rejected bind parameter", kind=type(value).__name__)
        raise TypeMismatchError(type(value).__name__, target="NullableBoolType")

    def process_result_value(self, value: Optional[bool], dialect) -> NullableBool:
        if value is None:
            return NullableBool(False, False)
        return NullableBool.from_null_bool((value, True))
