"""
pydantic support for NullableBool fields.

Validation decodes the field's input with the structured rules; serialization
always writes a plain boolean, so a null field dumps as ``false``.
"""

from typing import Any

from pydantic_core import PydanticCustomError, core_schema

from nullbool.exceptions import DecodeError
from nullbool.logging import get_logger
from nullbool.models import NullableBool

logger = get_logger(__name__)


def _validate(value: Any) -> NullableBool:
    if isinstance(value, NullableBool):
        return value.copy()
    try:
        return NullableBool.from_structured(value)
    except DecodeError as e:
        logger.debug("Rejected NullableBool field input", **e.to_dict())
        raise PydanticCustomError(
            "nullable_bool_type", "{message}", {"message": e.message}
        ) from e


def _serialize(value: NullableBool) -> bool:
    return not value.is_zero()


def nullable_bool_core_schema() -> core_schema.CoreSchema:
    """Core schema used by ``NullableBool.__get_pydantic_core_schema__``."""
    return core_schema.no_info_plain_validator_function(
        _validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            _serialize, return_schema=core_schema.bool_schema()
        ),
    )
