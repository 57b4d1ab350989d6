"""
NullableBool: a boolean with a validity flag.

The value bridges relational NULL, JSON ``false``/absence and free-text
boolean forms. A false value and a null value are written identically: both
serialize as ``false`` in JSON and text output, so the distinction is lost
once a value leaves the process. Decoding collapses them the same way; only
the relational boundary keeps a valid false apart from NULL.
"""

import enum
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional, Union

from nullbool.constants import (
    LENIENT_FALSE_LITERALS,
    LENIENT_TRUE_LITERALS,
    NULL_BOOL_VALID_FIELD,
    NULL_BOOL_VALUE_FIELD,
    STRICT_FALSE_LITERALS,
    STRICT_TRUE_LITERALS,
    TEXT_FALSE,
    TEXT_NULL_LITERALS,
    TEXT_TRUE,
)
from nullbool.exceptions import InvalidInputError, TypeMismatchError


class NullBoolPair(NamedTuple):
    """Layout of a nullable boolean column: ``(value, valid)``."""

    value: bool
    valid: bool


class ParseMode(enum.Enum):
    STRICT = "strict"
    LENIENT = "lenient"
    EXISTENCE = "existence"

    def __str__(self):
        return self.value


def _as_text(data: Union[str, bytes, bytearray]) -> str:
    if isinstance(data, (bytes, bytearray)):
        try:
            return bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInputError(bytes(data)) from e
    return data


def _reject_constant(name: str):
    # NaN and the infinities are not JSON
    raise ValueError(f"non-JSON constant {name}")


@dataclass(eq=False)
class NullableBool:
    """A nullable boolean.

    ``value`` is meaningful only while ``valid`` is true; every reader treats
    an invalid value as false.
    """

    value: bool = False
    valid: bool = False

    # Construction

    @classmethod
    def new(cls, value: bool, valid: bool) -> "NullableBool":
        return cls(value, valid)

    @classmethod
    def from_bool(cls, value: bool) -> "NullableBool":
        """Wrap a definite boolean; the result is always valid."""
        return cls(value, True)

    @classmethod
    def from_optional(cls, value: Optional[bool]) -> "NullableBool":
        """Build from an optional boolean; ``None`` gives a null value."""
        if value is None:
            return cls(False, False)
        return cls(value, True)

    @classmethod
    def from_null_bool(cls, pair) -> "NullableBool":
        """Build from a ``(value, valid)`` pair as read from a nullable column."""
        value, valid = pair
        return cls(bool(value), bool(valid))

    @classmethod
    def from_string_strict(cls, s: str, valid: bool) -> "NullableBool":
        """Parse ``s`` only when ``valid`` is requested.

        Case-sensitive: ``"1"``/``"true"`` and ``"0"``/``"false"`` are the only
        accepted forms. The empty string and anything unrecognized are null.
        """
        if valid:
            if s == "":
                return cls(False, False)
            if s in STRICT_TRUE_LITERALS:
                return cls(True, True)
            if s in STRICT_FALSE_LITERALS:
                return cls(False, True)
        return cls(False, False)

    @classmethod
    def from_string(cls, s: str) -> "NullableBool":
        """Lenient parse.

        The empty string is a valid false here, unlike the strict variant.
        Unrecognized strings are null.
        """
        if s == "":
            return cls(False, True)
        if s in LENIENT_TRUE_LITERALS:
            return cls(True, True)
        if s in LENIENT_FALSE_LITERALS:
            return cls(False, True)
        return cls(False, False)

    @classmethod
    def from_string_existence(cls, s: str, flag: bool) -> "NullableBool":
        """True only when ``s`` is non-empty and ``flag`` is set. Never null."""
        if s == "" or not flag:
            return cls(False, True)
        return cls(True, True)

    @classmethod
    def parse(
        cls, s: str, mode: ParseMode = ParseMode.LENIENT, flag: bool = True
    ) -> "NullableBool":
        """Dispatch to one of the string constructors by mode.

        ``flag`` is the requested validity for STRICT and the existence flag
        for EXISTENCE; LENIENT ignores it.
        """
        if mode is ParseMode.STRICT:
            return cls.from_string_strict(s, flag)
        if mode is ParseMode.EXISTENCE:
            return cls.from_string_existence(s, flag)
        if mode is ParseMode.LENIENT:
            return cls.from_string(s)
        raise ValueError(f"Unknown parse mode: {mode!r}")

    @classmethod
    def from_structured(cls, node: Any) -> "NullableBool":
        result = cls()
        result.decode_structured(node)
        return result

    @classmethod
    def from_json(cls, data: Union[str, bytes, bytearray]) -> "NullableBool":
        result = cls()
        result.unmarshal_json(data)
        return result

    @classmethod
    def from_text(cls, text: Union[str, bytes, bytearray]) -> "NullableBool":
        result = cls()
        result.unmarshal_text(text)
        return result

    # Decoding

    def decode_structured(self, node: Any) -> None:
        """Decode a JSON-like node into this value.

        Accepts a bool, a ``{"Bool": ..., "Valid": ...}`` mapping or ``None``.
        Whatever was decoded, the value ends up valid only if it is true.
        Raises TypeMismatchError for any other node kind, leaving the value
        null.
        """
        error = None
        if isinstance(node, bool):
            self.value = node
        elif isinstance(node, Mapping):
            error = self._decode_null_bool_mapping(node)
        elif node is None:
            self.valid = False
            return
        else:
            error = TypeMismatchError(type(node).__name__)

        self.valid = error is None and self.value
        if error is not None:
            raise error

    def _decode_null_bool_mapping(self, node: Mapping) -> Optional[TypeMismatchError]:
        # Field names match case-insensitively; absent or null fields keep
        # their current value, unknown keys are ignored.
        error = None
        for key, field_value in node.items():
            if not isinstance(key, str) or field_value is None:
                continue
            name = key.lower()
            if name == NULL_BOOL_VALUE_FIELD.lower():
                attr = "value"
            elif name == NULL_BOOL_VALID_FIELD.lower():
                attr = "valid"
            else:
                continue
            if isinstance(field_value, bool):
                setattr(self, attr, field_value)
            elif error is None:
                error = TypeMismatchError(
                    type(field_value).__name__, target=f"NullableBool.{key}"
                )
        return error

    def unmarshal_json(self, data: Union[str, bytes, bytearray]) -> None:
        """Decode JSON text into this value.

        Input that is not JSON (including NaN, Infinity and nesting too deep to
        parse) raises InvalidInputError carrying the input as given and leaves
        the value untouched; well-formed JSON follows :meth:`decode_structured`.
        """
        text = _as_text(data)
        try:
            node = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise InvalidInputError(data) from e
        self.decode_structured(node)

    def unmarshal_text(self, data: Union[str, bytes, bytearray]) -> None:
        """Decode one of ``""``, ``"null"``, ``"true"`` or ``"false"``.

        ``"false"`` decodes as null, like the empty string and ``"null"``.
        Any other text raises InvalidInputError and leaves the value null.
        """
        try:
            text = _as_text(data)
        except InvalidInputError:
            self.valid = False
            raise
        if text in TEXT_NULL_LITERALS:
            self.valid = False
            return
        if text == TEXT_TRUE:
            self.value = True
        elif text == TEXT_FALSE:
            self.value = False
        else:
            self.valid = False
            raise InvalidInputError(data)
        self.valid = self.value

    # Encoding

    def to_json(self) -> str:
        if self.is_zero():
            return TEXT_FALSE
        return TEXT_TRUE

    def marshal_json(self) -> bytes:
        return self.to_json().encode("ascii")

    def to_text(self) -> str:
        if self.is_zero():
            return TEXT_FALSE
        return TEXT_TRUE

    def to_null_bool(self) -> NullBoolPair:
        return NullBoolPair(self.value, self.valid)

    # Accessors and mutation

    def set_valid(self, value: bool) -> None:
        """Set the value and mark it non-null."""
        self.value = value
        self.valid = True

    def ptr(self) -> Optional[bool]:
        """Return the value, or ``None`` when null."""
        if not self.valid:
            return None
        return self.value

    def is_zero(self) -> bool:
        """True for null or false values."""
        return not self.valid or not self.value

    def overwrite_if_valid(self, value: bool, valid: bool) -> None:
        """Copy ``value`` and ``valid`` in only when ``valid`` is set."""
        if valid:
            self.value = value
            self.valid = valid

    def copy(self) -> "NullableBool":
        return type(self)(self.value, self.valid)

    # Three-valued algebra: any null operand gives a null result

    def and_(self, other: "NullableBool") -> "NullableBool":
        if self.valid and other.valid:
            return NullableBool(self.value and other.value, True)
        return NullableBool(False, False)

    def or_(self, other: "NullableBool") -> "NullableBool":
        if self.valid and other.valid:
            return NullableBool(self.value or other.value, True)
        return NullableBool(False, False)

    def xor(self, other: "NullableBool") -> "NullableBool":
        x, y = self.value, other.value
        if self.valid and other.valid:
            return NullableBool((x or y) and not (x and y), True)
        return NullableBool(False, False)

    def non(self) -> None:
        """Negate in place; a null value is left as is."""
        if self.valid:
            self.value = not self.value

    def __and__(self, other):
        if not isinstance(other, NullableBool):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, NullableBool):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other):
        if not isinstance(other, NullableBool):
            return NotImplemented
        return self.xor(other)

    # Python protocol

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return self.to_text()

    def __eq__(self, other):
        if not isinstance(other, NullableBool):
            return NotImplemented
        if not self.valid and not other.valid:
            return True
        return self.valid == other.valid and self.value == other.value

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        from nullbool.integrations.pydantic_schema import nullable_bool_core_schema

        return nullable_bool_core_schema()

    @classmethod
    def __get_pydantic_json_schema__(cls, schema, handler):
        return {"type": "boolean"}
