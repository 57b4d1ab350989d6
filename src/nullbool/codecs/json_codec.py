"""
Structured (JSON) boundary for NullableBool.

Decoding accepts ``true``, ``false``, ``null`` or a ``{"Bool", "Valid"}``
object. Encoding only ever emits ``true`` or ``false``.
"""

import json
from typing import Any, Union

from nullbool.models import NullableBool


def decode_node(node: Any) -> NullableBool:
    """Decode an already-parsed JSON value."""
    return NullableBool.from_structured(node)


def decode_json(data: Union[str, bytes, bytearray]) -> NullableBool:
    """Decode JSON text."""
    return NullableBool.from_json(data)


def encode(value: NullableBool) -> str:
    return value.to_json()


def to_native(value: NullableBool) -> bool:
    """The JSON-native boolean a NullableBool is written as."""
    return not value.is_zero()


class NullableBoolEncoder(json.JSONEncoder):
    """JSON encoder that writes NullableBool values as ``true``/``false``."""

    def default(self, o):
        if isinstance(o, NullableBool):
            return to_native(o)
        return super().default(o)


def dumps(obj: Any, **kwargs) -> str:
    """``json.dumps`` with NullableBool support."""
    kwargs.setdefault("cls", NullableBoolEncoder)
    return json.dumps(obj, **kwargs)
