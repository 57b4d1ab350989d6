"""
Text boundary for NullableBool.

Accepts exactly ``""``, ``"null"``, ``"true"`` and ``"false"``; writes
``"true"`` or ``"false"``.
"""

from typing import Union

from nullbool.models import NullableBool


def decode(text: Union[str, bytes, bytearray]) -> NullableBool:
    return NullableBool.from_text(text)


def encode(value: NullableBool) -> str:
    return value.to_text()
