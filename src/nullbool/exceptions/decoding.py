"""
Decoding exceptions.

Raised by the structured (JSON) and text boundaries when input cannot be
read as a NullableBool.
"""

from typing import Union

from .base import NullBoolError


class DecodeError(NullBoolError):
    """Base class for decode failures."""
    pass


class TypeMismatchError(DecodeError, TypeError):
    """Raised when a structured node is not a bool, a null-bool mapping or null."""

    error_code = "DECODE_TYPE_MISMATCH"
    help_text = "Expected true, false, null or an object with Bool/Valid fields"

    def __init__(self, kind: str, target: str = "NullableBool"):
        self.kind = kind
        super().__init__(
            f"json: cannot unmarshal {kind} into value of type {target}", kind=kind
        )


class InvalidInputError(DecodeError, ValueError):
    """Raised when input text is outside the recognized forms.

    ``text`` is the input exactly as received, bytes included.
    """

    error_code = "DECODE_INVALID_INPUT"
    help_text = 'Accepted literals are "", "null", "true" and "false"'

    def __init__(self, text: Union[str, bytes]):
        self.text = text
        shown = text if isinstance(text, str) else repr(text)
        super().__init__(f"invalid input: {shown}", input=text)
