"""
Decode/encode hook pairs for the structured and text boundaries.
"""

from . import json_codec, text_codec
from .json_codec import NullableBoolEncoder, dumps

__all__ = [
    "json_codec",
    "text_codec",
    "NullableBoolEncoder",
    "dumps",
]
