from .nullable_bool import NullableBool, NullBoolPair, ParseMode

__all__ = [
    "NullableBool",
    "NullBoolPair",
    "ParseMode",
]
