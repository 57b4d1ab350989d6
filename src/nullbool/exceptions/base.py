"""
Base exception class for nullbool.

Every error carries a code, a short hint and the offending details as
keyword fields, so the same object renders for people and for JSON logs.
"""

import uuid
from typing import Any, Dict, Optional


class NullBoolError(Exception):
    """Base exception for all nullbool errors.

    Subclasses set ``error_code`` and ``help_text`` at class level and pass
    the offending values as ``details`` (``kind``, ``input``, ``field`` ...).
    """

    error_code: Optional[str] = None
    help_text: Optional[str] = None

    def __init__(self, message: str, **details: Any):
        self.message = message
        self.details = details
        self.correlation_id = str(uuid.uuid4())[:8]
        super().__init__(message)

    def __str__(self) -> str:
        result = self.message
        if self.details:
            rendered = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            result += f" ({rendered})"
        if self.help_text:
            result += f"\nHelp: {self.help_text}"
        return f"{result}\nError ID: {self.correlation_id}"

    def to_dict(self) -> Dict[str, Any]:
        """Flat mapping for structured log records."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "correlation_id": self.correlation_id,
            **self.details,
        }
