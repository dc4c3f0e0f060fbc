"""
Trade input error classifications.

Raised when a trade snapshot cannot be annotated. The caller decides whether
to block the save, warn, or store the trade without derived metrics.
"""

from typing import Any, Dict, Optional


class TradeInputError(Exception):
    """Base class for problems with a single trade snapshot."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidTradeInputError(TradeInputError):
    """A field holds a value the engine refuses to compute with."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class MalformedTradeDataError(TradeInputError):
    """Raw journal data exists but cannot be parsed."""

    def __init__(self, message: str, raw_value: Any = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value
        self.expected_format = expected_format
