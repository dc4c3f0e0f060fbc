"""
Reference data error classifications.

These cover the static tables the engine reads: timeframe ranks, entry
thresholds, session windows and asset multipliers.
"""

from typing import Any, Dict, Optional


class ReferenceDataError(Exception):
    """Base class for lookups or tables the engine cannot work with."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class UnknownTimeframeError(ReferenceDataError):
    """A timeframe label is missing from the rank or threshold table."""

    def __init__(self, message: str, label: Optional[str] = None,
                 field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.label = label
        self.field = field
        # Caller can still store the trade without an alignment result
        self.recoverable = True


class ConfigurationError(ReferenceDataError):
    """Reference tables failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
