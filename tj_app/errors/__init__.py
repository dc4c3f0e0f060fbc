"""
Error classification for the trade analytics engine.

Trade input errors describe a single bad snapshot and leave the engine
usable; reference data errors describe broken configuration tables.
"""

from .trade_input import (
    TradeInputError,
    InvalidTradeInputError,
    MalformedTradeDataError,
)
from .reference_data import (
    ReferenceDataError,
    UnknownTimeframeError,
    ConfigurationError,
)

__all__ = [
    # Trade Input Errors
    "TradeInputError",
    "InvalidTradeInputError",
    "MalformedTradeDataError",
    # Reference Data Errors
    "ReferenceDataError",
    "UnknownTimeframeError",
    "ConfigurationError",
]
