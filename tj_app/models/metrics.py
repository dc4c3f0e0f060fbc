"""Derived metric models produced by the analytics engine"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

import orjson


class TradeOutcome(str, Enum):
    """Result of a trade from its net PnL."""
    PENDING = "pending"
    WIN = "win"
    LOSS = "loss"
    BREAKEVEN = "breakeven"


class TradingSession(str, Enum):
    """Named windows of the trading day."""
    ASIAN = "Asian"
    LONDON = "London"
    NEW_YORK = "NewYork"
    LONDON_NEW_YORK_OVERLAP = "LondonNewYorkOverlap"
    OFF_HOURS = "OffHours"


class AlignmentClassification(str, Enum):
    """Why an analysis/entry timeframe pair is or is not aligned."""
    TOP_DOWN = "top_down"
    SAME_TIMEFRAME = "same_timeframe"
    INVERTED = "inverted"            # Entry coarser than analysis
    TOO_GRANULAR = "too_granular"    # Entry finer than the threshold


class TimeframeType(str, Enum):
    HTF = "HTF"
    LTF = "LTF"


@dataclass(frozen=True)
class PnLBreakdown:
    """Gross and net profit of a closed trade"""
    gross: Decimal
    net: Decimal


@dataclass(frozen=True)
class AlignmentResult:
    """Outcome of an HTF/LTF alignment check"""
    valid: bool
    recommended_max_entry_timeframe: Optional[str]   # None when nothing finer is aligned
    classification: AlignmentClassification
    analysis_timeframe: str           # Canonical labels
    entry_timeframe: str


@dataclass(frozen=True)
class TradeMetrics:
    """Complete metric bundle for one trade snapshot"""
    outcome: TradeOutcome
    multiplier: Decimal
    pnl: Optional[Decimal] = None
    gross_pnl: Optional[Decimal] = None
    r_multiple: Optional[Decimal] = None
    session: Optional[TradingSession] = None
    alignment: Optional[AlignmentResult] = None
    duration_minutes: Optional[int] = None

    @property
    def timeframe_aligned(self) -> Optional[bool]:
        return self.alignment.valid if self.alignment is not None else None

    @property
    def recommended_max_entry_timeframe(self) -> Optional[str]:
        if self.alignment is None:
            return None
        return self.alignment.recommended_max_entry_timeframe

    def to_dict(self) -> dict[str, Any]:
        """
        Flatten into the record stored next to the trade.

        Decimals are rendered as strings so no precision is lost on the way
        into the persistence layer.
        """
        return {
            "pnl": _decimal_str(self.pnl),
            "gross_pnl": _decimal_str(self.gross_pnl),
            "outcome": self.outcome.value,
            "r_multiple": _decimal_str(self.r_multiple),
            "session": self.session.value if self.session is not None else None,
            "timeframe_aligned": self.timeframe_aligned,
            "recommended_max_entry_timeframe": self.recommended_max_entry_timeframe,
            "alignment_classification": (
                self.alignment.classification.value if self.alignment is not None else None
            ),
            "duration_minutes": self.duration_minutes,
            "multiplier": _decimal_str(self.multiplier),
        }

    def to_json(self) -> bytes:
        """Serialize ``to_dict`` output as JSON bytes."""
        return orjson.dumps(self.to_dict())


def _decimal_str(value: Optional[Decimal]) -> Optional[str]:
    return str(value) if value is not None else None
