"""Per-trade analytics: PnL, outcome, R-multiple, session and timeframe alignment"""

from .assets import AssetRegistry
from .calculator import MetricsCalculator
from .outcome import classify_outcome
from .pnl import calculate_pnl
from .risk import calculate_r_multiple, format_r_multiple
from .session import SessionDetector
from .timeframe import TimeframeAlignmentValidator

__all__ = [
    "MetricsCalculator",
    "AssetRegistry",
    "SessionDetector",
    "TimeframeAlignmentValidator",
    "calculate_pnl",
    "calculate_r_multiple",
    "format_r_multiple",
    "classify_outcome",
]
