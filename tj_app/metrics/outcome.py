"""Win/loss/breakeven classification"""

from decimal import Decimal
from typing import Optional

from ..models.metrics import TradeOutcome


def classify_outcome(pnl: Optional[Decimal]) -> TradeOutcome:
    """
    Map net PnL to an outcome.

    None means the trade is still open. Zero is compared exactly; PnL built
    from decimal inputs has no float noise to absorb.
    """
    if pnl is None:
        return TradeOutcome.PENDING
    if pnl > 0:
        return TradeOutcome.WIN
    if pnl < 0:
        return TradeOutcome.LOSS
    return TradeOutcome.BREAKEVEN
