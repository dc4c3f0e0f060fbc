"""Profit and loss calculation for a single closed trade"""

from decimal import Decimal

from ..errors import InvalidTradeInputError
from ..models.metrics import PnLBreakdown
from ..models.trade import Direction, TradeInput


def price_delta(direction: Direction, entry_price: Decimal, exit_price: Decimal) -> Decimal:
    """
    Favourable price movement for the trade's direction.

    Long: exit - entry. Short: entry - exit.
    """
    if direction == Direction.LONG:
        return exit_price - entry_price
    return entry_price - exit_price


def calculate_gross_pnl(trade: TradeInput, multiplier: Decimal) -> Decimal:
    """
    Gross PnL before costs

    gross = delta * lot_size * multiplier
    """
    if trade.exit_price is None:
        raise InvalidTradeInputError(
            "PnL requires an exit price",
            field="exit_price",
            value=None
        )
    delta = price_delta(trade.direction, trade.entry_price, trade.exit_price)
    return delta * trade.lot_size * multiplier


def calculate_pnl(trade: TradeInput, multiplier: Decimal) -> PnLBreakdown:
    """
    Gross and net PnL of a closed trade

    net = gross - |commission| + swap

    Commission is always debited whatever sign it was stored with; swap is
    added as-is. No rounding is applied.

    Args:
        trade: Closed trade snapshot
        multiplier: Contract multiplier for the trade's symbol

    Returns:
        PnLBreakdown with gross and net values

    Raises:
        InvalidTradeInputError: If the trade has no exit price
    """
    gross = calculate_gross_pnl(trade, multiplier)
    net = gross - abs(trade.commission) + trade.swap
    return PnLBreakdown(gross=gross, net=net)
