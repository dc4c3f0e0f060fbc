"""R-multiple (reward expressed in units of initial risk) calculations"""

from decimal import Decimal
from typing import Optional

from ..models.trade import Direction
from .pnl import price_delta


def calculate_risk(entry_price: Decimal, stop_loss: Decimal) -> Decimal:
    """Initial risk per unit: distance from entry to stop."""
    return abs(entry_price - stop_loss)


def calculate_r_multiple(
    entry_price: Decimal,
    exit_price: Optional[Decimal],
    stop_loss: Optional[Decimal],
    direction: Direction
) -> Optional[Decimal]:
    """
    Calculate the R-multiple of a closed trade

    R = reward / |entry - stop|

    Args:
        entry_price: Entry price
        exit_price: Exit price (None while open)
        stop_loss: Initial stop (None if not recorded)
        direction: Trade direction

    Returns:
        Signed R-multiple, or None when there is no exit, no stop, or the
        stop sits on the entry price
    """
    if exit_price is None or stop_loss is None:
        return None

    risk = calculate_risk(entry_price, stop_loss)
    if risk <= 0:
        return None

    reward = price_delta(direction, entry_price, exit_price)
    return reward / risk


def format_r_multiple(r_multiple: Optional[Decimal], decimals: int = 2) -> str:
    """Display form: ``+2.00R``, ``-0.50R``, ``-`` when absent."""
    if r_multiple is None:
        return "-"
    sign = "+" if r_multiple >= 0 else ""
    return f"{sign}{r_multiple:.{decimals}f}R"
