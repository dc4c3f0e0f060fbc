"""Trade input snapshot fed to the analytics engine."""

from dataclasses import dataclass, fields, replace
from datetime import date, time
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional

from ..errors import MalformedTradeDataError
from ..utils.time import parse_trade_date, parse_wall_clock


class Direction(str, Enum):
    """Trade direction."""
    LONG = "long"
    SHORT = "short"

    @classmethod
    def parse(cls, value: Any) -> "Direction":
        """Accept ``Long``/``SHORT``/``buy``/``sell`` spellings."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text in ("long", "buy"):
            return cls.LONG
        if text in ("short", "sell"):
            return cls.SHORT
        raise MalformedTradeDataError(
            f"Invalid direction: {value!r}",
            raw_value=value,
            expected_format="Long | Short"
        )


def to_decimal(value: Any, field_name: str = "value") -> Decimal:
    """
    Convert a numeric value to Decimal without binary float artefacts.

    Floats go through ``str`` so ``1.1`` stays ``Decimal('1.1')``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise MalformedTradeDataError(f"Invalid {field_name}: {value!r}", raw_value=value)
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise MalformedTradeDataError(
            f"Invalid {field_name}: {value!r}",
            raw_value=value,
            expected_format="decimal number"
        ) from e
    if not result.is_finite():
        raise MalformedTradeDataError(f"Non-finite {field_name}: {value!r}", raw_value=value)
    return result


_REQUIRED_DECIMALS = ("entry_price", "lot_size", "commission", "swap")
_OPTIONAL_DECIMALS = ("exit_price", "stop_loss", "take_profit")
_DATES = ("entry_date", "exit_date")
_TIMES = ("entry_time", "exit_time")


@dataclass(frozen=True)
class TradeInput:
    """Immutable snapshot of one journal trade."""
    symbol: str
    direction: Direction
    entry_price: Decimal
    lot_size: Decimal
    exit_price: Optional[Decimal] = None       # None while the trade is open
    stop_loss: Optional[Decimal] = None
    take_profit: Optional[Decimal] = None
    commission: Decimal = Decimal("0")          # Always a cost
    swap: Decimal = Decimal("0")                # Signed credit/debit

    # Wall-clock values in the journal's reference timezone
    entry_date: Optional[date] = None
    entry_time: Optional[time] = None
    exit_date: Optional[date] = None
    exit_time: Optional[time] = None

    analysis_timeframe: Optional[str] = None   # HTF label, e.g. "Daily"
    entry_timeframe: Optional[str] = None      # LTF label, e.g. "M15"

    trade_id: Optional[str] = None

    def __post_init__(self):
        """Coerce numeric, direction, date and time fields into their canonical types."""
        object.__setattr__(self, "direction", Direction.parse(self.direction))
        for name in _REQUIRED_DECIMALS:
            object.__setattr__(self, name, to_decimal(getattr(self, name), name))
        for name in _OPTIONAL_DECIMALS:
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, to_decimal(value, name))
        for name in _DATES:
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, parse_trade_date(value))
        for name in _TIMES:
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, parse_wall_clock(value))

    @property
    def is_closed(self) -> bool:
        """A trade is closed once an exit price is recorded."""
        return self.exit_price is not None

    @property
    def has_timeframe_pair(self) -> bool:
        return bool(self.analysis_timeframe) and bool(self.entry_timeframe)

    def with_changes(self, **changes: Any) -> "TradeInput":
        """Return a new snapshot with the given fields replaced."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown trade fields: {sorted(unknown)}")
        return replace(self, **changes)
