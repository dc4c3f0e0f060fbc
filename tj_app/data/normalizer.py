"""
Trade record normalization for converting raw journal rows to TradeInput.

Journal rows arrive from forms, imports and the database with mixed key
styles (``entryPrice`` / ``entry_price``), numeric strings and empty strings
for unset fields.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

import orjson

from ..errors import MalformedTradeDataError
from ..logging.config import get_logger
from ..models.trade import Direction, TradeInput, to_decimal
from ..utils.time import parse_trade_date, parse_wall_clock

logger = get_logger(__name__)

# Raw key -> TradeInput field
FIELD_ALIASES: dict[str, str] = {
    "id": "trade_id",
    "trade_id": "trade_id",
    "tradeId": "trade_id",
    "symbol": "symbol",
    "asset": "symbol",
    "direction": "direction",
    "type": "direction",
    "side": "direction",
    "entry_price": "entry_price",
    "entryPrice": "entry_price",
    "exit_price": "exit_price",
    "exitPrice": "exit_price",
    "stop_loss": "stop_loss",
    "stopLoss": "stop_loss",
    "take_profit": "take_profit",
    "takeProfit": "take_profit",
    "lot_size": "lot_size",
    "lotSize": "lot_size",
    "lot": "lot_size",
    "commission": "commission",
    "swap": "swap",
    "entry_date": "entry_date",
    "entryDate": "entry_date",
    "entry_time": "entry_time",
    "entryTime": "entry_time",
    "exit_date": "exit_date",
    "exitDate": "exit_date",
    "exit_time": "exit_time",
    "exitTime": "exit_time",
    "analysis_timeframe": "analysis_timeframe",
    "analysisTimeframe": "analysis_timeframe",
    "tf_analise": "analysis_timeframe",
    "tfAnalise": "analysis_timeframe",
    "entry_timeframe": "entry_timeframe",
    "entryTimeframe": "entry_timeframe",
    "tf_entrada": "entry_timeframe",
    "tfEntrada": "entry_timeframe",
}

REQUIRED_FIELDS = ("symbol", "direction", "entry_price", "lot_size")
DECIMAL_FIELDS = ("entry_price", "exit_price", "stop_loss", "take_profit",
                  "lot_size", "commission", "swap")
DATE_FIELDS = ("entry_date", "exit_date")
TIME_FIELDS = ("entry_time", "exit_time")


@dataclass
class TradeNormalizationResult:
    """Result of trade normalization process."""
    # Normalized trade (None if invalid)
    trade: Optional[TradeInput] = None
    # Processing metadata
    success: bool = True
    error_msg: Optional[str] = None

    @classmethod
    def ok(cls, trade: TradeInput) -> "TradeNormalizationResult":
        """Create successful result with normalized trade."""
        return cls(trade=trade, success=True)

    @classmethod
    def error(cls, error_msg: str) -> "TradeNormalizationResult":
        """Create error result."""
        return cls(success=False, error_msg=error_msg)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


class TradeNormalizer:
    """
    Trade record normalization pipeline.

    Maps field names, drops blank values, and converts prices, dates and
    times into the types TradeInput expects.
    """

    def __init__(self, config: Optional[dict[str, Any]] = None):
        """
        Initialize trade normalizer with configuration.

        Args:
            config: Normalization configuration dict. ``zero_as_missing``
                treats ``0`` exit/stop/target prices as unset, which is how
                older journal rows stored an open trade.
        """
        self.config = config or {}
        self.zero_as_missing = self.config.get("zero_as_missing", True)
        self.logger = logger

    def normalize_trade(self, raw: Union[dict[str, Any], str, bytes]) -> TradeNormalizationResult:
        """
        Normalize a journal row into a TradeInput.

        Args:
            raw: Row as a dict or a JSON document

        Returns:
            TradeNormalizationResult with the trade or error information
        """
        if isinstance(raw, (str, bytes)):
            try:
                raw = orjson.loads(raw)
            except orjson.JSONDecodeError as e:
                return TradeNormalizationResult.error(f"Failed to parse trade JSON: {e}")

        if not isinstance(raw, dict):
            return TradeNormalizationResult.error(
                f"Trade record must be an object, got {type(raw).__name__}"
            )

        fields: dict[str, Any] = {}
        for key, value in raw.items():
            target = FIELD_ALIASES.get(key)
            if target is None or _is_blank(value):
                continue
            fields[target] = value

        for name in REQUIRED_FIELDS:
            if name not in fields:
                return TradeNormalizationResult.error(f"Missing required field: {name}")

        try:
            fields["symbol"] = str(fields["symbol"]).strip().upper()
            fields["direction"] = Direction.parse(fields["direction"])

            for name in DECIMAL_FIELDS:
                if name in fields:
                    fields[name] = to_decimal(fields[name], name)

            if self.zero_as_missing:
                for name in ("exit_price", "stop_loss", "take_profit"):
                    if name in fields and fields[name] == 0:
                        del fields[name]

            for name in DATE_FIELDS:
                if name in fields:
                    fields[name] = parse_trade_date(fields[name])

            for name in TIME_FIELDS:
                if name in fields:
                    fields[name] = parse_wall_clock(fields[name])

            for name in ("analysis_timeframe", "entry_timeframe", "trade_id"):
                if name in fields:
                    fields[name] = str(fields[name]).strip()

            trade = TradeInput(**fields)
        except MalformedTradeDataError as e:
            self.logger.warning("Trade normalization failed", error=str(e), raw_value=e.raw_value)
            return TradeNormalizationResult.error(str(e))

        return TradeNormalizationResult.ok(trade)
