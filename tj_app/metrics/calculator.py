"""Trade metrics aggregator coordinating all per-trade calculations"""

from decimal import Decimal
from typing import Optional

from ..config.defaults import EngineConfig, get_default_config
from ..errors import InvalidTradeInputError
from ..logging.config import get_metrics_logger, log_alignment_decision
from ..models.metrics import TradeMetrics
from ..models.trade import TradeInput
from ..utils.time import trade_duration_minutes
from .assets import AssetRegistry
from .outcome import classify_outcome
from .pnl import calculate_pnl
from .risk import calculate_r_multiple
from .session import SessionDetector
from .timeframe import TimeframeAlignmentValidator

logger = get_metrics_logger(__name__)


class MetricsCalculator:
    """
    Builds the full TradeMetrics bundle for a trade snapshot.

    Holds only immutable reference components; every ``annotate`` call
    recomputes everything from the snapshot, so concurrent callers need no
    coordination.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or get_default_config()

        self.asset_registry = AssetRegistry.from_params(self.config.assets)
        self.session_detector = SessionDetector.from_params(self.config.sessions)
        self.timeframe_validator = TimeframeAlignmentValidator.from_params(self.config.timeframes)

    def annotate(self, trade: TradeInput) -> TradeMetrics:
        """
        Calculate all derived metrics for a trade

        Args:
            trade: Immutable trade snapshot

        Returns:
            TradeMetrics; fields whose inputs are missing stay None

        Raises:
            InvalidTradeInputError: Non-positive lot size, entry or exit price
            UnknownTimeframeError: A timeframe label is not in the rank table
        """
        self._validate_trade(trade)

        multiplier = self.asset_registry.multiplier_for(trade.symbol)

        pnl = None
        gross_pnl = None
        if trade.is_closed:
            breakdown = calculate_pnl(trade, multiplier)
            pnl = breakdown.net
            gross_pnl = breakdown.gross

        outcome = classify_outcome(pnl)

        r_multiple = None
        if pnl is not None and trade.stop_loss is not None:
            r_multiple = calculate_r_multiple(
                trade.entry_price, trade.exit_price, trade.stop_loss, trade.direction
            )

        session = None
        if trade.entry_time is not None:
            session = self.session_detector.detect(trade.entry_time)

        alignment = None
        if trade.has_timeframe_pair:
            alignment = self.timeframe_validator.validate(
                trade.analysis_timeframe, trade.entry_timeframe
            )
            log_alignment_decision(
                logger,
                alignment.analysis_timeframe,
                alignment.entry_timeframe,
                alignment.valid,
                alignment.recommended_max_entry_timeframe,
                trade_id=trade.trade_id,
            )

        duration = trade_duration_minutes(
            trade.entry_date, trade.entry_time, trade.exit_date, trade.exit_time
        )

        metrics = TradeMetrics(
            outcome=outcome,
            multiplier=multiplier,
            pnl=pnl,
            gross_pnl=gross_pnl,
            r_multiple=r_multiple,
            session=session,
            alignment=alignment,
            duration_minutes=duration,
        )

        logger.debug(
            "Trade annotated",
            trade_id=trade.trade_id,
            symbol=trade.symbol,
            outcome=outcome.value,
            pnl=str(pnl) if pnl is not None else None,
        )
        return metrics

    def _validate_trade(self, trade: TradeInput) -> None:
        """Refuse snapshots the PnL formulas cannot be applied to."""
        self._require_positive("lot_size", trade.lot_size)
        self._require_positive("entry_price", trade.entry_price)
        if trade.exit_price is not None:
            self._require_positive("exit_price", trade.exit_price)

    @staticmethod
    def _require_positive(field: str, value: Decimal) -> None:
        if value <= 0:
            raise InvalidTradeInputError(
                f"{field} must be positive, got {value}",
                field=field,
                value=value
            )
