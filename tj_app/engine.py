"""
Trade analytics engine facade.

Wires reference table loading, record normalization, form validation and
metric annotation for the host journal application.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.loader import ConfigLoader
from .data.normalizer import TradeNormalizer
from .data.validators import TradeInputValidator, TradeValidationReport, summarize_issues
from .errors import InvalidTradeInputError, MalformedTradeDataError, UnknownTimeframeError
from .metrics.calculator import MetricsCalculator
from .models.metrics import TradeMetrics
from .models.trade import TradeInput

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AnnotatedTrade:
    """A normalized trade with its validation report and derived metrics."""
    trade: TradeInput
    metrics: TradeMetrics
    report: TradeValidationReport


class TradeAnalyticsEngine:
    """
    Main entry point for per-trade analytics.

    Pipeline:
    Raw journal row → Normalization → Validation → Metrics
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        """Initialize the engine from defaults, reference_tables.yaml and overrides."""
        self.logger = logger
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.normalizer = TradeNormalizer()

        config = self.config_loader.build_config(overrides)
        self.calculator = MetricsCalculator(config)
        self.validator = TradeInputValidator(config.validation)

        self.logger.info(
            "Trade analytics engine initialized",
            assets=len(self.calculator.asset_registry),
            utc_offset_hours=config.sessions.utc_offset_hours,
        )

    @property
    def config(self):
        return self.calculator.config

    def reload_config(self, overrides: Optional[dict[str, Any]] = None) -> None:
        """
        Rebuild reference tables and swap them in.

        The new calculator is fully built before the reference is replaced,
        so an ``annotate`` call in flight keeps using the previous tables.
        """
        config = self.config_loader.build_config(overrides)
        calculator = MetricsCalculator(config)
        validator = TradeInputValidator(config.validation)

        self.calculator = calculator
        self.validator = validator

        self.logger.info("Reference tables reloaded", assets=len(calculator.asset_registry))

    def annotate(self, trade: TradeInput) -> TradeMetrics:
        """
        Compute metrics for a trade snapshot.

        Errors are logged and re-raised for the caller to decide on.
        """
        calculator = self.calculator
        try:
            return calculator.annotate(trade)
        except InvalidTradeInputError as e:
            self.logger.warning(
                "Trade rejected for metrics",
                trade_id=trade.trade_id,
                field=e.field,
                value=str(e.value),
            )
            raise
        except UnknownTimeframeError as e:
            self.logger.warning(
                "Unknown timeframe label",
                trade_id=trade.trade_id,
                field=e.field,
                label=e.label,
            )
            raise

    def validate(self, trade: TradeInput) -> TradeValidationReport:
        """Run form-level validation without computing metrics."""
        return self.validator.validate(trade)

    def process_record(self, raw: Union[dict[str, Any], str, bytes]) -> AnnotatedTrade:
        """
        Normalize, validate and annotate a raw journal row.

        Raises:
            MalformedTradeDataError: If the row cannot be normalized
            InvalidTradeInputError: If metrics cannot be computed
            UnknownTimeframeError: If a timeframe label is unknown
        """
        result = self.normalizer.normalize_trade(raw)
        if not result.success:
            raise MalformedTradeDataError(result.error_msg or "Trade normalization failed")

        trade = result.trade
        report = self.validate(trade)
        if report.warnings:
            self.logger.info(
                "Trade validation warnings",
                trade_id=trade.trade_id,
                warnings=summarize_issues(report.warnings),
            )

        metrics = self.annotate(trade)
        return AnnotatedTrade(trade=trade, metrics=metrics, report=report)
