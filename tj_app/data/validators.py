"""
Form-level validation for trade snapshots.

Errors block a save in the journal form; warnings are shown but the trade may
still be stored. Neither affects how metrics are computed.
"""

from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Any, Optional

from ..config.defaults import ValidationParams
from ..models.trade import Direction, TradeInput


@dataclass(frozen=True)
class FieldIssue:
    """A single validation finding tied to a trade field."""
    field: str
    message: str
    code: str


@dataclass(frozen=True)
class TradeValidationReport:
    """Errors and warnings for one trade snapshot."""
    errors: list[FieldIssue] = field(default_factory=list)
    warnings: list[FieldIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def fields_with_errors(self) -> set[str]:
        return {issue.field for issue in self.errors}


class TradeInputValidator:
    """Validates trade snapshots against journal business rules."""

    def __init__(self, params: Optional[ValidationParams] = None):
        self.params = params or ValidationParams()

    def validate(self, trade: TradeInput) -> TradeValidationReport:
        """
        Validate a trade snapshot.

        Args:
            trade: Trade to check

        Returns:
            TradeValidationReport with blocking errors and advisory warnings
        """
        errors: list[FieldIssue] = []
        warnings: list[FieldIssue] = []

        errors.extend(self._validate_amounts(trade))
        errors.extend(self._validate_dates(trade))
        warnings.extend(self._validate_price_levels(trade))

        return TradeValidationReport(errors=errors, warnings=warnings)

    def _validate_amounts(self, trade: TradeInput) -> list[FieldIssue]:
        issues = []

        for name in ("entry_price", "lot_size"):
            if getattr(trade, name) <= 0:
                issues.append(FieldIssue(name, f"{name} must be greater than zero", "NOT_POSITIVE"))

        for name in ("exit_price", "stop_loss", "take_profit"):
            value = getattr(trade, name)
            if value is not None and value <= 0:
                issues.append(FieldIssue(name, f"{name} must be greater than zero", "NOT_POSITIVE"))

        if trade.lot_size > self.params.max_lot_size:
            issues.append(FieldIssue(
                "lot_size",
                f"lot_size must not exceed {self.params.max_lot_size}",
                "OUT_OF_RANGE"
            ))

        if trade.commission < 0:
            issues.append(FieldIssue(
                "commission",
                "commission is a cost and must be stored as a non-negative amount",
                "NEGATIVE_COST"
            ))

        return issues

    def _validate_dates(self, trade: TradeInput) -> list[FieldIssue]:
        issues = []

        for name in ("entry_date", "exit_date"):
            value = getattr(trade, name)
            if value is not None and not self.params.min_year <= value.year <= self.params.max_year:
                issues.append(FieldIssue(
                    name,
                    f"{name} year must be between {self.params.min_year} and {self.params.max_year}",
                    "OUT_OF_RANGE"
                ))

        if trade.exit_date is not None and trade.entry_date is None:
            issues.append(FieldIssue("entry_date", "entry_date is required when exit_date is set", "REQUIRED"))
            return issues

        if trade.exit_date is not None and trade.entry_date is not None:
            entry_dt = datetime.combine(trade.entry_date, trade.entry_time or time.min)
            exit_dt = datetime.combine(trade.exit_date, trade.exit_time or time.min)
            if exit_dt < entry_dt:
                issues.append(FieldIssue("exit_date", "Exit must not be before entry", "DATE_SEQUENCE"))
                # Same day means the times are the problem
                if trade.exit_date == trade.entry_date:
                    issues.append(FieldIssue("exit_time", "Exit must not be before entry", "DATE_SEQUENCE"))

        return issues

    def _validate_price_levels(self, trade: TradeInput) -> list[FieldIssue]:
        """Long: stop < entry < target. Short: target < entry < stop."""
        issues = []
        entry = trade.entry_price
        is_long = trade.direction == Direction.LONG

        if trade.stop_loss is not None and trade.stop_loss > 0:
            misplaced = trade.stop_loss >= entry if is_long else trade.stop_loss <= entry
            if misplaced:
                side = "below" if is_long else "above"
                issues.append(FieldIssue(
                    "stop_loss",
                    f"stop_loss is usually {side} entry_price for a {trade.direction.value} trade",
                    "STOP_PLACEMENT"
                ))

        if trade.take_profit is not None and trade.take_profit > 0:
            misplaced = trade.take_profit <= entry if is_long else trade.take_profit >= entry
            if misplaced:
                side = "above" if is_long else "below"
                issues.append(FieldIssue(
                    "take_profit",
                    f"take_profit is usually {side} entry_price for a {trade.direction.value} trade",
                    "TARGET_PLACEMENT"
                ))

        return issues


def summarize_issues(issues: list[FieldIssue]) -> list[dict[str, Any]]:
    """Plain dicts for form layers and structured logs."""
    return [{"field": i.field, "message": i.message, "code": i.code} for i in issues]
