"""Configuration validation utilities."""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from ..models.metrics import TradingSession

_BOUND_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return False
    return number.is_finite() and number > 0


def _bound_to_minute(value: Any) -> Any:
    match = _BOUND_PATTERN.match(str(value).strip())
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    total = hours * 60 + minutes
    if minutes >= 60 or total > 24 * 60:
        return None
    return total


def _table(params: dict[str, Any], key: str, field: str,
           errors: list[ValidationError]) -> dict[str, Any]:
    """Rows of a reference table; null rows and a null table count as removed."""
    table = params.get(key)
    if table is None:
        return {}
    if not isinstance(table, dict):
        errors.append(ValidationError(field=field, message="Must be a mapping", value=table))
        return {}
    return {name: value for name, value in table.items() if value is not None}


class ConfigValidator:
    """Validates reference tables and engine parameters."""

    @staticmethod
    def validate_asset_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate asset multiplier table."""
        errors = []

        for symbol, value in _table(params, "multipliers", "assets.multipliers", errors).items():
            if not _is_positive_number(value):
                errors.append(ValidationError(
                    field=f"assets.multipliers.{symbol}",
                    message="Must be a positive number",
                    value=value
                ))

        if "fallback_multiplier" in params and not _is_positive_number(params["fallback_multiplier"]):
            errors.append(ValidationError(
                field="assets.fallback_multiplier",
                message="Must be a positive number",
                value=params["fallback_multiplier"]
            ))

        return errors

    @staticmethod
    def validate_session_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate session windows and reference offset."""
        errors = []
        claimed: dict[int, str] = {}

        for name, bounds in _table(params, "windows", "sessions.windows", errors).items():
            field = f"sessions.windows.{name}"

            if name not in {s.value for s in TradingSession} or name == TradingSession.OFF_HOURS.value:
                errors.append(ValidationError(
                    field=field,
                    message="Must be one of Asian, London, NewYork, LondonNewYorkOverlap",
                    value=name
                ))
                continue

            if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
                errors.append(ValidationError(
                    field=field,
                    message="Must be a [start, end] pair of HH:MM strings",
                    value=bounds
                ))
                continue

            start, end = _bound_to_minute(bounds[0]), _bound_to_minute(bounds[1])
            if start is None or end is None:
                errors.append(ValidationError(
                    field=field,
                    message="Bounds must be HH:MM between 00:00 and 24:00",
                    value=bounds
                ))
                continue

            start %= 24 * 60
            if start == end:
                errors.append(ValidationError(
                    field=field,
                    message="Window must not be empty",
                    value=bounds
                ))
                continue

            span = range(start, end) if end > start else range(start, end + 24 * 60)
            for minute in span:
                slot = minute % (24 * 60)
                if slot in claimed:
                    errors.append(ValidationError(
                        field=field,
                        message=f"Overlaps session {claimed[slot]}",
                        value=bounds
                    ))
                    break
                claimed[slot] = name

        if "utc_offset_hours" in params:
            value = params["utc_offset_hours"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not -12 <= value <= 14:
                errors.append(ValidationError(
                    field="sessions.utc_offset_hours",
                    message="Must be a number between -12 and 14",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_timeframe_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate timeframe ranks, thresholds and aliases."""
        errors = []
        ranks = _table(params, "ranks", "timeframes.ranks", errors)

        seen_ranks: dict[int, str] = {}
        for label, rank in ranks.items():
            if isinstance(rank, bool) or not isinstance(rank, int) or rank <= 0:
                errors.append(ValidationError(
                    field=f"timeframes.ranks.{label}",
                    message="Must be a positive integer",
                    value=rank
                ))
                continue
            if rank in seen_ranks:
                errors.append(ValidationError(
                    field=f"timeframes.ranks.{label}",
                    message=f"Duplicates rank of {seen_ranks[rank]}",
                    value=rank
                ))
            seen_ranks[rank] = label

        thresholds = _table(params, "entry_thresholds", "timeframes.entry_thresholds", errors)
        for analysis, threshold in thresholds.items():
            field = f"timeframes.entry_thresholds.{analysis}"
            if analysis not in ranks or threshold not in ranks:
                errors.append(ValidationError(
                    field=field,
                    message="Both timeframes must appear in the rank table",
                    value=threshold
                ))
                continue
            if not isinstance(ranks[analysis], int) or not isinstance(ranks[threshold], int):
                continue
            if ranks[threshold] >= ranks[analysis]:
                errors.append(ValidationError(
                    field=field,
                    message="Threshold must be finer than the analysis timeframe",
                    value=threshold
                ))

        for alias, label in _table(params, "aliases", "timeframes.aliases", errors).items():
            if label not in ranks:
                errors.append(ValidationError(
                    field=f"timeframes.aliases.{alias}",
                    message="Must point at a ranked timeframe",
                    value=label
                ))

        if "htf_min_rank" in params:
            value = params["htf_min_rank"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field="timeframes.htf_min_rank",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_validation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate trade form limits."""
        errors = []

        min_year = params.get("min_year")
        max_year = params.get("max_year")
        for name, value in (("min_year", min_year), ("max_year", max_year)):
            if name in params and (isinstance(value, bool) or not isinstance(value, int)):
                errors.append(ValidationError(
                    field=f"validation.{name}",
                    message="Must be an integer year",
                    value=value
                ))
        if isinstance(min_year, int) and isinstance(max_year, int) and min_year > max_year:
            errors.append(ValidationError(
                field="validation.min_year",
                message="Must not exceed max_year",
                value=min_year
            ))

        if "max_lot_size" in params and not _is_positive_number(params["max_lot_size"]):
            errors.append(ValidationError(
                field="validation.max_lot_size",
                message="Must be a positive number",
                value=params["max_lot_size"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        section_validators = {
            "assets": ConfigValidator.validate_asset_params,
            "sessions": ConfigValidator.validate_session_params,
            "timeframes": ConfigValidator.validate_timeframe_params,
            "validation": ConfigValidator.validate_validation_params,
        }

        for section, validate in section_validators.items():
            if section not in config:
                continue
            if not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))
                continue
            errors.extend(validate(config[section]))

        return errors
