"""Configuration loader with 3-tier reference table precedence."""

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    AssetParams,
    EngineConfig,
    SessionParams,
    TimeframeParams,
    ValidationParams,
    get_default_config,
)
from .validation import ConfigValidator

REFERENCE_TABLES_FILE = "reference_tables.yaml"


def _present(table: Optional[dict[str, Any]]) -> dict[str, Any]:
    """
    Drop entries set to null, which is how a YAML file removes a default row.

    A table set to null as a whole is empty.
    """
    if table is None:
        return {}
    return {key: value for key, value in table.items() if value is not None}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages reference table loading with 3-tier precedence."""

    config_dir: Path
    defaults: EngineConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_reference_tables(self) -> dict[str, Any]:
        """Load reference table overrides from the YAML file, if present."""
        tables_file = self.config_dir / REFERENCE_TABLES_FILE

        if not tables_file.exists():
            return {}

        with open(tables_file) as f:
            tables = yaml.safe_load(f)

        return tables or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Caller overrides (highest priority)
        2. reference_tables.yaml
        3. Built-in defaults (lowest priority)

        Table sections merge per key, so a YAML file listing two extra
        symbols keeps every default multiplier.
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_reference_tables())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, overrides: Optional[dict[str, Any]] = None) -> EngineConfig:
        """
        Merge, validate and freeze the configuration.

        Raises:
            ConfigurationError: If any reference table fails validation
        """
        merged = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise ConfigurationError(
                "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors),
                errors=errors
            )

        assets = merged["assets"]
        sessions = merged["sessions"]
        timeframes = merged["timeframes"]
        validation = merged["validation"]

        return EngineConfig(
            assets=AssetParams(
                multipliers=MappingProxyType({
                    str(symbol).upper(): Decimal(str(value))
                    for symbol, value in _present(assets["multipliers"]).items()
                }),
                fallback_multiplier=Decimal(str(assets["fallback_multiplier"])),
            ),
            sessions=SessionParams(
                windows=MappingProxyType({
                    name: (str(bounds[0]), str(bounds[1]))
                    for name, bounds in _present(sessions["windows"]).items()
                }),
                utc_offset_hours=float(sessions["utc_offset_hours"]),
            ),
            timeframes=TimeframeParams(
                ranks=MappingProxyType(_present(timeframes["ranks"])),
                entry_thresholds=MappingProxyType(_present(timeframes["entry_thresholds"])),
                aliases=MappingProxyType(_present(timeframes["aliases"])),
                htf_min_rank=int(timeframes["htf_min_rank"]),
            ),
            validation=ValidationParams(
                min_year=int(validation["min_year"]),
                max_year=int(validation["max_year"]),
                max_lot_size=Decimal(str(validation["max_lot_size"])),
            ),
        )

    def _dataclass_to_dict(self, obj: Any) -> Any:
        """Convert nested dataclasses and read-only mappings to plain dictionaries."""
        if hasattr(obj, '__dataclass_fields__'):
            return {
                field_name: self._dataclass_to_dict(getattr(obj, field_name))
                for field_name in obj.__dataclass_fields__
            }
        if isinstance(obj, MappingProxyType):
            return {key: self._dataclass_to_dict(value) for key, value in obj.items()}
        if isinstance(obj, tuple):
            return list(obj)
        return obj

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
