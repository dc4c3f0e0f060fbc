"""Default reference tables and parameters for the trade analytics engine."""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping


def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(dict(mapping))


# Seeded instrument multipliers (value of one full price unit per lot)
DEFAULT_ASSET_MULTIPLIERS: Mapping[str, Decimal] = _frozen({
    # Forex
    "EURUSD": Decimal("100000"),
    "GBPUSD": Decimal("100000"),
    "USDJPY": Decimal("100000"),
    "AUDUSD": Decimal("100000"),
    "USDCAD": Decimal("100000"),
    "USDCHF": Decimal("100000"),
    # Index futures
    "ES": Decimal("50"),
    "MES": Decimal("5"),
    "NQ": Decimal("20"),
    "MNQ": Decimal("2"),
    "YM": Decimal("5"),
    "WIN": Decimal("0.2"),
    "WDO": Decimal("10"),
    # CFD indices
    "US30": Decimal("1"),
    "SPX": Decimal("1"),
    # Commodities
    "XAUUSD": Decimal("100"),
    "GC": Decimal("100"),
    "CL": Decimal("1000"),
    # Crypto
    "BTCUSD": Decimal("1"),
    "ETHUSD": Decimal("1"),
    "SOLUSD": Decimal("1"),
})

# Session windows in UTC, half-open [start, end). Anything unclaimed is OffHours.
DEFAULT_SESSION_WINDOWS: Mapping[str, tuple[str, str]] = _frozen({
    "Asian": ("00:00", "07:00"),
    "London": ("07:00", "12:00"),
    "LondonNewYorkOverlap": ("12:00", "16:00"),
    "NewYork": ("16:00", "21:00"),
})

# Higher rank = coarser timeframe
DEFAULT_TIMEFRAME_RANKS: Mapping[str, int] = _frozen({
    "M1": 1,
    "M3": 2,
    "M5": 3,
    "M15": 4,
    "M30": 5,
    "H1": 6,
    "H4": 7,
    "Daily": 8,
    "Weekly": 9,
    "Monthly": 10,
})

# Analysis timeframe -> finest entry timeframe still considered top-down aligned
DEFAULT_ENTRY_THRESHOLDS: Mapping[str, str] = _frozen({
    "Monthly": "H4",
    "Weekly": "H1",
    "Daily": "M15",
    "H4": "M5",
    "H1": "M1",
    "M30": "M1",
    "M15": "M1",
    "M5": "M1",
    "M3": "M1",
})

# Journal and broker spellings mapped onto canonical rank-table labels.
# Keys are upper-cased before lookup.
DEFAULT_TIMEFRAME_ALIASES: Mapping[str, str] = _frozen({
    "1M": "M1", "M1": "M1",
    "3M": "M3", "M3": "M3",
    "5M": "M5", "M5": "M5",
    "15M": "M15", "M15": "M15",
    "30M": "M30", "M30": "M30",
    "1H": "H1", "H1": "H1", "60M": "H1",
    "4H": "H4", "H4": "H4", "240M": "H4",
    "D": "Daily", "D1": "Daily", "1D": "Daily", "DAILY": "Daily",
    "W": "Weekly", "W1": "Weekly", "1W": "Weekly", "WEEKLY": "Weekly",
    "M": "Monthly", "MN": "Monthly", "MN1": "Monthly", "1MO": "Monthly", "MONTHLY": "Monthly",
})


@dataclass(frozen=True)
class AssetParams:
    """Contract multiplier table."""
    multipliers: Mapping[str, Decimal] = field(default_factory=lambda: DEFAULT_ASSET_MULTIPLIERS)
    fallback_multiplier: Decimal = Decimal("1")    # Unknown symbols trade in raw price units


@dataclass(frozen=True)
class SessionParams:
    """Session detection parameters."""
    windows: Mapping[str, tuple[str, str]] = field(default_factory=lambda: DEFAULT_SESSION_WINDOWS)
    utc_offset_hours: float = 0.0                  # Offset of the journal's wall clock from UTC


@dataclass(frozen=True)
class TimeframeParams:
    """Timeframe rank and alignment parameters."""
    ranks: Mapping[str, int] = field(default_factory=lambda: DEFAULT_TIMEFRAME_RANKS)
    entry_thresholds: Mapping[str, str] = field(default_factory=lambda: DEFAULT_ENTRY_THRESHOLDS)
    aliases: Mapping[str, str] = field(default_factory=lambda: DEFAULT_TIMEFRAME_ALIASES)
    htf_min_rank: int = 7                           # H4 and above count as higher timeframe


@dataclass(frozen=True)
class ValidationParams:
    """Trade form validation limits."""
    min_year: int = 2000
    max_year: int = 2100
    max_lot_size: Decimal = Decimal("1000")


@dataclass(frozen=True)
class EngineConfig:
    """Complete engine configuration."""
    assets: AssetParams
    sessions: SessionParams
    timeframes: TimeframeParams
    validation: ValidationParams


def get_default_config() -> EngineConfig:
    """Get the default configuration instance."""
    return EngineConfig(
        assets=AssetParams(),
        sessions=SessionParams(),
        timeframes=TimeframeParams(),
        validation=ValidationParams(),
    )
