"""Instrument contract multiplier lookup"""

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from ..config.defaults import AssetParams
from ..errors import ReferenceDataError
from ..models.trade import to_decimal


def normalize_symbol(symbol: str) -> str:
    """Upper-case and strip an instrument code, ``eurusd `` -> ``EURUSD``."""
    return symbol.strip().upper()


class AssetRegistry:
    """
    Read-only symbol -> multiplier table.

    Unknown symbols fall back to a multiplier of 1 so PnL is still booked in
    raw price units.
    """

    def __init__(self, multipliers: Optional[Mapping[str, object]] = None,
                 fallback_multiplier: object = Decimal("1")):
        if multipliers is None:
            multipliers = AssetParams().multipliers

        table: dict[str, Decimal] = {}
        for symbol, raw in multipliers.items():
            value = to_decimal(raw, f"multiplier for {symbol}")
            if value <= 0:
                raise ReferenceDataError(
                    f"Multiplier for {symbol} must be positive, got {value}",
                    context={"symbol": symbol, "multiplier": str(value)}
                )
            table[normalize_symbol(symbol)] = value

        fallback = to_decimal(fallback_multiplier, "fallback multiplier")
        if fallback <= 0:
            raise ReferenceDataError(f"Fallback multiplier must be positive, got {fallback}")

        self._multipliers: Mapping[str, Decimal] = MappingProxyType(table)
        self.fallback_multiplier = fallback

    @classmethod
    def from_params(cls, params: AssetParams) -> "AssetRegistry":
        return cls(params.multipliers, params.fallback_multiplier)

    def multiplier_for(self, symbol: str) -> Decimal:
        """Contract multiplier for ``symbol``, or the fallback when unknown."""
        return self._multipliers.get(normalize_symbol(symbol), self.fallback_multiplier)

    def is_known(self, symbol: str) -> bool:
        return normalize_symbol(symbol) in self._multipliers

    def symbols(self) -> list[str]:
        return sorted(self._multipliers)

    def with_overrides(self, overrides: Mapping[str, object]) -> "AssetRegistry":
        """Build a new registry with extra or replaced symbols."""
        merged: dict[str, object] = dict(self._multipliers)
        for symbol, value in overrides.items():
            merged[normalize_symbol(symbol)] = value
        return AssetRegistry(merged, self.fallback_multiplier)

    def __len__(self) -> int:
        return len(self._multipliers)
