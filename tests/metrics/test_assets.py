"""Tests for the asset multiplier registry"""

import pytest
from decimal import Decimal

from tj_app.errors import ReferenceDataError
from tj_app.metrics.assets import AssetRegistry, normalize_symbol


class TestAssetRegistry:
    """Test symbol -> multiplier lookup"""

    def test_default_forex_multiplier(self):
        """Test seeded forex pair resolves to a standard lot"""
        registry = AssetRegistry()
        assert registry.multiplier_for("EURUSD") == Decimal("100000")

    def test_default_futures_multipliers(self):
        """Test seeded futures contracts"""
        registry = AssetRegistry()
        assert registry.multiplier_for("ES") == Decimal("50")
        assert registry.multiplier_for("MNQ") == Decimal("2")
        assert registry.multiplier_for("WIN") == Decimal("0.2")

    def test_lookup_is_case_insensitive(self):
        """Test symbols are normalized before lookup"""
        registry = AssetRegistry()
        assert registry.multiplier_for(" xauusd ") == Decimal("100")
        assert registry.is_known("eurusd")

    def test_unknown_symbol_falls_back_to_one(self):
        """Test unknown instruments trade in raw price units"""
        registry = AssetRegistry()
        assert registry.multiplier_for("XAUUSX") == Decimal("1")
        assert not registry.is_known("XAUUSX")

    def test_custom_table(self):
        """Test registry built from a synthetic table"""
        registry = AssetRegistry({"abc": 3, "XYZ": "0.5"})
        assert registry.multiplier_for("ABC") == Decimal("3")
        assert registry.multiplier_for("xyz") == Decimal("0.5")
        assert registry.symbols() == ["ABC", "XYZ"]
        assert len(registry) == 2

    def test_non_positive_multiplier_rejected(self):
        """Test zero and negative multipliers are refused"""
        with pytest.raises(ReferenceDataError):
            AssetRegistry({"BAD": 0})
        with pytest.raises(ReferenceDataError):
            AssetRegistry({"BAD": -10})

    def test_non_positive_fallback_rejected(self):
        """Test fallback multiplier must be positive"""
        with pytest.raises(ReferenceDataError):
            AssetRegistry({}, fallback_multiplier=0)

    def test_with_overrides_returns_new_registry(self):
        """Test overrides leave the source registry untouched"""
        registry = AssetRegistry({"ABC": 3})
        updated = registry.with_overrides({"abc": 4, "DEF": 7})

        assert registry.multiplier_for("ABC") == Decimal("3")
        assert not registry.is_known("DEF")
        assert updated.multiplier_for("ABC") == Decimal("4")
        assert updated.multiplier_for("DEF") == Decimal("7")

    def test_normalize_symbol(self):
        """Test symbol normalization"""
        assert normalize_symbol("  gbpusd") == "GBPUSD"
