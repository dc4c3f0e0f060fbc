"""Tests for R-multiple calculations"""

from decimal import Decimal

from tj_app.metrics.risk import calculate_r_multiple, calculate_risk, format_r_multiple
from tj_app.models.trade import Direction


class TestRMultiple:
    """Test R-multiple calculation"""

    def test_long_two_r_winner(self):
        """Test entry 1.2000, stop 1.1950, exit 1.2100 is +2R"""
        r = calculate_r_multiple(Decimal("1.2000"), Decimal("1.2100"), Decimal("1.1950"), Direction.LONG)
        assert r == Decimal("2")

    def test_long_stopped_out_is_minus_one(self):
        """Test a long closed at its stop is -1R"""
        r = calculate_r_multiple(Decimal("100"), Decimal("95"), Decimal("95"), Direction.LONG)
        assert r == Decimal("-1")

    def test_short_winner(self):
        """Test short with stop above entry"""
        r = calculate_r_multiple(Decimal("50"), Decimal("44"), Decimal("52"), Direction.SHORT)
        assert r == Decimal("3")

    def test_short_loser(self):
        """Test short closed above entry is negative"""
        r = calculate_r_multiple(Decimal("50"), Decimal("51"), Decimal("52"), Direction.SHORT)
        assert r == Decimal("-0.5")

    def test_missing_stop_is_absent(self):
        """Test no stop means no R-multiple rather than zero"""
        r = calculate_r_multiple(Decimal("1.2000"), Decimal("1.2100"), None, Direction.LONG)
        assert r is None

    def test_stop_at_entry_is_absent(self):
        """Test zero initial risk cannot be expressed as a multiple"""
        r = calculate_r_multiple(Decimal("1.2000"), Decimal("1.2100"), Decimal("1.2000"), Direction.LONG)
        assert r is None

    def test_missing_exit_is_absent(self):
        r = calculate_r_multiple(Decimal("1.2000"), None, Decimal("1.1950"), Direction.LONG)
        assert r is None

    def test_stop_on_wrong_side_uses_distance(self):
        """Test risk is the absolute entry-stop distance"""
        assert calculate_risk(Decimal("100"), Decimal("105")) == Decimal("5")
        r = calculate_r_multiple(Decimal("100"), Decimal("110"), Decimal("105"), Direction.LONG)
        assert r == Decimal("2")


class TestFormatRMultiple:
    """Test display formatting"""

    def test_positive(self):
        assert format_r_multiple(Decimal("2")) == "+2.00R"

    def test_negative(self):
        assert format_r_multiple(Decimal("-0.5")) == "-0.50R"

    def test_absent(self):
        assert format_r_multiple(None) == "-"
