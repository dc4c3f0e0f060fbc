"""Tests for outcome classification"""

import pytest
from decimal import Decimal

from tj_app.metrics.outcome import classify_outcome
from tj_app.models.metrics import TradeOutcome


class TestClassifyOutcome:
    """Test PnL -> outcome mapping"""

    def test_absent_pnl_is_pending(self):
        assert classify_outcome(None) == TradeOutcome.PENDING

    @pytest.mark.parametrize("pnl", ["0.01", "494", "1E-10"])
    def test_positive_is_win(self, pnl):
        assert classify_outcome(Decimal(pnl)) == TradeOutcome.WIN

    @pytest.mark.parametrize("pnl", ["-0.01", "-10", "-1E-10"])
    def test_negative_is_loss(self, pnl):
        assert classify_outcome(Decimal(pnl)) == TradeOutcome.LOSS

    @pytest.mark.parametrize("pnl", ["0", "0.000", "-0"])
    def test_exact_zero_is_breakeven(self, pnl):
        """Test zero in any decimal spelling is breakeven"""
        assert classify_outcome(Decimal(pnl)) == TradeOutcome.BREAKEVEN
