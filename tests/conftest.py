"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date, time
from decimal import Decimal
from typing import Any, Dict

from tj_app.models.trade import Direction, TradeInput


@pytest.fixture
def eurusd_long() -> TradeInput:
    """Closed EURUSD long with costs, stop and timeframe pair."""
    return TradeInput(
        symbol="EURUSD",
        direction=Direction.LONG,
        entry_price=Decimal("1.1000"),
        exit_price=Decimal("1.1050"),
        stop_loss=Decimal("1.0975"),
        lot_size=Decimal("1"),
        commission=Decimal("5"),
        swap=Decimal("-1"),
        entry_date=date(2024, 3, 12),
        entry_time=time(14, 30),
        exit_date=date(2024, 3, 12),
        exit_time=time(16, 45),
        analysis_timeframe="Daily",
        entry_timeframe="M15",
        trade_id="trade-001",
    )


@pytest.fixture
def open_trade() -> TradeInput:
    """Open trade with no exit recorded yet."""
    return TradeInput(
        symbol="NQ",
        direction=Direction.SHORT,
        entry_price=Decimal("18250.25"),
        stop_loss=Decimal("18300"),
        lot_size=Decimal("2"),
        entry_date=date(2024, 5, 2),
        entry_time=time(9, 45),
        trade_id="trade-002",
    )


@pytest.fixture
def sample_journal_row() -> Dict[str, Any]:
    """Journal row as stored by the web form (camelCase, string values)."""
    return {
        "id": "row-42",
        "symbol": "xauusd",
        "type": "Short",
        "entryPrice": "2000",
        "exitPrice": "1990.5",
        "stopLoss": "2005",
        "takeProfit": "1980",
        "lot": "0.5",
        "commission": "3.5",
        "swap": "",
        "entryDate": "2024-06-03",
        "entryTime": "08:15",
        "exitDate": "2024-06-03",
        "exitTime": "11:40",
        "tfAnalise": "H4",
        "tfEntrada": "M5",
    }
