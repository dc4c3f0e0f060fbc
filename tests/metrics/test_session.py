"""Tests for trading session detection"""

import pytest
from datetime import time

from tj_app.errors import ReferenceDataError
from tj_app.metrics.session import SessionDetector, build_session_table, parse_window_bound
from tj_app.models.metrics import TradingSession


class TestDefaultSessions:
    """Test the default UTC session windows"""

    @pytest.mark.parametrize("entry_time,expected", [
        ("00:00", TradingSession.ASIAN),
        ("03:15", TradingSession.ASIAN),
        ("06:59", TradingSession.ASIAN),
        ("07:00", TradingSession.LONDON),
        ("11:59", TradingSession.LONDON),
        ("12:00", TradingSession.LONDON_NEW_YORK_OVERLAP),
        ("14:30", TradingSession.LONDON_NEW_YORK_OVERLAP),
        ("15:59", TradingSession.LONDON_NEW_YORK_OVERLAP),
        ("16:00", TradingSession.NEW_YORK),
        ("20:59", TradingSession.NEW_YORK),
        ("21:00", TradingSession.OFF_HOURS),
        ("23:59", TradingSession.OFF_HOURS),
    ])
    def test_window_boundaries(self, entry_time, expected):
        """Test half-open window boundaries"""
        assert SessionDetector().detect(entry_time) == expected

    def test_accepts_time_objects(self):
        assert SessionDetector().detect(time(14, 30, 59)) == TradingSession.LONDON_NEW_YORK_OVERLAP

    def test_every_minute_maps_to_exactly_one_session(self):
        """Test totality over the full day"""
        detector = SessionDetector()
        seen = set()
        for minute in range(24 * 60):
            session = detector.detect(time(minute // 60, minute % 60))
            assert isinstance(session, TradingSession)
            seen.add(session)
        assert seen == set(TradingSession)


class TestUtcOffset:
    """Test wall-clock times in a non-UTC reference timezone"""

    def test_negative_offset(self):
        """Test 11:30 at UTC-3 is 14:30 UTC"""
        detector = SessionDetector(utc_offset_hours=-3)
        assert detector.detect("11:30") == TradingSession.LONDON_NEW_YORK_OVERLAP

    def test_offset_wraps_past_midnight(self):
        """Test 22:30 at UTC-3 is 01:30 UTC the next day"""
        detector = SessionDetector(utc_offset_hours=-3)
        assert detector.detect("22:30") == TradingSession.ASIAN

    def test_positive_half_hour_offset(self):
        """Test 05:00 at UTC+5:30 is 23:30 UTC the previous day"""
        detector = SessionDetector(utc_offset_hours=5.5)
        assert detector.detect("05:00") == TradingSession.OFF_HOURS

    def test_per_call_offset(self):
        """Test an explicit offset wins over the configured one"""
        detector = SessionDetector(utc_offset_hours=-3)
        assert detector.detect("11:30", utc_offset_hours=0) == TradingSession.LONDON
        assert detector.detect("11:30") == TradingSession.LONDON_NEW_YORK_OVERLAP


class TestCustomWindows:
    """Test synthetic window tables"""

    def test_window_wrapping_midnight(self):
        detector = SessionDetector({"Asian": ("22:00", "06:00")})
        assert detector.detect("23:00") == TradingSession.ASIAN
        assert detector.detect("05:59") == TradingSession.ASIAN
        assert detector.detect("06:00") == TradingSession.OFF_HOURS

    def test_end_of_day_bound(self):
        detector = SessionDetector({"NewYork": ("21:00", "24:00")})
        assert detector.detect("23:59") == TradingSession.NEW_YORK
        assert detector.detect("00:00") == TradingSession.OFF_HOURS

    def test_custom_table_is_total(self):
        table = build_session_table({"London": ("08:00", "17:00")})
        assert len(table) == 24 * 60
        assert table.count(TradingSession.LONDON) == 9 * 60
        assert table.count(TradingSession.OFF_HOURS) == 15 * 60

    def test_overlapping_windows_rejected(self):
        with pytest.raises(ReferenceDataError):
            SessionDetector({"London": ("07:00", "16:00"), "NewYork": ("12:00", "21:00")})

    def test_unknown_session_name_rejected(self):
        with pytest.raises(ReferenceDataError):
            SessionDetector({"Sydney": ("21:00", "06:00")})

    def test_off_hours_window_rejected(self):
        with pytest.raises(ReferenceDataError):
            SessionDetector({"OffHours": ("21:00", "24:00")})

    def test_empty_window_rejected(self):
        with pytest.raises(ReferenceDataError):
            SessionDetector({"London": ("07:00", "07:00")})


class TestParseWindowBound:
    """Test HH:MM bound parsing"""

    def test_valid_bounds(self):
        assert parse_window_bound("00:00") == 0
        assert parse_window_bound("14:30") == 870
        assert parse_window_bound("24:00") == 1440

    @pytest.mark.parametrize("value", ["25:00", "12:60", "noon", "24:01"])
    def test_invalid_bounds(self, value):
        with pytest.raises(ReferenceDataError):
            parse_window_bound(value)
