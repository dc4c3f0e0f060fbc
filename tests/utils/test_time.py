"""Tests for wall-clock time helpers."""

from datetime import date, datetime, time

import pytest

from tj_app.errors import MalformedTradeDataError
from tj_app.utils.time import (
    format_duration,
    minute_of_day,
    parse_trade_date,
    parse_wall_clock,
    shift_minute_of_day,
    trade_duration_minutes,
)


class TestParsing:

    @pytest.mark.parametrize("raw,expected", [
        ("08:15", time(8, 15)),
        ("23:59:30", time(23, 59, 30)),
        (time(7, 0), time(7, 0)),
        (datetime(2024, 1, 2, 9, 30), time(9, 30)),
    ])
    def test_parse_wall_clock(self, raw, expected):
        assert parse_wall_clock(raw) == expected

    @pytest.mark.parametrize("raw", ["25:00", "8h15", ""])
    def test_parse_wall_clock_invalid(self, raw):
        with pytest.raises(MalformedTradeDataError):
            parse_wall_clock(raw)

    @pytest.mark.parametrize("raw,expected", [
        ("2024-06-03", date(2024, 6, 3)),
        ("2024-06-03T21:00:00Z", date(2024, 6, 3)),
        (datetime(2024, 6, 3, 12, 0), date(2024, 6, 3)),
        (date(2024, 6, 3), date(2024, 6, 3)),
    ])
    def test_parse_trade_date(self, raw, expected):
        assert parse_trade_date(raw) == expected

    def test_parse_trade_date_invalid(self):
        with pytest.raises(MalformedTradeDataError) as exc_info:
            parse_trade_date("2024-02-30")
        assert exc_info.value.expected_format == "YYYY-MM-DD"


class TestMinuteOfDay:

    def test_minute_of_day(self):
        assert minute_of_day(time(0, 0)) == 0
        assert minute_of_day(time(14, 30, 59)) == 870
        assert minute_of_day(time(23, 59)) == 1439

    @pytest.mark.parametrize("minute,offset,expected", [
        (600, 0, 600),
        (600, -3, 780),        # 10:00 UTC-3 is 13:00 UTC
        (60, 2, 1380),         # 01:00 UTC+2 is 23:00 UTC the day before
        (1400, -5.5, 290),
    ])
    def test_shift_minute_of_day(self, minute, offset, expected):
        assert shift_minute_of_day(minute, offset) == expected


class TestDuration:

    def test_same_day(self):
        assert trade_duration_minutes(date(2024, 1, 2), time(9, 0), date(2024, 1, 2), time(11, 5)) == 125

    def test_overnight(self):
        assert trade_duration_minutes(date(2024, 1, 2), time(22, 0), date(2024, 1, 3), time(1, 30)) == 210

    def test_missing_part(self):
        assert trade_duration_minutes(date(2024, 1, 2), None, date(2024, 1, 2), time(11, 5)) is None

    @pytest.mark.parametrize("minutes,expected", [
        (45, "45m"),
        (125, "2h 5m"),
        (60 * 24 * 3 + 4 * 60 + 10, "3d 4h"),
    ])
    def test_format_duration(self, minutes, expected):
        assert format_duration(minutes) == expected
