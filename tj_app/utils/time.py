"""
Wall-clock time helpers for journal entries.

Journal rows store dates as ``YYYY-MM-DD`` and times as ``HH:MM`` (seconds
optional) in a single reference timezone.
"""

from datetime import date, datetime, time
from typing import Optional, Union

from ..errors import MalformedTradeDataError

MINUTES_PER_DAY = 24 * 60


def parse_wall_clock(value: Union[str, time, datetime]) -> time:
    """
    Parse a wall-clock time.

    Args:
        value: ``HH:MM`` / ``HH:MM:SS`` string, ``time`` or ``datetime``

    Returns:
        Naive ``time`` value

    Raises:
        MalformedTradeDataError: If the string is not a valid time of day
    """
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value

    try:
        return time.fromisoformat(str(value).strip())
    except ValueError as e:
        raise MalformedTradeDataError(
            f"Invalid time of day: {value!r}",
            raw_value=value,
            expected_format="HH:MM[:SS]"
        ) from e


def parse_trade_date(value: Union[str, date, datetime]) -> date:
    """
    Parse a journal date.

    Accepts full ISO datetimes as stored by some brokers' exports and keeps
    only the date part.

    Raises:
        MalformedTradeDataError: If the value is not a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    try:
        return date.fromisoformat(text.split("T")[0])
    except ValueError as e:
        raise MalformedTradeDataError(
            f"Invalid date: {value!r}",
            raw_value=value,
            expected_format="YYYY-MM-DD"
        ) from e


def minute_of_day(value: time) -> int:
    """Minutes elapsed since midnight, seconds truncated."""
    return value.hour * 60 + value.minute


def shift_minute_of_day(minute: int, offset_hours: float) -> int:
    """
    Convert a local minute-of-day to UTC for a fixed offset.

    Args:
        minute: Local minute of day (0-1439)
        offset_hours: Local offset from UTC, e.g. -3 for UTC-3

    Returns:
        UTC minute of day, wrapped into 0-1439
    """
    return (minute - round(offset_hours * 60)) % MINUTES_PER_DAY


def trade_duration_minutes(
    entry_date: Optional[date],
    entry_time: Optional[time],
    exit_date: Optional[date],
    exit_time: Optional[time]
) -> Optional[int]:
    """
    Holding time of a trade in whole minutes.

    Returns:
        Minutes between entry and exit, or None unless all four parts exist
    """
    if entry_date is None or entry_time is None or exit_date is None or exit_time is None:
        return None

    entry_dt = datetime.combine(entry_date, entry_time)
    exit_dt = datetime.combine(exit_date, exit_time)
    return int((exit_dt - entry_dt).total_seconds() // 60)


def format_duration(minutes: int) -> str:
    """
    Render a duration for display.

    ``45m``, ``2h 5m`` below a day, ``3d 4h`` beyond.
    """
    if minutes < 60:
        return f"{minutes}m"

    hours, mins = divmod(minutes, 60)
    if hours < 24:
        return f"{hours}h {mins}m"

    days, remaining_hours = divmod(hours, 24)
    return f"{days}d {remaining_hours}h"
