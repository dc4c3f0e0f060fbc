"""Trading session detection for entry times"""

from datetime import time
from typing import Mapping, Optional, Sequence, Union

from ..config.defaults import SessionParams
from ..errors import ReferenceDataError
from ..models.metrics import TradingSession
from ..utils.time import MINUTES_PER_DAY, minute_of_day, parse_wall_clock, shift_minute_of_day


def parse_window_bound(value: str) -> int:
    """
    Parse an ``HH:MM`` window bound into a minute of day.

    ``24:00`` is accepted as an end bound meaning midnight.
    """
    try:
        hours_text, minutes_text = str(value).strip().split(":")
        hours, minutes = int(hours_text), int(minutes_text)
    except ValueError as e:
        raise ReferenceDataError(f"Invalid session bound: {value!r}") from e

    total = hours * 60 + minutes
    if not 0 <= minutes < 60 or not 0 <= total <= MINUTES_PER_DAY:
        raise ReferenceDataError(f"Session bound out of range: {value!r}")
    return total


def window_minutes(start: int, end: int) -> range:
    """Minutes covered by ``[start, end)``; wraps past midnight when end <= start."""
    if end > start:
        return range(start, end)
    return range(start, end + MINUTES_PER_DAY)


def build_session_table(windows: Mapping[str, Sequence[str]]) -> tuple[TradingSession, ...]:
    """
    Expand session windows into a 1440-entry minute lookup.

    Minutes no window claims are OffHours.

    Raises:
        ReferenceDataError: On unknown session names, bad bounds or overlaps
    """
    table: list[Optional[TradingSession]] = [None] * MINUTES_PER_DAY

    for name, bounds in windows.items():
        try:
            session = TradingSession(name)
        except ValueError as e:
            raise ReferenceDataError(f"Unknown session name: {name!r}") from e
        if session == TradingSession.OFF_HOURS:
            raise ReferenceDataError("OffHours is the residual bucket and cannot have a window")
        if len(bounds) != 2:
            raise ReferenceDataError(f"Session {name} needs [start, end], got {bounds!r}")

        start, end = parse_window_bound(bounds[0]), parse_window_bound(bounds[1])
        start %= MINUTES_PER_DAY
        if start == end:
            raise ReferenceDataError(f"Session {name} has an empty window")

        for minute in window_minutes(start, end):
            slot = minute % MINUTES_PER_DAY
            if table[slot] is not None:
                raise ReferenceDataError(
                    f"Session {name} overlaps {table[slot].value} at minute {slot}",
                    context={"session": name, "other": table[slot].value, "minute": slot}
                )
            table[slot] = session

    return tuple(s if s is not None else TradingSession.OFF_HOURS for s in table)


class SessionDetector:
    """
    Classifies entry times into trading sessions.

    Windows are expressed in UTC; entry times are wall-clock values in the
    journal's reference timezone and are shifted by ``utc_offset_hours``
    before lookup.
    """

    def __init__(self, windows: Optional[Mapping[str, Sequence[str]]] = None,
                 utc_offset_hours: float = 0.0):
        if windows is None:
            windows = SessionParams().windows
        self.utc_offset_hours = utc_offset_hours
        self._table = build_session_table(windows)

    @classmethod
    def from_params(cls, params: SessionParams) -> "SessionDetector":
        return cls(params.windows, params.utc_offset_hours)

    def session_for_minute(self, utc_minute: int) -> TradingSession:
        """Session owning a UTC minute of day."""
        return self._table[utc_minute % MINUTES_PER_DAY]

    def detect(self, entry_time: Union[str, time],
               utc_offset_hours: Optional[float] = None) -> TradingSession:
        """
        Detect the session an entry time falls in.

        Args:
            entry_time: Local wall-clock time (``time`` or ``HH:MM``)
            utc_offset_hours: Reference offset for this call; defaults to the
                detector's configured offset

        Returns:
            Exactly one TradingSession
        """
        local_minute = minute_of_day(parse_wall_clock(entry_time))
        offset = self.utc_offset_hours if utc_offset_hours is None else utc_offset_hours
        return self.session_for_minute(shift_minute_of_day(local_minute, offset))
