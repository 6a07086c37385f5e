"""Typed, validated representation of a market's daily trading hours.

Open, close and the optional lunch break are ``HH:MM`` wall-clock strings local
to the market timezone. Every value is validated on construction and the
ordering ``open <= lunch.start < lunch.end <= close`` with ``open < close`` is
enforced; overnight sessions are not supported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time
from typing import Any, Optional

from src.utils.exchange.errors import MalformedConfigError

_TIME_PATTERN = re.compile(r"\d{2}:\d{2}")


def parse_hhmm(value: Any, field: str) -> time:
    """Parse an ``HH:MM`` string into a :class:`datetime.time`.

    Raise :class:`MalformedConfigError` instead of coercing empty or invalid
    values to midnight.
    """
    if not isinstance(value, str):
        raise MalformedConfigError(f"`{field}` must be an 'HH:MM' string, got {value!r}")
    if not _TIME_PATTERN.fullmatch(value.strip()):
        raise MalformedConfigError(f"`{field}` must be in 'HH:MM' format, got '{value}'")
    hours, minutes = map(int, value.strip().split(":"))
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise MalformedConfigError(
            f"`{field}` must be a valid time between 00:00 and 23:59, got '{value}'"
        )
    return time(hours, minutes)


def minutes_from_hhmm(value: Any, field: str = "time") -> int:
    """Return minutes since midnight for an ``HH:MM`` string."""
    parsed = parse_hhmm(value, field)
    return parsed.hour * 60 + parsed.minute


@dataclass(frozen=True)
class LunchBreak:
    """Mid-session break, a half-open ``[start, end)`` wall-clock window."""

    start: str
    end: str

    def __post_init__(self) -> None:
        if minutes_from_hhmm(self.start, "lunch.start") >= minutes_from_hhmm(
            self.end, "lunch.end"
        ):
            raise MalformedConfigError("`lunch.start` must be < `lunch.end`")

    @property
    def start_minutes(self) -> int:
        """Lunch start as minutes since midnight."""
        return minutes_from_hhmm(self.start, "lunch.start")

    @property
    def end_minutes(self) -> int:
        """Lunch end as minutes since midnight."""
        return minutes_from_hhmm(self.end, "lunch.end")

    def to_json(self) -> Any:
        """Object to JSON."""
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class TradingHours:
    """Container for a market's regular session.

    * open: Opening time in "HH:MM" format.
    * close: Closing time in "HH:MM" format, strictly after ``open``.
    * lunch: Optional :class:`LunchBreak` inside the session.
    """

    open: str
    close: str
    lunch: Optional[LunchBreak] = None

    def __post_init__(self) -> None:
        open_minutes = minutes_from_hhmm(self.open, "open")
        close_minutes = minutes_from_hhmm(self.close, "close")
        if open_minutes >= close_minutes:
            raise MalformedConfigError("`open` must be < `close`")
        if self.lunch is not None:
            if not isinstance(self.lunch, LunchBreak):
                raise TypeError("`lunch` must be `LunchBreak | None`")
            if self.lunch.start_minutes < open_minutes:
                raise MalformedConfigError("`lunch.start` must be >= `open`")
            if self.lunch.end_minutes > close_minutes:
                raise MalformedConfigError("`lunch.end` must be <= `close`")

    @property
    def open_minutes(self) -> int:
        """Open as minutes since midnight."""
        return minutes_from_hhmm(self.open, "open")

    @property
    def close_minutes(self) -> int:
        """Close as minutes since midnight."""
        return minutes_from_hhmm(self.close, "close")

    @staticmethod
    def from_json(data: Any) -> TradingHours:
        """Build trading hours from a ``{"open", "close", "lunch"?}`` mapping."""
        if not isinstance(data, dict):
            raise MalformedConfigError(f"`trading_hours` must be a mapping, got {data!r}")
        lunch_data = data.get("lunch")
        lunch: Optional[LunchBreak] = None
        if lunch_data is not None:
            if not isinstance(lunch_data, dict):
                raise MalformedConfigError(f"`lunch` must be a mapping, got {lunch_data!r}")
            lunch = LunchBreak(lunch_data.get("start"), lunch_data.get("end"))
        return TradingHours(data.get("open"), data.get("close"), lunch)

    def to_json(self) -> Any:
        """Object to JSON."""
        result: dict = {"open": self.open, "close": self.close}
        if self.lunch is not None:
            result["lunch"] = self.lunch.to_json()
        return result
