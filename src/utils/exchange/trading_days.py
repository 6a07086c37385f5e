"""Typed, validated representation of an exchange's weekly trading schedule.

Weekdays are numbered the way the market catalog stores them, Sunday = 0 …
Saturday = 6, which differs from :meth:`datetime.date.weekday` (Monday = 0).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import FrozenSet, Iterable, Iterator, List

from src.utils.exchange.errors import MalformedConfigError

WEEKDAY_NAMES: List[str] = [
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
]


def sunday_based_weekday(value: date | datetime) -> int:
    """Return the weekday of *value* with Sunday = 0 … Saturday = 6."""
    return value.isoweekday() % 7


@dataclass(frozen=True)
class TradingDays:
    """Set of weekday numbers on which the market would trade absent holidays."""

    days: FrozenSet[int]

    def __init__(self, days: Iterable[int]) -> None:
        """Create a :class:`TradingDays` from weekday numbers (0 = Sunday)."""
        if isinstance(days, (str, bytes)) or not isinstance(days, Iterable):
            raise TypeError("`trading_days` must be an iterable of int")
        validated = []
        for day in days:
            if isinstance(day, bool) or not isinstance(day, int):
                raise MalformedConfigError(
                    f"Weekday must be int, got {type(day).__name__}: {day!r}"
                )
            if not 0 <= day <= 6:
                raise MalformedConfigError(f"Weekday must be between 0 and 6, got {day}")
            validated.append(day)
        object.__setattr__(self, "days", frozenset(validated))

    @staticmethod
    def from_names(names: Iterable[str]) -> TradingDays:
        """Create a :class:`TradingDays` from weekday names such as ``"monday"``."""
        numbers = []
        for name in names:
            key = str(name).strip().lower()
            if key not in WEEKDAY_NAMES:
                raise MalformedConfigError(f"Unexpected weekday name: '{name}'")
            numbers.append(WEEKDAY_NAMES.index(key))
        return TradingDays(numbers)

    def is_trading_day(self, value: date | datetime) -> bool:
        """Return ``True`` if *value* falls on an enabled trading weekday."""
        return sunday_based_weekday(value) in self.days

    def open_days(self) -> List[str]:
        """Return the names of all weekdays where the exchange is open."""
        return [WEEKDAY_NAMES[day] for day in sorted(self.days)]

    def any_open(self) -> bool:
        """Fast check: is the exchange open at least one day per week?"""
        return len(self.days) > 0

    def to_json(self) -> List[int]:
        """Return the sorted weekday numbers."""
        return sorted(self.days)

    def __contains__(self, day: object) -> bool:
        return day in self.days

    def __iter__(self) -> Iterator[int]:
        """Iterate over the enabled weekday numbers in calendar order."""
        yield from sorted(self.days)
