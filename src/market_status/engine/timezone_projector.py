"""Projection of absolute instants onto a market's civil wall clock.

This module exposes :class:`TimezoneProjector`, which converts a timezone-aware
instant into the civil fields of an IANA zone using :mod:`zoneinfo`, so DST
transitions follow the authoritative offset rules of the zone rather than a
fixed UTC offset. Naive instants are interpreted as UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from src.utils.exchange.errors import InvalidTimezoneError
from src.utils.exchange.market import DATE_FORMAT, validate_timezone
from src.utils.exchange.trading_days import sunday_based_weekday
from src.utils.io.logger import Logger


@dataclass(frozen=True)
class CivilDateTime:
    """Wall-clock fields of an instant in a given zone (weekday 0 = Sunday)."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int

    @staticmethod
    def from_datetime(value: datetime) -> CivilDateTime:
        """Read the civil fields of *value* as-is."""
        return CivilDateTime(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            weekday=sunday_based_weekday(value),
        )

    def date(self) -> date:
        """Return the civil date."""
        return date(self.year, self.month, self.day)

    @property
    def date_key(self) -> str:
        """Return the ``YYYY-MM-DD`` key used by holiday lists."""
        return self.date().strftime(DATE_FORMAT)

    @property
    def minutes_since_midnight(self) -> int:
        """Return the wall-clock time as whole minutes since midnight."""
        return self.hour * 60 + self.minute


# pylint: disable=too-few-public-methods
class TimezoneProjector:
    """Static helpers converting instants into market-local civil time.

    All methods are stateless and thread-safe.
    """

    @staticmethod
    def zone(tz_name: str) -> ZoneInfo:
        """Return the :class:`ZoneInfo` for *tz_name*, failing fast when unknown."""
        try:
            return ZoneInfo(validate_timezone(tz_name))
        except InvalidTimezoneError as exc:
            Logger.error(f"Invalid timezone: {tz_name}. Exception: {exc}")
            raise

    @staticmethod
    def localize(instant: datetime, tz_name: str) -> datetime:
        """Return *instant* as an aware datetime on the wall clock of *tz_name*."""
        zone = TimezoneProjector.zone(tz_name)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(zone)

    @staticmethod
    def project(instant: datetime, tz_name: str) -> CivilDateTime:
        """Return the civil date and time of *instant* in *tz_name*."""
        return CivilDateTime.from_datetime(TimezoneProjector.localize(instant, tz_name))
