"""Trading-day tests and concrete session boundaries for a market and a date."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Optional, Tuple, Union

from src.market_status.engine.timezone_projector import (CivilDateTime,
                                                         TimezoneProjector)
from src.utils.exchange.hours import parse_hhmm
from src.utils.exchange.market import Market
from src.utils.exchange.trading_days import sunday_based_weekday

CivilDate = Union[date, CivilDateTime]


@dataclass(frozen=True)
class SessionBoundaries:
    """Open, close and optional lunch window of one specific date.

    Every value is an aware datetime in the market timezone.
    """

    open: datetime
    close: datetime
    lunch: Optional[Tuple[datetime, datetime]] = None


def _as_date(value: CivilDate) -> date:
    if isinstance(value, CivilDateTime):
        return value.date()
    if isinstance(value, datetime):
        return value.date()
    return value


class SessionCalendar:
    """Stateless calendar queries over a :class:`Market` definition."""

    @staticmethod
    def is_trading_day(market: Market, civil_date: CivilDate) -> bool:
        """Return ``True`` if the weekday of *civil_date* is in ``trading_days``."""
        if isinstance(civil_date, CivilDateTime):
            return civil_date.weekday in market.trading_days
        return sunday_based_weekday(_as_date(civil_date)) in market.trading_days

    @staticmethod
    def is_holiday(market: Market, civil_date: CivilDate) -> bool:
        """Return ``True`` if *civil_date* is one of the market holidays."""
        return _as_date(civil_date) in market.holidays

    @staticmethod
    def local_instant(market: Market, civil_date: CivilDate, hhmm: str, field: str) -> datetime:
        """Combine *civil_date* with an ``HH:MM`` string in the market zone.

        The UTC offset is derived for the resulting instant itself, so a
        wall-clock time that falls in a DST gap is normalized to the instant
        the zone actually shows.
        """
        zone = TimezoneProjector.zone(market.timezone)
        combined = datetime.combine(_as_date(civil_date), parse_hhmm(hhmm, field), zone)
        return combined.astimezone(timezone.utc).astimezone(zone)

    @staticmethod
    def session_boundaries(market: Market, civil_date: CivilDate) -> SessionBoundaries:
        """Return the concrete session instants of *market* on *civil_date*."""
        hours = market.trading_hours
        lunch = None
        if hours.lunch is not None:
            lunch = (
                SessionCalendar.local_instant(market, civil_date, hours.lunch.start, "lunch.start"),
                SessionCalendar.local_instant(market, civil_date, hours.lunch.end, "lunch.end"),
            )
        return SessionBoundaries(
            open=SessionCalendar.local_instant(market, civil_date, hours.open, "open"),
            close=SessionCalendar.local_instant(market, civil_date, hours.close, "close"),
            lunch=lunch,
        )

    @staticmethod
    def is_lunch_now(market: Market, civil_time: CivilDateTime | time) -> bool:
        """Return ``True`` inside the half-open ``[lunch.start, lunch.end)`` window."""
        lunch = market.trading_hours.lunch
        if lunch is None:
            return False
        if isinstance(civil_time, CivilDateTime):
            minutes = civil_time.minutes_since_midnight
        else:
            minutes = civil_time.hour * 60 + civil_time.minute
        return lunch.start_minutes <= minutes < lunch.end_minutes
