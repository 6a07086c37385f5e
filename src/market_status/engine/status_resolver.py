"""Market status resolution.

The :class:`StatusResolver` classifies an instant into one of the five market
states and computes the next session boundaries:

* closed: not a trading day, a holiday, or outside the regular session.
* opening_soon: within ``opening_soon_minutes`` before today's open.
* open: inside the session with more than ``closing_soon_minutes`` left.
* closing_soon: inside the session with ``closing_soon_minutes`` or fewer left.
* lunch: inside the lunch break of the session.

No state is stored between calls; every :meth:`StatusResolver.resolve` derives
the result from ``(market, now)`` alone. State decisions compare whole minutes
since midnight (open inclusive, close exclusive) while countdowns are the floor
of the exact remaining time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Any, Optional

from src.market_status.engine.session_calendar import SessionCalendar
from src.market_status.engine.timezone_projector import (CivilDateTime,
                                                         TimezoneProjector)
from src.utils.exchange.market import Market
from src.utils.io.logger import Logger


class MarketStatus(str, Enum):
    """Trading state of a market at a given instant."""

    OPEN = "open"
    CLOSED = "closed"
    OPENING_SOON = "opening_soon"
    CLOSING_SOON = "closing_soon"
    LUNCH = "lunch"


@dataclass(frozen=True)
class NextOpen:
    """Result of the next-open search.

    ``degraded`` is ``True`` when no trading day was found within the search
    window and ``instant`` is the fallback at the end of that window.
    """

    instant: datetime
    degraded: bool = False


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class MarketStatusInfo:
    """Snapshot of a market's trading state, recomputed on every query."""

    status: MarketStatus
    local_time: datetime
    is_trading_day: bool
    is_holiday: bool
    next_open: Optional[datetime] = None
    next_close: Optional[datetime] = None
    time_until_close: Optional[int] = None
    time_until_open: Optional[int] = None
    next_open_degraded: bool = False

    def to_json(self) -> Any:
        """Object to JSON."""

        def _iso(value: Optional[datetime]) -> Optional[str]:
            return None if value is None else value.isoformat()

        return {
            "status": self.status.value,
            "local_time": self.local_time.isoformat(),
            "is_trading_day": self.is_trading_day,
            "is_holiday": self.is_holiday,
            "next_open": _iso(self.next_open),
            "next_close": _iso(self.next_close),
            "time_until_close": self.time_until_close,
            "time_until_open": self.time_until_open,
            "next_open_degraded": self.next_open_degraded,
        }


def minutes_between(start: datetime, end: datetime) -> int:
    """Elapsed whole minutes from *start* to *end*, rounded down.

    Both values are moved to UTC first: aware datetimes sharing a tzinfo
    subtract as wall-clock times, which is off by the DST shift in between.
    """
    elapsed = end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
    return int(elapsed.total_seconds() // 60)


class StatusResolver:
    """Derive :class:`MarketStatusInfo` snapshots from a market and a clock reading.

    Thresholds and the search window are passed explicitly; use
    :meth:`from_parameters` to read them from the configuration.
    """

    def __init__(
        self,
        closing_soon_minutes: int = 30,
        opening_soon_minutes: int = 30,
        opening_soon_enabled: bool = True,
        search_days: int = 14,
    ) -> None:
        if search_days < 1:
            raise ValueError("`search_days` must be >= 1")
        if closing_soon_minutes < 0 or opening_soon_minutes < 0:
            raise ValueError("Soon thresholds must be >= 0")
        self.closing_soon_minutes = closing_soon_minutes
        self.opening_soon_minutes = opening_soon_minutes
        self.opening_soon_enabled = opening_soon_enabled
        self.search_days = search_days

    @staticmethod
    def from_parameters(params: Any) -> StatusResolver:
        """Build a resolver from a :class:`ParameterLoader`-like object."""
        return StatusResolver(
            closing_soon_minutes=int(params.get("closing_soon_minutes", 30)),
            opening_soon_minutes=int(params.get("opening_soon_minutes", 30)),
            opening_soon_enabled=bool(params.get("opening_soon_enabled", True)),
            search_days=int(params.get("next_open_search_days", 14)),
        )

    def next_open(self, market: Market, now: datetime, start: Optional[date] = None) -> NextOpen:
        """Find the next session open of *market* from *start* (default: today).

        Walk forward one local calendar day at a time, for at most
        ``search_days`` days. A day qualifies when it is a trading day and not
        a holiday; on the first day its open must also be strictly after
        *now*.
        """
        local_now = TimezoneProjector.localize(now, market.timezone)
        first_day = local_now.date() if start is None else start
        for offset in range(self.search_days):
            candidate = first_day + timedelta(days=offset)
            if not SessionCalendar.is_trading_day(market, candidate):
                continue
            if SessionCalendar.is_holiday(market, candidate):
                continue
            open_instant = SessionCalendar.session_boundaries(market, candidate).open
            if offset == 0 and not local_now < open_instant:
                continue
            return NextOpen(open_instant)
        fallback_day = first_day + timedelta(days=self.search_days)
        Logger.warning(
            f"No trading day found for '{market.id}' within {self.search_days} days "
            f"from {first_day.isoformat()}; check its trading days and holidays"
        )
        fallback = SessionCalendar.local_instant(market, fallback_day, "00:00", "fallback")
        return NextOpen(fallback, degraded=True)

    def resolve(self, market: Market, now: datetime) -> MarketStatusInfo:
        """Return the status of *market* at the instant *now*."""
        local_time = TimezoneProjector.localize(now, market.timezone)
        civil = CivilDateTime.from_datetime(local_time)
        is_trading_day = SessionCalendar.is_trading_day(market, civil)
        is_holiday = SessionCalendar.is_holiday(market, civil)

        if not is_trading_day or is_holiday:
            return self._closed(market, local_time, is_trading_day, is_holiday)

        today = SessionCalendar.session_boundaries(market, civil)
        minutes = civil.minutes_since_midnight
        open_minutes = market.trading_hours.open_minutes
        close_minutes = market.trading_hours.close_minutes

        if minutes < open_minutes:
            if self.opening_soon_enabled and open_minutes - minutes <= self.opening_soon_minutes:
                return MarketStatusInfo(
                    status=MarketStatus.OPENING_SOON,
                    local_time=local_time,
                    is_trading_day=True,
                    is_holiday=False,
                    next_open=today.open,
                    time_until_open=minutes_between(local_time, today.open),
                )
            return self._closed(market, local_time, True, False)
        if minutes >= close_minutes:
            return self._closed(market, local_time, True, False)

        time_until_close = minutes_between(local_time, today.close)
        if today.lunch is not None and SessionCalendar.is_lunch_now(market, civil):
            return MarketStatusInfo(
                status=MarketStatus.LUNCH,
                local_time=local_time,
                is_trading_day=True,
                is_holiday=False,
                next_open=today.lunch[1],
                next_close=today.close,
                time_until_close=time_until_close,
            )

        upcoming = self.next_open(market, local_time, civil.date() + timedelta(days=1))
        status = MarketStatus.OPEN
        if close_minutes - minutes <= self.closing_soon_minutes:
            status = MarketStatus.CLOSING_SOON
        return MarketStatusInfo(
            status=status,
            local_time=local_time,
            is_trading_day=True,
            is_holiday=False,
            next_open=upcoming.instant,
            next_close=today.close,
            time_until_close=time_until_close,
            next_open_degraded=upcoming.degraded,
        )

    def _closed(
        self, market: Market, local_time: datetime, is_trading_day: bool, is_holiday: bool
    ) -> MarketStatusInfo:
        upcoming = self.next_open(market, local_time)
        return MarketStatusInfo(
            status=MarketStatus.CLOSED,
            local_time=local_time,
            is_trading_day=is_trading_day,
            is_holiday=is_holiday,
            next_open=upcoming.instant,
            time_until_open=(
                None if upcoming.degraded else minutes_between(local_time, upcoming.instant)
            ),
            next_open_degraded=upcoming.degraded,
        )
