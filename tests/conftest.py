"""Shared market definitions for the test-suite."""

from typing import Iterable, Optional

import pytest  # type: ignore

from src.utils.exchange.hours import LunchBreak, TradingHours
from src.utils.exchange.market import Market
from src.utils.exchange.trading_days import TradingDays

WEEKDAYS_MON_FRI = [1, 2, 3, 4, 5]


def build_market(
    market_id: str = "nse_bse",
    timezone: str = "Asia/Kolkata",
    open_time: str = "09:15",
    close_time: str = "15:30",
    lunch: Optional[LunchBreak] = None,
    trading_days: Iterable[int] = tuple(WEEKDAYS_MON_FRI),
    holidays: Iterable[str] = (),
) -> Market:
    """Build a market with sensible defaults (India, no lunch)."""
    return Market(
        id=market_id,
        name=market_id.upper(),
        timezone=timezone,
        trading_hours=TradingHours(open_time, close_time, lunch),
        trading_days=TradingDays(trading_days),
        holidays=frozenset(holidays),
    )


@pytest.fixture
def market_factory():
    """Expose :func:`build_market` to tests needing custom calendars."""
    return build_market


@pytest.fixture
def india_market() -> Market:
    """NSE/BSE: 09:15-15:30 Asia/Kolkata, Monday to Friday, Dussehra 2026 holiday."""
    return build_market(holidays=["2026-10-20"])


@pytest.fixture
def tokyo_market() -> Market:
    """TSE: 09:00-15:00 Asia/Tokyo with a 11:30-12:30 lunch break."""
    return build_market(
        market_id="tse",
        timezone="Asia/Tokyo",
        open_time="09:00",
        close_time="15:00",
        lunch=LunchBreak("11:30", "12:30"),
    )


@pytest.fixture
def new_york_market() -> Market:
    """NYSE: 09:30-16:00 America/New_York, Monday to Friday."""
    return build_market(
        market_id="nyse",
        timezone="America/New_York",
        open_time="09:30",
        close_time="16:00",
        holidays=["2026-11-26"],
    )
