"""Unit tests for countdown formatting helpers."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest  # type: ignore

from src.market_status.engine.status_resolver import (MarketStatus,
                                                      MarketStatusInfo,
                                                      StatusResolver)
from src.market_status.presentation.countdown import (countdown_target,
                                                      format_local_time,
                                                      format_time_remaining)


@pytest.mark.parametrize(
    "minutes, expected",
    [(0, "0m"), (45, "45m"), (60, "1h 0m"), (125, "2h 5m"), (374, "6h 14m"), (-3, "0m")],
)
def test_format_time_remaining(minutes, expected):
    """Hours appear only when at least one full hour remains."""
    result = format_time_remaining(minutes)
    if result != expected:
        raise AssertionError(f"{minutes}: expected {expected!r}, got {result!r}")


def test_format_local_time():
    """Twelve-hour clock with seconds and AM/PM."""
    value = datetime(2026, 10, 27, 15, 5, 3, tzinfo=ZoneInfo("Asia/Kolkata"))
    if format_local_time(value) != "03:05:03 PM":
        raise AssertionError(f"Unexpected format: {format_local_time(value)}")


def test_countdown_target_open_counts_to_close(india_market):
    """Open markets count down to the close."""
    now = datetime(2026, 10, 27, 3, 45, tzinfo=timezone.utc)
    info = StatusResolver().resolve(india_market, now)
    if info.status != MarketStatus.OPEN:
        raise AssertionError(f"Expected open, got {info.status}")
    if countdown_target(info) != info.next_close:
        raise AssertionError("Expected the close as target")


def test_countdown_target_lunch_counts_to_reopen(tokyo_market):
    """Lunch counts down to the end of the break."""
    now = datetime(2026, 10, 27, 12, 0, tzinfo=ZoneInfo("Asia/Tokyo"))
    info = StatusResolver().resolve(tokyo_market, now)
    if info.status != MarketStatus.LUNCH:
        raise AssertionError(f"Expected lunch, got {info.status}")
    if countdown_target(info) != datetime(2026, 10, 27, 12, 30, tzinfo=ZoneInfo("Asia/Tokyo")):
        raise AssertionError(f"Unexpected target: {countdown_target(info)}")


def test_countdown_target_closed_without_open():
    """A closed snapshot without next open has no target."""
    info = MarketStatusInfo(
        status=MarketStatus.CLOSED,
        local_time=datetime(2026, 10, 27, tzinfo=timezone.utc),
        is_trading_day=False,
        is_holiday=False,
    )
    if countdown_target(info) is not None:
        raise AssertionError("Expected no countdown target")
