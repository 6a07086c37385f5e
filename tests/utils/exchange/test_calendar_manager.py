"""Unit tests for the CalendarManager module.

This test suite validates the retrieval of exchange holidays and their merge
into market definitions. The ``holidays`` package is replaced with a dummy so
the results do not depend on the installed calendar data.
"""

# pylint: disable=protected-access

import datetime
from dataclasses import replace

import pytest  # type: ignore

from src.utils.exchange import calendar_manager
from src.utils.exchange.calendar_manager import CalendarManager


class DummyHolidayBase:  # pylint: disable=too-few-public-methods
    """Dummy holidays class to provide mock holiday dates for testing."""

    def __init__(self, years=None):
        self.years = years

    def keys(self):
        """Returns a fixed, unsorted list of holiday dates."""
        return [
            datetime.date(2026, 12, 25),
            datetime.date(2026, 1, 1),
            datetime.date(2026, 7, 3),
        ]


class DummyHolidaysModule:  # pylint: disable=too-few-public-methods
    """Dummy holidays module recording the requested calendar codes."""

    def __init__(self):
        self.calls = []

    def financial_holidays(self, code, years=None):
        """Record the call and return a dummy calendar."""
        self.calls.append((code, years))
        return DummyHolidayBase(years)


@pytest.fixture(name="dummy_holidays")
def fixture_dummy_holidays(monkeypatch):
    """Patch the holidays package used by CalendarManager."""
    module = DummyHolidaysModule()
    monkeypatch.setattr(calendar_manager, "holidays", module)
    return module


def test_build_holidays_sorted(dummy_holidays):
    """Holidays come back sorted and the code is normalized."""
    result = CalendarManager.build_holidays(" xnys ", [2026])
    if result != [
        datetime.date(2026, 1, 1),
        datetime.date(2026, 7, 3),
        datetime.date(2026, 12, 25),
    ]:
        raise AssertionError(f"Unexpected holidays: {result}")
    if dummy_holidays.calls != [("XNYS", [2026])]:
        raise AssertionError(f"Unexpected calls: {dummy_holidays.calls}")


@pytest.mark.parametrize(
    "code, message",
    [
        (None, "Holiday calendar code is not defined"),
        (123, "Holiday calendar code is invalid"),
        ("   ", "Holiday calendar code is empty"),
    ],
)
def test_validate_code_errors(code, message):
    """Missing, non-string and empty codes are rejected."""
    with pytest.raises(ValueError, match=message):
        CalendarManager._validate_code(code)


def test_default_years():
    """Current year plus the requested years ahead."""
    current_year = datetime.date.today().year
    if CalendarManager.default_years(2) != [current_year, current_year + 1, current_year + 2]:
        raise AssertionError("Unexpected default years")
    if CalendarManager.default_years(0) != [current_year]:
        raise AssertionError("Expected only the current year")


def test_with_library_holidays_merges(dummy_holidays, market_factory):
    """Markets with a calendar code get the library dates added."""
    market = market_factory(
        market_id="nyse",
        timezone="America/New_York",
        open_time="09:30",
        close_time="16:00",
        holidays=["2026-11-26"],
    )
    market = replace(market, holiday_calendar="XNYS")
    merged = CalendarManager.with_library_holidays(market, [2026])
    if len(merged.holidays) != 4:
        raise AssertionError(f"Expected 4 holidays, got {sorted(merged.holidays)}")
    if datetime.date(2026, 11, 26) not in merged.holidays:
        raise AssertionError("Explicit holidays must be kept")
    if len(dummy_holidays.calls) != 1:
        raise AssertionError("Expected one library lookup")


def test_with_library_holidays_without_code(dummy_holidays, india_market):
    """Markets without a calendar code are returned unchanged."""
    result = CalendarManager.with_library_holidays(india_market, [2026])
    if result is not india_market:
        raise AssertionError("Expected the same market instance")
    if dummy_holidays.calls:
        raise AssertionError("No library lookup expected")
