"""Unit tests for TradingHours and LunchBreak in utils.exchange.hours.

This module verifies the validation of ``HH:MM`` strings and of the session
ordering invariants, and that malformed values are never coerced to midnight.
"""

import json

import pytest  # type: ignore

from src.utils.exchange.errors import MalformedConfigError
from src.utils.exchange.hours import (LunchBreak, TradingHours,
                                      minutes_from_hhmm, parse_hhmm)


def test_trading_hours_valid_open_and_close():
    """Valid session with both open and close times."""
    hours = TradingHours("09:30", "16:00")
    if hours.open != "09:30" or hours.close != "16:00":
        raise AssertionError("Expected open '09:30' and close '16:00'")
    if (hours.open_minutes, hours.close_minutes) != (570, 960):
        raise AssertionError("Unexpected minutes since midnight")
    received_str: str = json.dumps(hours.to_json(), ensure_ascii=False)
    expected_str: str = '{"open": "09:30", "close": "16:00"}'
    if received_str != expected_str:
        raise AssertionError(
            f"Expected json to be: {expected_str}. Received was: {received_str}"
        )


def test_trading_hours_with_lunch():
    """Lunch inside the session is accepted and serialized."""
    hours = TradingHours("09:00", "15:00", LunchBreak("11:30", "12:30"))
    if hours.lunch is None or hours.lunch.start_minutes != 690:
        raise AssertionError("Expected lunch starting at 690 minutes")
    received_str: str = json.dumps(hours.to_json(), ensure_ascii=False)
    expected_str: str = (
        '{"open": "09:00", "close": "15:00", "lunch": {"start": "11:30", "end": "12:30"}}'
    )
    if received_str != expected_str:
        raise AssertionError(
            f"Expected json to be: {expected_str}. Received was: {received_str}"
        )


def test_lunch_may_touch_session_edges():
    """open <= lunch.start and lunch.end <= close are inclusive."""
    hours = TradingHours("09:00", "15:00", LunchBreak("09:00", "15:00"))
    if hours.lunch is None:
        raise AssertionError("Expected lunch to be kept")


@pytest.mark.parametrize("open_time, close_time", [("16:00", "09:30"), ("09:30", "09:30")])
def test_open_must_precede_close(open_time, close_time):
    """Overnight and empty sessions are rejected."""
    with pytest.raises(MalformedConfigError, match="`open` must be < `close`"):
        TradingHours(open_time, close_time)


def test_lunch_outside_session():
    """Lunch must lie within the session."""
    with pytest.raises(MalformedConfigError, match="`lunch.start` must be >= `open`"):
        TradingHours("09:00", "15:00", LunchBreak("08:30", "10:00"))
    with pytest.raises(MalformedConfigError, match="`lunch.end` must be <= `close`"):
        TradingHours("09:00", "15:00", LunchBreak("14:30", "15:30"))


def test_lunch_start_before_end():
    """An inverted lunch window is rejected."""
    with pytest.raises(MalformedConfigError, match="`lunch.start` must be < `lunch.end`"):
        LunchBreak("12:30", "11:30")


@pytest.mark.parametrize("value", ["930", "9:30", "09-30", "", "   ", "ab:cd"])
def test_invalid_format(value):
    """Malformed strings fail instead of becoming midnight."""
    with pytest.raises(MalformedConfigError, match="must be in 'HH:MM' format"):
        TradingHours(value, "16:00")


def test_out_of_bounds():
    """Raises error for times outside valid hour/minute bounds."""
    with pytest.raises(MalformedConfigError, match="valid time between 00:00 and 23:59"):
        TradingHours("24:00", "16:00")
    with pytest.raises(MalformedConfigError, match="valid time between 00:00 and 23:59"):
        parse_hhmm("10:60", "close")


@pytest.mark.parametrize("value", [None, 930])
def test_non_string_input(value):
    """Raises error if time inputs are not strings."""
    with pytest.raises(MalformedConfigError, match="`open` must be an 'HH:MM' string"):
        TradingHours(value, "16:00")  # type: ignore


def test_malformed_config_is_value_error():
    """MalformedConfigError keeps ValueError semantics for callers."""
    with pytest.raises(ValueError):
        minutes_from_hhmm("noon")


def test_from_json():
    """Trading hours build from catalog mappings."""
    hours = TradingHours.from_json(
        {"open": "09:30", "close": "15:00", "lunch": {"start": "11:30", "end": "13:00"}}
    )
    if hours != TradingHours("09:30", "15:00", LunchBreak("11:30", "13:00")):
        raise AssertionError(f"Unexpected hours: {hours}")
    with pytest.raises(MalformedConfigError, match="`trading_hours` must be a mapping"):
        TradingHours.from_json(["09:30", "15:00"])
    with pytest.raises(MalformedConfigError, match="`lunch` must be a mapping"):
        TradingHours.from_json({"open": "09:30", "close": "15:00", "lunch": "11:30"})
    with pytest.raises(MalformedConfigError, match="`close` must be an 'HH:MM' string"):
        TradingHours.from_json({"open": "09:30"})
