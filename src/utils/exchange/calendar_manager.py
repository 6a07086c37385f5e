"""Utilities for enriching market holiday lists with exchange calendars.

Wraps the ``holidays`` package financial calendars (NYSE, NSE, B3, ...) so a
market declaring a ``holiday_calendar`` code can have its explicit holiday list
extended with the library's dates.
"""

import datetime
from typing import Iterable, List, Optional

import holidays  # type: ignore

from src.utils.exchange.market import Market
from src.utils.io.logger import Logger


# pylint: disable=too-few-public-methods
class CalendarManager:
    """Builds exchange holiday sets for holiday-aware status resolution."""

    @staticmethod
    def _validate_code(code: Optional[str]) -> str:
        if code is None:
            raise ValueError("Holiday calendar code is not defined")
        if not isinstance(code, str):
            raise ValueError(f"Holiday calendar code is invalid: {code}")
        code = code.strip().upper()
        if len(code) == 0:
            raise ValueError("Holiday calendar code is empty")
        return code

    @staticmethod
    def default_years(years_ahead: int = 1) -> List[int]:
        """Return the current year plus *years_ahead* following years."""
        current_year = datetime.date.today().year
        return list(range(current_year, current_year + years_ahead + 1))

    @staticmethod
    def build_holidays(code: Optional[str], years: Iterable[int]) -> List[datetime.date]:
        """Return the sorted holiday dates of exchange *code* for *years*."""
        calendar = holidays.financial_holidays(
            CalendarManager._validate_code(code), years=list(years)
        )
        return sorted(calendar.keys())

    @staticmethod
    def with_library_holidays(market: Market, years: Iterable[int]) -> Market:
        """Return *market* with its holidays merged with its library calendar.

        Markets without a ``holiday_calendar`` code are returned unchanged.
        """
        if market.holiday_calendar is None:
            return market
        extra = CalendarManager.build_holidays(market.holiday_calendar, years)
        Logger.debug(
            f"Merged {len(extra)} '{market.holiday_calendar}' holidays into '{market.id}'"
        )
        return market.with_holidays(extra)
