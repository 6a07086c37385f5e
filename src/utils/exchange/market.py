"""Typed and validated representation of a market and its trading calendar."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, FrozenSet, Iterable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.utils.exchange.errors import InvalidTimezoneError, MalformedConfigError
from src.utils.exchange.hours import TradingHours
from src.utils.exchange.trading_days import TradingDays

DATE_FORMAT = "%Y-%m-%d"


def validate_timezone(value: Any) -> str:
    """Return the stripped IANA identifier or raise :class:`InvalidTimezoneError`."""
    if not isinstance(value, str) or len(value.strip()) == 0:
        raise InvalidTimezoneError(f"Invalid timezone: '{value}' is empty")
    value = value.strip()
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidTimezoneError(f"Invalid timezone: '{value}'") from exc
    return value


def parse_holidays(values: Iterable[Any]) -> FrozenSet[date]:
    """Convert ``YYYY-MM-DD`` strings (or dates) into a frozen set of dates."""
    if isinstance(values, (str, bytes)):
        raise MalformedConfigError("`holidays` must be a list of 'YYYY-MM-DD' dates")
    parsed = set()
    for value in values:
        if isinstance(value, datetime):
            parsed.add(value.date())
        elif isinstance(value, date):
            parsed.add(value)
        else:
            try:
                parsed.add(datetime.strptime(str(value).strip(), DATE_FORMAT).date())
            except ValueError as exc:
                raise MalformedConfigError(
                    f"Holiday must be in 'YYYY-MM-DD' format, got '{value}'"
                ) from exc
    return frozenset(parsed)


@dataclass(frozen=True)
class Market:
    """Static definition of an exchange as consumed by the status engine.

    * id / name: identifiers, opaque to the engine.
    * timezone: IANA timezone for every wall-clock computation.
    * trading_hours: regular session with optional lunch break.
    * trading_days: weekdays (0 = Sunday) the market trades on.
    * holidays: local dates with no trading even on a trading weekday.

    The remaining fields are descriptive metadata of the catalog.
    """

    id: str
    name: str
    timezone: str
    trading_hours: TradingHours
    trading_days: TradingDays
    holidays: FrozenSet[date] = field(default_factory=frozenset)
    country: str = ""
    flag: str = ""
    index: str = ""
    data_source: str = ""
    holiday_calendar: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("id", "name"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value.strip()) == 0:
                raise MalformedConfigError(f"`{name}` must be a non-empty string")
        object.__setattr__(self, "timezone", validate_timezone(self.timezone))
        if not isinstance(self.trading_hours, TradingHours):
            raise TypeError("`trading_hours` must be an instance of TradingHours")
        if not isinstance(self.trading_days, TradingDays):
            raise TypeError("`trading_days` must be an instance of TradingDays")
        object.__setattr__(self, "holidays", parse_holidays(self.holidays))

    def with_holidays(self, extra: Iterable[date]) -> Market:
        """Return a copy whose holiday set also contains *extra*."""
        return replace(self, holidays=self.holidays | parse_holidays(extra))

    @staticmethod
    def from_json(data: Any) -> Market:
        """Build a :class:`Market` from one entry of the market catalog."""
        if not isinstance(data, dict):
            raise MalformedConfigError(f"Market entry must be a mapping, got {data!r}")
        market_id = data.get("id")
        for key in ("timezone", "trading_hours", "trading_days"):
            if data.get(key) is None:
                raise MalformedConfigError(f"`{key}` of '{market_id}' is not defined")
        return Market(
            id=market_id,
            name=data.get("name", market_id),
            timezone=data["timezone"],
            trading_hours=TradingHours.from_json(data["trading_hours"]),
            trading_days=TradingDays(data["trading_days"]),
            holidays=parse_holidays(data.get("holidays") or []),
            country=data.get("country", ""),
            flag=data.get("flag", ""),
            index=data.get("index", ""),
            data_source=data.get("data_source", ""),
            holiday_calendar=data.get("holiday_calendar"),
        )

    def to_json(self) -> Any:
        """Object to JSON."""
        result = {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "flag": self.flag,
            "index": self.index,
            "timezone": self.timezone,
            "trading_hours": self.trading_hours.to_json(),
            "trading_days": self.trading_days.to_json(),
            "holidays": [d.strftime(DATE_FORMAT) for d in sorted(self.holidays)],
            "data_source": self.data_source,
        }
        if self.holiday_calendar is not None:
            result["holiday_calendar"] = self.holiday_calendar
        return result
