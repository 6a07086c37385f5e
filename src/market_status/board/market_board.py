"""Multi-market status board.

Resolves every market of a catalog against one clock reading, the way the
dashboard refreshes all exchanges together, and exposes the result as plain
records or as a :class:`pandas.DataFrame` for tabular consumers.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Sequence

import pandas as pd  # type: ignore

from src.market_status.engine.status_resolver import (MarketStatus,
                                                      MarketStatusInfo,
                                                      StatusResolver)
from src.utils.exchange.market import Market
from src.utils.io.logger import Logger

FRAME_COLUMNS: List[str] = [
    "id",
    "name",
    "country",
    "timezone",
    "status",
    "local_time",
    "is_trading_day",
    "is_holiday",
    "next_open",
    "next_close",
    "time_until_open",
    "time_until_close",
    "next_open_degraded",
]


@dataclass(frozen=True)
class MarketWithStatus:
    """A market definition paired with its status at one instant."""

    market: Market
    status_info: MarketStatusInfo


class MarketBoard:
    """Status board over an ordered collection of markets."""

    def __init__(self, markets: Sequence[Market], resolver: StatusResolver) -> None:
        if len(markets) == 0:
            raise ValueError("Parameter 'markets' is empty")
        self._markets: List[Market] = list(markets)
        self._resolver = resolver

    @property
    def markets(self) -> List[Market]:
        """Return the markets in board order."""
        return list(self._markets)

    def snapshot(self, now: datetime) -> List[MarketWithStatus]:
        """Resolve every market at *now*, preserving board order."""
        result: List[MarketWithStatus] = []
        for market in self._markets:
            try:
                info = self._resolver.resolve(market, now)
            except ValueError as exc:
                Logger.error(f"Status of '{market.id}' could not be resolved: {exc}")
                raise
            result.append(MarketWithStatus(market, info))
        return result

    @staticmethod
    def count_by_status(snapshot: Sequence[MarketWithStatus]) -> Dict[MarketStatus, int]:
        """Return how many markets are in each state (all states present)."""
        counts = Counter(item.status_info.status for item in snapshot)
        return {status: counts.get(status, 0) for status in MarketStatus}

    @staticmethod
    def open_count(snapshot: Sequence[MarketWithStatus]) -> int:
        """Return the number of markets strictly in the ``open`` state."""
        return MarketBoard.count_by_status(snapshot)[MarketStatus.OPEN]

    @staticmethod
    def to_frame(snapshot: Sequence[MarketWithStatus]) -> pd.DataFrame:
        """Return one row per market with its identity and status fields."""
        rows = []
        for item in snapshot:
            info = item.status_info
            rows.append(
                {
                    "id": item.market.id,
                    "name": item.market.name,
                    "country": item.market.country,
                    "timezone": item.market.timezone,
                    "status": info.status.value,
                    "local_time": info.local_time,
                    "is_trading_day": info.is_trading_day,
                    "is_holiday": info.is_holiday,
                    "next_open": info.next_open,
                    "next_close": info.next_close,
                    "time_until_open": info.time_until_open,
                    "time_until_close": info.time_until_close,
                    "next_open_degraded": info.next_open_degraded,
                }
            )
        return pd.DataFrame(rows, columns=FRAME_COLUMNS)
