"""Polling monitor that refreshes the market board on a fixed interval.

The module can be imported as a library (exposing :class:`MarketMonitor`) or
executed directly (``python -m src.market_status.monitor``), in which case it
loads the market catalog from the configuration and logs the board every
``refresh_interval_seconds``.
"""

import time
from datetime import datetime, timezone
from typing import List, Optional

from src.market_status.board.market_board import MarketBoard, MarketWithStatus
from src.market_status.engine.status_resolver import (StatusResolver,
                                                      minutes_between)
from src.market_status.presentation.countdown import (countdown_target,
                                                      format_local_time,
                                                      format_time_remaining)
from src.utils.config.parameters import ParameterLoader
from src.utils.io.logger import Logger


class MarketMonitor:
    """Keeps the latest board snapshot together with its refresh metadata."""

    def __init__(self, board: MarketBoard, refresh_interval_seconds: int = 60) -> None:
        if refresh_interval_seconds <= 0:
            raise ValueError("`refresh_interval_seconds` must be > 0")
        self.board = board
        self.refresh_interval_seconds = refresh_interval_seconds
        self.snapshot: List[MarketWithStatus] = []
        self.last_updated: Optional[datetime] = None
        self.error: Optional[str] = None

    @staticmethod
    def from_parameters(params: ParameterLoader) -> "MarketMonitor":
        """Build a monitor over the configured catalog."""
        board = MarketBoard(params.markets(), StatusResolver.from_parameters(params))
        return MarketMonitor(board, int(params.get("refresh_interval_seconds", 60)))

    def refresh(self, now: Optional[datetime] = None) -> List[MarketWithStatus]:
        """Recompute the board at *now* (default: the current UTC time)."""
        current = now or datetime.now(timezone.utc)
        self.error = None
        try:
            self.snapshot = self.board.snapshot(current)
        except ValueError as exc:
            self.error = str(exc)
            raise
        self.last_updated = current
        return self.snapshot

    @staticmethod
    def describe(item: MarketWithStatus) -> str:
        """One log line for a market: status, local time and countdown."""
        info = item.status_info
        line = (
            f"{item.market.name:<32} {info.status.value:<13} "
            f"{format_local_time(info.local_time)}"
        )
        target = countdown_target(info)
        if target is not None and not (target is info.next_open and info.next_open_degraded):
            remaining = minutes_between(info.local_time, target)
            line += f"  ({format_time_remaining(remaining)})"
        return line

    def log_snapshot(self) -> None:
        """Log the latest snapshot."""
        Logger.separator()
        for item in self.snapshot:
            Logger.info(self.describe(item))
        Logger.success(
            f"{MarketBoard.open_count(self.snapshot)} of {len(self.snapshot)} markets open"
        )

    def run(self) -> None:
        """Refresh and log forever."""
        while True:
            try:
                self.refresh()
                self.log_snapshot()
            except ValueError as error:
                Logger.error(f"Error during scheduled refresh: {error}")
            time.sleep(self.refresh_interval_seconds)


if __name__ == "__main__":
    MarketMonitor.from_parameters(ParameterLoader()).run()
