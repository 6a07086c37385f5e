"""Countdown helpers shared by every consumer of :class:`MarketStatusInfo`."""

from datetime import datetime
from typing import Optional

from src.market_status.engine.status_resolver import (MarketStatus,
                                                      MarketStatusInfo)

_COUNTS_TO_CLOSE = (MarketStatus.OPEN, MarketStatus.CLOSING_SOON)


def format_time_remaining(minutes: int) -> str:
    """Render a minute count as ``"2h 5m"`` or ``"45m"``; negatives become ``"0m"``."""
    minutes = max(int(minutes), 0)
    hours, mins = divmod(minutes, 60)
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"


def format_local_time(value: datetime) -> str:
    """Render a wall-clock time as ``"09:05:03 AM"``."""
    return value.strftime("%I:%M:%S %p")


def countdown_target(info: MarketStatusInfo) -> Optional[datetime]:
    """Return the boundary a countdown should run to for *info*.

    Open sessions count down to the close; every other state (lunch included,
    whose next open is the end of the break) counts down to the next open.
    """
    if info.status in _COUNTS_TO_CLOSE:
        return info.next_close
    return info.next_open
