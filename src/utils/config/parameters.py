"""Central configuration manager.

This module handles the loading and initialization of both static and dynamic parameters,
including status thresholds, the next-open search window, refresh cadence and the path of
the market catalog. Environment variables (optionally read from a ``.env`` file) override
the values that are meant to change between deployments.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from src.utils.config.markets import MarketRepository
from src.utils.config.path_utils import PathUtils
from src.utils.exchange.calendar_manager import CalendarManager
from src.utils.exchange.market import Market
from src.utils.exchange.trading_days import WEEKDAY_NAMES

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Environment variable '{name}' is not a boolean: '{raw}'")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"Environment variable '{name}' is not an integer: '{raw}'") from exc


class ParameterLoader:
    """Centralized configuration manager for the market status engine."""

    _MARKETS_FILEPATH = "config/markets.json"
    _ENV_FILEPATH = ".env"

    def __init__(self, env_filepath: Optional[str] = None):
        self.env_filepath = Path(env_filepath or ParameterLoader._ENV_FILEPATH)
        load_dotenv(dotenv_path=self.env_filepath)
        self._parameters: Dict[str, Any] = self._initialize_parameters()
        self._repository: Optional[MarketRepository] = None

    def _initialize_parameters(self) -> Dict[str, Any]:
        """Initializes the parameters dictionary by merging constant and environment values."""
        constant_params = {
            "closing_soon_minutes": 30,
            "date_format": "%Y-%m-%d",
            "holiday_years_ahead": 1,
            "next_open_search_days": 14,
            "opening_soon_minutes": 30,
            "weekdays": list(WEEKDAY_NAMES),
        }
        env_params = {
            "log_level": os.getenv("LOG_LEVEL", "INFO").strip().upper(),
            "opening_soon_enabled": _env_bool("OPENING_SOON_ENABLED", True),
            "refresh_interval_seconds": _env_int("REFRESH_INTERVAL_SECONDS", 60),
            "use_library_holidays": _env_bool("USE_LIBRARY_HOLIDAYS", False),
        }
        path_params = {
            "markets_filepath": PathUtils.build(
                os.getenv("MARKETS_FILEPATH", "").strip() or self._MARKETS_FILEPATH
            ),
        }
        return {**constant_params, **env_params, **path_params}

    def get_all(self) -> Any:
        """Return all parameter."""
        return self._parameters

    def get(self, key: str, default: Any = None) -> Any:
        """Return parameter value if exists, else None."""
        try:
            return self._parameters[key]
        except KeyError:
            return default

    def __getitem__(self, key: str) -> Any:
        """Allow dict-style access to parameters."""
        return self._parameters[key]

    def market_repository(self) -> MarketRepository:
        """Return the market catalog, loading it on first use."""
        if self._repository is None:
            repository = MarketRepository(self.get("markets_filepath"))
            if self.get("use_library_holidays"):
                years = CalendarManager.default_years(self.get("holiday_years_ahead"))
                for market in repository.get_all():
                    repository.replace(CalendarManager.with_library_holidays(market, years))
            self._repository = repository
        return self._repository

    def markets(self) -> List[Market]:
        """Return all markets of the catalog."""
        return self.market_repository().get_all()

    def market(self, market_id: str) -> Market:
        """Return a specific market."""
        return self.market_repository().get(market_id)
