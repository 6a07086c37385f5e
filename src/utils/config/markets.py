"""Markets module for loading the static market catalog.

Provides a repository class that reads market definitions from a JSON file and
validates every entry into a :class:`Market`.
"""

from typing import Any, Dict, List

from src.utils.exchange.errors import MalformedConfigError
from src.utils.exchange.market import Market
from src.utils.io.json_manager import JsonManager


class MarketRepository:
    """Repository and interface for accessing the market catalog.

    The catalog file holds ``{"markets": [...]}``; entry order is preserved and
    ids must be unique.
    """

    def __init__(self, filepath: str):
        """Initialize the MarketRepository."""
        if not filepath or not isinstance(filepath, str) or filepath.strip() == "":
            raise ValueError(
                "Filepath for MarketRepository cannot be empty, None, or whitespace."
            )
        self.filepath = filepath
        self._markets: List[Market] = MarketRepository._parse(JsonManager.load(filepath))
        self._by_id: Dict[str, Market] = {m.id: m for m in self._markets}

    @staticmethod
    def _parse(data: Any) -> List[Market]:
        if not isinstance(data, dict) or not isinstance(data.get("markets"), list):
            raise MalformedConfigError("Market catalog must contain a 'markets' list")
        markets: List[Market] = []
        seen = set()
        for entry in data["markets"]:
            market = Market.from_json(entry)
            if market.id in seen:
                raise MalformedConfigError(f"Market catalog has duplicated items: {market.id}")
            seen.add(market.id)
            markets.append(market)
        if len(markets) == 0:
            raise MalformedConfigError("Market catalog is empty")
        return markets

    def get_all(self) -> List[Market]:
        """Get all markets in catalog order."""
        return list(self._markets)

    def ids(self) -> List[str]:
        """Get the ids of all markets in catalog order."""
        return [m.id for m in self._markets]

    def get(self, market_id: str) -> Market:
        """Get a market by id."""
        try:
            return self._by_id[market_id]
        except KeyError as exc:
            raise ValueError(f"'{market_id}' is not defined in the market catalog") from exc

    def replace(self, market: Market) -> None:
        """Swap the catalog entry sharing *market*'s id."""
        if market.id not in self._by_id:
            raise ValueError(f"'{market.id}' is not defined in the market catalog")
        self._markets = [market if m.id == market.id else m for m in self._markets]
        self._by_id[market.id] = market
