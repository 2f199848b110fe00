"""Market data provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from advisor_gateway.schemas.financial import MarketData


class AbstractMarketDataProvider(ABC):
    """Source of price snapshots for stocks and crypto assets."""

    @abstractmethod
    async def get_stock_quote(self, symbol: str) -> MarketData | None:
        """Return the latest quote for a stock ticker, or None if unknown."""
        raise NotImplementedError

    @abstractmethod
    async def get_crypto_quote(self, symbol: str) -> MarketData | None:
        """Return the latest quote for a crypto asset id, or None if unknown."""
        raise NotImplementedError
