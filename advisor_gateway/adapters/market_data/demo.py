"""Fixed demo quotes for development and offline runs.

Stocks are keyed by upper-case ticker, crypto assets by lower-case coin id
(e.g. "bitcoin"). Returned symbols are always upper-cased.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Mapping

from advisor_gateway.adapters.market_data.base import AbstractMarketDataProvider
from advisor_gateway.schemas.financial import MarketData

# symbol -> (price, change, change_percent)
DEMO_STOCK_QUOTES: dict[str, tuple[float, float, float]] = {
    "AAPL": (192.53, 2.41, 1.27),
    "GOOGL": (174.29, -1.22, -0.69),
    "MSFT": (417.32, 5.18, 1.26),
    "TSLA": (248.50, -3.21, -1.27),
    "AMZN": (186.43, 1.85, 1.00),
    "META": (504.20, 8.15, 1.64),
    "NVDA": (126.09, 2.53, 2.05),
}

DEMO_CRYPTO_QUOTES: dict[str, tuple[float, float, float]] = {
    "bitcoin": (67245.32, 1245.67, 1.89),
    "ethereum": (3421.56, -85.43, -2.44),
    "polkadot": (6.78, 0.23, 3.51),
    "cardano": (0.47, -0.02, -4.08),
    "solana": (157.89, 5.67, 3.72),
    "chainlink": (14.56, 0.89, 6.51),
    "polygon": (0.85, -0.03, -3.41),
}


def _to_market_data(symbol: str, quote: tuple[float, float, float]) -> MarketData:
    price, change, change_percent = quote
    return MarketData(
        symbol=symbol.upper(),
        price=round(price, 2),
        change=round(change, 2),
        change_percent=round(change_percent, 2),
        timestamp=datetime.now(timezone.utc),
    )


class DemoMarketDataProvider(AbstractMarketDataProvider):
    """Serves quotes from in-memory tables; unknown symbols return None."""

    def __init__(
        self,
        stocks: Mapping[str, tuple[float, float, float]] | None = None,
        crypto: Mapping[str, tuple[float, float, float]] | None = None,
    ) -> None:
        self._stocks = {k.upper(): v for k, v in (stocks or DEMO_STOCK_QUOTES).items()}
        self._crypto = {k.lower(): v for k, v in (crypto or DEMO_CRYPTO_QUOTES).items()}

    async def get_stock_quote(self, symbol: str) -> MarketData | None:
        quote = self._stocks.get(symbol.upper())
        return _to_market_data(symbol, quote) if quote else None

    async def get_crypto_quote(self, symbol: str) -> MarketData | None:
        quote = self._crypto.get(symbol.lower())
        return _to_market_data(symbol, quote) if quote else None
