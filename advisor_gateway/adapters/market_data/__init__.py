"""Market data adapters."""

from advisor_gateway.adapters.market_data.base import AbstractMarketDataProvider
from advisor_gateway.adapters.market_data.demo import DemoMarketDataProvider

__all__ = ["AbstractMarketDataProvider", "DemoMarketDataProvider"]
