from __future__ import annotations

from advisor_gateway.api.routes.advisor import router as advisor_router
from advisor_gateway.api.routes.health import router as health_router
from advisor_gateway.api.routes.market import router as market_router
from advisor_gateway.api.routes.news import router as news_router

__all__ = ["advisor_router", "health_router", "market_router", "news_router"]
