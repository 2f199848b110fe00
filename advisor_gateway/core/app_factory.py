"""Application factory for the FastAPI app.

Builds the app together with the objects it owns for its whole lifetime:
the request throttle, its periodic sweeper and the external collaborators
(advisor, market data, news). Tests pass their own collaborators in.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from advisor_gateway.adapters.llm.base import AbstractLLMClient
from advisor_gateway.adapters.llm.factory import create_llm_client
from advisor_gateway.adapters.market_data.base import AbstractMarketDataProvider
from advisor_gateway.adapters.market_data.demo import DemoMarketDataProvider
from advisor_gateway.adapters.news.base import AbstractNewsFeed
from advisor_gateway.adapters.news.in_memory import DEMO_NEWS_ITEMS, InMemoryNewsFeed
from advisor_gateway.adapters.rate_limit.base import AbstractRequestThrottle
from advisor_gateway.adapters.rate_limit.factory import create_request_throttle
from advisor_gateway.api.routes import advisor_router, health_router, market_router, news_router
from advisor_gateway.core.config import settings
from advisor_gateway.core.exception_handlers import setup_exception_handlers
from advisor_gateway.core.logging import configure_logging
from advisor_gateway.core.middleware import request_id_middleware
from advisor_gateway.core.rate_limit import rate_limit_middleware
from advisor_gateway.services.advisor_service import AdvisorService
from advisor_gateway.services.throttle_sweeper import ThrottleSweeper

logger = logging.getLogger(__name__)


def create_app(
    *,
    throttle: AbstractRequestThrottle | None = None,
    llm_client: AbstractLLMClient | None = None,
    market_data: AbstractMarketDataProvider | None = None,
    news_feed: AbstractNewsFeed | None = None,
    configure_logs: bool = True,
) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Args:
        throttle: Throttle store; defaults to the configured backend.
        llm_client: LLM client; defaults to the configured provider.
        market_data: Quote provider; defaults to demo quotes.
        news_feed: News source; defaults to the demo headlines.
        configure_logs: Install the root log handler (off in some tests).

    Returns:
        Configured FastAPI app with middleware, handlers and routers.
    """
    # Logging first so subsequent init logs are formatted as desired
    if configure_logs:
        configure_logging(settings.log, debug=settings.app.debug)

    if throttle is None:
        throttle = create_request_throttle(settings.app)
    sweeper = ThrottleSweeper(
        throttle,
        interval_seconds=settings.app.rate_limit_sweep_interval_ms / 1000,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.app.rate_limit_enabled:
            await sweeper.start()
        logger.info(
            "app.startup",
            extra={
                "rate_limit_enabled": settings.app.rate_limit_enabled,
                "rate_limit_backend": settings.app.rate_limit_backend,
                "rate_limit_max_requests": settings.app.rate_limit_max_requests,
                "rate_limit_window_ms": settings.app.rate_limit_window_ms,
            },
        )
        try:
            yield
        finally:
            await sweeper.stop()
            throttle.reset()
            logger.info("app.shutdown")

    app = FastAPI(
        title="Financial Advisor Gateway",
        description=(
            "Forwards financial questions to an LLM and serves market quotes and "
            "news, behind a per-client fixed-window rate limit."
        ),
        version=settings.app.version,
        lifespan=lifespan,
    )

    app.state.throttle = throttle
    app.state.sweeper = sweeper
    if llm_client is None:
        llm_client = create_llm_client(settings.llm)

    app.state.advisor = AdvisorService(llm_client)
    app.state.market_data = market_data if market_data is not None else DemoMarketDataProvider()
    app.state.news_feed = news_feed if news_feed is not None else InMemoryNewsFeed(DEMO_NEWS_ITEMS)

    # Last registered runs first: request ids are assigned before throttling
    app.middleware("http")(rate_limit_middleware)
    app.middleware("http")(request_id_middleware)

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(advisor_router, prefix="/api")
    app.include_router(market_router, prefix="/api")
    app.include_router(news_router, prefix="/api")

    return app
