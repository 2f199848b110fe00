"""Request-scoped access to the collaborators owned by the application."""

from __future__ import annotations

from fastapi import Request

from advisor_gateway.adapters.market_data.base import AbstractMarketDataProvider
from advisor_gateway.adapters.news.base import AbstractNewsFeed
from advisor_gateway.services.advisor_service import AdvisorService


def get_advisor_service(request: Request) -> AdvisorService:
    return request.app.state.advisor


def get_market_data_provider(request: Request) -> AbstractMarketDataProvider:
    return request.app.state.market_data


def get_news_feed(request: Request) -> AbstractNewsFeed:
    return request.app.state.news_feed
