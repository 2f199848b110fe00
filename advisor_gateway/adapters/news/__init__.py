"""News feed adapters."""

from advisor_gateway.adapters.news.base import AbstractNewsFeed
from advisor_gateway.adapters.news.in_memory import DEMO_NEWS_ITEMS, InMemoryNewsFeed

__all__ = ["AbstractNewsFeed", "DEMO_NEWS_ITEMS", "InMemoryNewsFeed"]
