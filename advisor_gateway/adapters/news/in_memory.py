"""News feed backed by a list held in memory.

Fetching live feeds is out of scope; the shipped app serves the fixed
``DEMO_NEWS_ITEMS`` unless a populated feed is passed to ``create_app``.
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Iterable

from advisor_gateway.adapters.news.base import AbstractNewsFeed
from advisor_gateway.schemas.financial import NewsItem

# Search only looks at this many of the most recent items
SEARCH_WINDOW = 50

DEMO_NEWS_ITEMS: tuple[NewsItem, ...] = (
    NewsItem(
        title="Fed signals patience on rate cuts",
        description="Policymakers want more evidence that inflation is cooling before easing.",
        url="https://example.com/news/fed-patience",
        source="Reuters",
        published_at=datetime(2024, 6, 12, 18, 30, tzinfo=timezone.utc),
    ),
    NewsItem(
        title="Tech shares lead broad market rally",
        description="Chipmakers and cloud names push the Nasdaq to a record close.",
        url="https://example.com/news/tech-rally",
        source="Bloomberg",
        published_at=datetime(2024, 6, 12, 21, 5, tzinfo=timezone.utc),
    ),
    NewsItem(
        title="Bitcoin steadies after volatile week",
        description="Crypto markets recover as spot ETF inflows resume.",
        url="https://example.com/news/bitcoin-steadies",
        source="BBC Business",
        published_at=datetime(2024, 6, 11, 9, 15, tzinfo=timezone.utc),
    ),
    NewsItem(
        title="Oil slips as demand outlook dims",
        description="Brent falls for a third session on softer Chinese imports.",
        url="https://example.com/news/oil-slips",
        source="Reuters",
        published_at=datetime(2024, 6, 10, 14, 0, tzinfo=timezone.utc),
    ),
)


class InMemoryNewsFeed(AbstractNewsFeed):
    """Holds headlines pushed by an ingester (or fixtures in tests)."""

    def __init__(self, items: Iterable[NewsItem] | None = None) -> None:
        self._lock = threading.Lock()
        self._items: list[NewsItem] = list(items or [])

    def add(self, *items: NewsItem) -> None:
        with self._lock:
            self._items.extend(items)

    def _sorted(self) -> list[NewsItem]:
        with self._lock:
            return sorted(self._items, key=lambda item: item.published_at, reverse=True)

    async def latest(self, limit: int) -> list[NewsItem]:
        return self._sorted()[:limit]

    async def search(self, keyword: str, limit: int) -> list[NewsItem]:
        needle = keyword.lower()
        matches = [
            item
            for item in self._sorted()[:SEARCH_WINDOW]
            if needle in item.title.lower() or needle in item.description.lower()
        ]
        return matches[:limit]
