"""News feed interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from advisor_gateway.schemas.financial import NewsItem


class AbstractNewsFeed(ABC):
    """Source of financial news headlines."""

    @abstractmethod
    async def latest(self, limit: int) -> list[NewsItem]:
        """Return up to ``limit`` most recent items, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def search(self, keyword: str, limit: int) -> list[NewsItem]:
        """Return up to ``limit`` recent items mentioning ``keyword``."""
        raise NotImplementedError
