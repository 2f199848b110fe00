from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from advisor_gateway.adapters.news.base import AbstractNewsFeed
from advisor_gateway.api.deps import get_news_feed
from advisor_gateway.core.config import settings
from advisor_gateway.core.errors import ValidationAppError
from advisor_gateway.schemas.envelope import ApiResponse
from advisor_gateway.schemas.financial import NewsItem

router = APIRouter(tags=["News"])


@router.get("/news", response_model=ApiResponse[list[NewsItem]])
async def get_news(
    feed: Annotated[AbstractNewsFeed, Depends(get_news_feed)],
    keyword: Annotated[str | None, Query(max_length=100)] = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
) -> ApiResponse[list[NewsItem]]:
    """Latest financial news, optionally filtered by ``keyword``.

    Serves whatever the configured feed holds; the default app ships a fixed
    set of demo headlines rather than live feeds.
    """
    limit = limit or settings.app.news_default_limit
    if limit > settings.app.news_max_limit:
        raise ValidationAppError(
            code="limit_too_large",
            message=f"limit must be at most {settings.app.news_max_limit}",
        )

    if keyword:
        items = await feed.search(keyword, limit)
    else:
        items = await feed.latest(limit)
    return ApiResponse[list[NewsItem]](data=items)
