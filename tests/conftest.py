"""Pytest configuration and fixtures shared across all test modules.

Environment variables are seeded before anything imports the settings
module, so no .env file or real API key is needed.
"""

import os

# Must run before any import of advisor_gateway.core.config
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("LLM_PROVIDER", "openai")
os.environ.setdefault("LLM_MODEL", "gpt-4")
os.environ.setdefault("LLM_API_KEY", "test-key-123")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timezone  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from advisor_gateway.adapters.llm.base import AbstractLLMClient  # noqa: E402
from advisor_gateway.adapters.news.in_memory import InMemoryNewsFeed  # noqa: E402
from advisor_gateway.adapters.rate_limit.in_memory import InMemoryRequestThrottle  # noqa: E402
from advisor_gateway.core.app_factory import create_app  # noqa: E402
from advisor_gateway.schemas.financial import NewsItem  # noqa: E402


class FakeClock:
    """Deterministic millisecond clock for throttle tests."""

    def __init__(self, start_ms: float = 1_000_000.0) -> None:
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


class FakeLLMClient(AbstractLLMClient):
    """Returns a canned answer and records prompts."""

    def __init__(self, answer: str = "Gold is a stable store of value.", error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def complete(self, prompt: str, *, system_prompt: str | None = None, **kwargs: Any) -> str:
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt, **kwargs})
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def news_items() -> list[NewsItem]:
    return [
        NewsItem(
            title="Fed holds rates steady",
            description="Central bank keeps policy unchanged.",
            url="https://example.com/fed",
            source="Reuters",
            published_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        ),
        NewsItem(
            title="Bitcoin rallies past resistance",
            description="Crypto markets extend gains.",
            url="https://example.com/btc",
            source="CNBC",
            published_at=datetime(2024, 5, 2, 9, 30, tzinfo=timezone.utc),
        ),
        NewsItem(
            title="Oil slips on demand worries",
            description="Energy stocks lag as bitcoin miners gain.",
            url="https://example.com/oil",
            source="BBC",
            published_at=datetime(2024, 4, 30, 8, 0, tzinfo=timezone.utc),
        ),
    ]


@pytest.fixture
def throttle(fake_clock: FakeClock) -> InMemoryRequestThrottle:
    return InMemoryRequestThrottle(max_requests=100, window_ms=60_000, clock=fake_clock)


@pytest.fixture
def app(
    throttle: InMemoryRequestThrottle,
    fake_llm: FakeLLMClient,
    news_items: list[NewsItem],
) -> FastAPI:
    return create_app(
        throttle=throttle,
        llm_client=fake_llm,
        news_feed=InMemoryNewsFeed(news_items),
        configure_logs=False,
    )


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
