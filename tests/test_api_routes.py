"""Tests for the HTTP routes and their JSON envelopes.

Collaborators are replaced by fakes through ``create_app`` (see conftest),
so no network calls are made.
"""

from datetime import datetime
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from advisor_gateway.adapters.market_data.demo import DemoMarketDataProvider
from advisor_gateway.adapters.news import DEMO_NEWS_ITEMS
from advisor_gateway.core.app_factory import create_app


def _assert_error_envelope(body: dict, message: str) -> None:
    assert body["success"] is False
    assert body["error"] == message
    datetime.fromisoformat(body["timestamp"])
    assert set(body) == {"success", "error", "timestamp"}


class TestHealth:
    def test_health_reports_status_and_version(self, client: TestClient) -> None:
        resp = client.get("/health")

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["version"] == "1.0.0"
        datetime.fromisoformat(body["timestamp"])

    def test_health_counts_against_the_throttle(self, client: TestClient, throttle) -> None:
        client.get("/health")

        assert throttle.get_entry("testclient").count == 1


class TestAnalyze:
    def test_success_envelope(self, client: TestClient, fake_llm) -> None:
        resp = client.post("/api/analyze", json={"question": "Should I buy gold?"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        datetime.fromisoformat(body["timestamp"])

        data = body["data"]
        assert data["answer"] == "Gold is a stable store of value."
        assert data["riskLevel"] == "low"
        assert data["confidence"] == 0.8
        assert data["sources"] == ["OpenAI GPT-4 Analysis"]
        assert "not personalized financial advice" in data["disclaimer"]
        assert data["references"] == []

        assert fake_llm.calls[0]["prompt"] == "Should I buy gold?"

    def test_user_id_is_accepted(self, client: TestClient) -> None:
        resp = client.post("/api/analyze", json={"question": "Is TSLA risky?", "userId": "u-1"})

        assert resp.status_code == 200

    def test_missing_question(self, client: TestClient, fake_llm) -> None:
        resp = client.post("/api/analyze", json={})

        assert resp.status_code == 400
        _assert_error_envelope(resp.json(), "Question is required")
        assert fake_llm.calls == []

    def test_missing_body(self, client: TestClient) -> None:
        resp = client.post("/api/analyze")

        assert resp.status_code == 400
        _assert_error_envelope(resp.json(), "Question is required")

    def test_wrong_type(self, client: TestClient) -> None:
        resp = client.post("/api/analyze", json={"question": 42})

        assert resp.status_code == 400
        _assert_error_envelope(resp.json(), "Question must be a string")

    def test_blank_question(self, client: TestClient) -> None:
        resp = client.post("/api/analyze", json={"question": "   "})

        assert resp.status_code == 400
        _assert_error_envelope(resp.json(), "Question cannot be empty")

    def test_too_long_question(self, client: TestClient, fake_llm) -> None:
        resp = client.post("/api/analyze", json={"question": "x" * 1001})

        assert resp.status_code == 400
        _assert_error_envelope(resp.json(), "Question is too long (max 1000 characters)")
        assert fake_llm.calls == []

    def test_malformed_json(self, client: TestClient) -> None:
        resp = client.post(
            "/api/analyze",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        _assert_error_envelope(resp.json(), "Invalid request")

    def test_llm_failure_returns_500(self, client: TestClient, fake_llm) -> None:
        fake_llm.error = RuntimeError("OpenAI API error: boom")

        resp = client.post("/api/analyze", json={"question": "Should I buy gold?"})

        assert resp.status_code == 500
        _assert_error_envelope(resp.json(), "Failed to analyze financial query")
        assert "boom" not in resp.text


class TestMarket:
    def test_stock_quote(self, client: TestClient) -> None:
        resp = client.get("/api/market/stock/aapl")

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["symbol"] == "AAPL"
        assert data["price"] == 192.53
        assert data["change"] == 2.41
        assert data["changePercent"] == 1.27

    def test_crypto_quote(self, client: TestClient) -> None:
        resp = client.get("/api/market/crypto/bitcoin")

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["symbol"] == "BITCOIN"
        assert data["price"] == 67245.32

    def test_unknown_symbol_returns_404(self, client: TestClient) -> None:
        resp = client.get("/api/market/stock/ZZZZ")

        assert resp.status_code == 404
        _assert_error_envelope(resp.json(), "No data found for symbol: ZZZZ")

    def test_invalid_symbol_format(self, client: TestClient) -> None:
        resp = client.get("/api/market/stock/BRK.B")

        assert resp.status_code == 400
        _assert_error_envelope(resp.json(), "Invalid symbol format")

    def test_provider_crash_returns_generic_500(self, fake_llm) -> None:
        provider = DemoMarketDataProvider()
        provider.get_stock_quote = AsyncMock(side_effect=ConnectionError("upstream down"))
        app = create_app(llm_client=fake_llm, market_data=provider, configure_logs=False)
        client = TestClient(app, raise_server_exceptions=False)

        resp = client.get("/api/market/stock/AAPL")

        assert resp.status_code == 500
        _assert_error_envelope(resp.json(), "Internal server error")
        assert "upstream" not in resp.text


class TestNews:
    def test_latest_news_sorted_newest_first(self, client: TestClient) -> None:
        resp = client.get("/api/news")

        assert resp.status_code == 200
        titles = [item["title"] for item in resp.json()["data"]]
        assert titles == [
            "Bitcoin rallies past resistance",
            "Fed holds rates steady",
            "Oil slips on demand worries",
        ]
        assert "publishedAt" in resp.json()["data"][0]

    def test_limit(self, client: TestClient) -> None:
        resp = client.get("/api/news", params={"limit": 1})

        assert [item["source"] for item in resp.json()["data"]] == ["CNBC"]

    def test_keyword_search_matches_title_or_description(self, client: TestClient) -> None:
        resp = client.get("/api/news", params={"keyword": "BITCOIN"})

        titles = [item["title"] for item in resp.json()["data"]]
        assert titles == ["Bitcoin rallies past resistance", "Oil slips on demand worries"]

    def test_invalid_limit(self, client: TestClient) -> None:
        resp = client.get("/api/news", params={"limit": "ten"})

        assert resp.status_code == 400
        _assert_error_envelope(resp.json(), "Invalid request")

    def test_limit_above_maximum(self, client: TestClient) -> None:
        resp = client.get("/api/news", params={"limit": 51})

        assert resp.status_code == 400
        _assert_error_envelope(resp.json(), "limit must be at most 50")


def test_unknown_route_returns_envelope(client: TestClient) -> None:
    resp = client.get("/api/does-not-exist")

    assert resp.status_code == 404
    _assert_error_envelope(resp.json(), "Endpoint not found")


def test_default_app_serves_demo_headlines(fake_llm) -> None:
    app = create_app(llm_client=fake_llm, configure_logs=False)
    client = TestClient(app)

    resp = client.get("/api/news")

    assert resp.status_code == 200
    titles = [item["title"] for item in resp.json()["data"]]
    assert titles[0] == "Tech shares lead broad market rally"
    assert len(titles) == len(DEMO_NEWS_ITEMS)
