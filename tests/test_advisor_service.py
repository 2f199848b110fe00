"""Tests for the advisor service and its risk classifier."""

import pytest

from advisor_gateway.core.errors import LLMAppError
from advisor_gateway.services.advisor_service import (
    DEFAULT_CONFIDENCE,
    DISCLAIMER,
    SYSTEM_PROMPT,
    AdvisorService,
    extract_risk_level,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Crypto is highly VOLATILE right now.", "high"),
        ("This is a speculative play.", "high"),
        ("Treasuries are a safe, stable choice.", "low"),
        ("A conservative allocation fits.", "low"),
        ("Balanced funds are a reasonable option.", "medium"),
        ("", "medium"),
        ("Stable dividends, but the sector is risky.", "high"),
    ],
)
def test_extract_risk_level(text: str, expected: str) -> None:
    assert extract_risk_level(text) == expected


class TestAdvisorService:
    @pytest.mark.asyncio
    async def test_analyze_builds_analysis(self, fake_llm) -> None:
        llm = fake_llm
        llm.answer = "Bitcoin is volatile; size positions carefully."
        service = AdvisorService(llm)

        analysis = await service.analyze("Should I buy bitcoin?", user_id="u-7")

        assert analysis.answer == "Bitcoin is volatile; size positions carefully."
        assert analysis.risk_level == "high"
        assert analysis.confidence == DEFAULT_CONFIDENCE
        assert analysis.sources == ["OpenAI GPT-4 Analysis"]
        assert analysis.disclaimer == DISCLAIMER
        assert llm.calls == [{"prompt": "Should I buy bitcoin?", "system_prompt": SYSTEM_PROMPT}]

    @pytest.mark.asyncio
    async def test_custom_source_label(self, fake_llm) -> None:
        service = AdvisorService(fake_llm, source_label="Local model")

        analysis = await service.analyze("q")

        assert analysis.sources == ["Local model"]

    @pytest.mark.asyncio
    async def test_llm_failure_raises_llm_app_error(self, fake_llm) -> None:
        fake_llm.error = RuntimeError("OpenAI API error: timeout")
        service = AdvisorService(fake_llm)

        with pytest.raises(LLMAppError) as exc_info:
            await service.analyze("q")

        assert exc_info.value.code == "analysis_failed"
        assert exc_info.value.message == "Failed to analyze financial query"
