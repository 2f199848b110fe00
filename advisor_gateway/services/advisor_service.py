"""Financial question answering on top of an LLM client.

The service forwards the question to the model with a fixed advisor system
prompt, then wraps the raw answer into a ``FinancialAnalysis``: a keyword-based
risk level, a fixed confidence score, the source list and the disclaimer.
"""

from __future__ import annotations

import logging

from advisor_gateway.adapters.llm.base import AbstractLLMClient
from advisor_gateway.core.errors import LLMAppError
from advisor_gateway.schemas.financial import FinancialAnalysis, RiskLevel

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a financial advisor AI that provides data-backed investment advice.
Always include:
1. A clear, actionable answer
2. Risk assessment (low/medium/high)
3. Data sources or reasoning
4. Important disclaimers about financial advice

Be objective, mention both risks and opportunities, and always remind users that this is not personalized financial advice."""

DISCLAIMER = (
    "This is not personalized financial advice. Please consult with a qualified "
    "financial advisor before making investment decisions."
)

DEFAULT_CONFIDENCE = 0.8

HIGH_RISK_KEYWORDS = ("volatile", "high risk", "speculative", "risky")
LOW_RISK_KEYWORDS = ("conservative", "stable", "low risk", "safe")


def extract_risk_level(text: str) -> RiskLevel:
    """Classify answer text as low/medium/high risk by keyword.

    High-risk keywords take precedence over low-risk ones; no match is medium.
    """
    lowered = text.lower()
    if any(keyword in lowered for keyword in HIGH_RISK_KEYWORDS):
        return "high"
    if any(keyword in lowered for keyword in LOW_RISK_KEYWORDS):
        return "low"
    return "medium"


class AdvisorService:
    """Answers financial questions with an LLM.

    Attributes:
        llm: LLM client used for completions.
        source_label: Name reported in ``FinancialAnalysis.sources``.
    """

    def __init__(self, llm: AbstractLLMClient, *, source_label: str = "OpenAI GPT-4 Analysis") -> None:
        self.llm = llm
        self.source_label = source_label

    async def analyze(self, question: str, user_id: str | None = None) -> FinancialAnalysis:
        """Answer ``question`` and attach risk level and disclaimer.

        Args:
            question: Already validated question text.
            user_id: Optional caller identifier, only used for logging.

        Returns:
            FinancialAnalysis built from the model answer.

        Raises:
            LLMAppError: If the provider call fails.
        """
        logger.info(
            "advisor.request",
            extra={"question_chars": len(question), "has_user_id": user_id is not None},
        )

        try:
            answer = await self.llm.complete(question, system_prompt=SYSTEM_PROMPT)
        except RuntimeError as exc:
            logger.error("advisor.llm_failed", extra={"error_msg": str(exc)})
            raise LLMAppError(
                code="analysis_failed",
                message="Failed to analyze financial query",
            ) from exc

        risk_level = extract_risk_level(answer)
        logger.info(
            "advisor.completed",
            extra={"answer_chars": len(answer), "risk_level": risk_level},
        )

        return FinancialAnalysis(
            answer=answer,
            confidence=DEFAULT_CONFIDENCE,
            sources=[self.source_label],
            risk_level=risk_level,
            disclaimer=DISCLAIMER,
        )
