from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from advisor_gateway.api.deps import get_advisor_service
from advisor_gateway.schemas.envelope import ApiResponse
from advisor_gateway.schemas.financial import FinancialAnalysis
from advisor_gateway.services.advisor_service import AdvisorService
from advisor_gateway.utils.request_validators import ensure_valid, validate_question

router = APIRouter(tags=["Advisor"])


@router.post("/analyze", response_model=ApiResponse[FinancialAnalysis])
async def analyze_query(
    advisor: Annotated[AdvisorService, Depends(get_advisor_service)],
    payload: Annotated[Any, Body()] = None,
) -> ApiResponse[FinancialAnalysis]:
    """Answer a financial question.

    The body is taken raw so that the question validator, not the schema
    layer, decides which single error is reported.

    Raises:
        ValidationAppError: 400 when the question is missing, not a string,
            blank or longer than 1000 characters.
        LLMAppError: 500 when the model call fails.
    """
    ensure_valid(validate_question(payload))

    user_id = payload.get("userId")
    analysis = await advisor.analyze(
        payload["question"],
        user_id=str(user_id) if user_id is not None else None,
    )
    return ApiResponse[FinancialAnalysis](data=analysis)
