"""Pydantic schemas for advisor answers, quotes and news.

Fields are snake_case in Python and serialized as camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RiskLevel = Literal["low", "medium", "high"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Reference(_CamelModel):
    """Source material an answer was built from."""

    id: str
    source: str
    type: str
    timestamp: datetime
    url: str | None = None
    title: str | None = None
    symbol: str | None = None


class FinancialAnalysis(_CamelModel):
    """Answer to a financial question."""

    answer: str = Field(..., description="Model answer text.")
    confidence: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Confidence score between 0 and 1.",
    )
    sources: list[str] = Field(
        default_factory=list,
        description="Where the answer came from.",
    )
    risk_level: RiskLevel = Field(
        "medium",
        description="Risk level inferred from the answer text.",
    )
    disclaimer: str = Field(..., description="Not-financial-advice disclaimer.")
    references: list[Reference] = Field(default_factory=list)


class MarketData(_CamelModel):
    """Price snapshot for a stock or crypto asset."""

    symbol: str
    price: float
    change: float
    change_percent: float
    timestamp: datetime


class NewsItem(_CamelModel):
    """A single financial news headline."""

    title: str
    description: str = ""
    url: str = ""
    source: str
    published_at: datetime
    sentiment: Literal["positive", "negative", "neutral"] | None = None
