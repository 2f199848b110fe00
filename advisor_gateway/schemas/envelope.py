"""JSON response envelopes shared by every endpoint."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp used in envelopes."""
    return datetime.now(timezone.utc).isoformat()


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: ``{"success": true, "data": ..., "timestamp": ...}``."""

    success: bool = True
    data: T
    timestamp: str = Field(default_factory=utc_now_iso)


def error_body(message: str) -> dict[str, Any]:
    """Failure envelope: ``{"success": false, "error": ..., "timestamp": ...}``."""
    return {
        "success": False,
        "error": message,
        "timestamp": utc_now_iso(),
    }
