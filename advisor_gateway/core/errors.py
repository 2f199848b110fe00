"""Application-level exception types.

Domain errors raised by services, adapters and routes. The global exception
handlers translate them into the failure envelope with a matching status.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NotRequired, TypedDict


class ErrorDetails(TypedDict, total=False):
    """Structured error context for observability.

    ``http_status`` overrides the status derived from the error class.
    """

    reason: str
    hint: str
    http_status: int
    retry_after: float
    symbol: str
    provider: str
    backend: str
    model: str
    context: NotRequired[dict[str, Any]]


@dataclass
class AppError(Exception):
    """Base error for application/domain failures.

    Attributes:
        code: Stable, machine-readable error code.
        message: Human-readable error message (sent to clients).
        details: Optional structured details for logging.
    """

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        # Populate Exception args so str(error) is useful in logs/tracebacks.
        super().__init__(self.message)


class ValidationAppError(AppError):
    """Raised when input/config validation fails."""


class NotFoundAppError(AppError):
    """Raised when a requested resource (e.g. a quote) does not exist."""


class LLMAppError(AppError):
    """Raised when LLM provider/client operations fail."""
