"""Guard functions for inbound request data.

Each validator is pure: it inspects the raw payload and returns a
``ValidationResult`` instead of raising. The routing layer turns a rejection
into an HTTP error with :func:`ensure_valid`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from advisor_gateway.core.errors import ValidationAppError

MAX_QUESTION_CHARS = 1000

_SYMBOL_RE = re.compile(r"[A-Za-z0-9-]+")


@dataclass(frozen=True)
class ValidationResult:
    """Pass, or a rejection carrying a reason code and HTTP status.

    Attributes:
        passed: True when the request may proceed.
        reason: Machine-readable reason (e.g. "missing", "too-long").
        status_code: HTTP status to answer with on rejection.
        message: Human-readable text for the error envelope.
    """

    passed: bool
    reason: str | None = None
    status_code: int | None = None
    message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(passed=True)

    @classmethod
    def reject(cls, reason: str, message: str, status_code: int = 400) -> "ValidationResult":
        return cls(passed=False, reason=reason, status_code=status_code, message=message)


def validate_question(payload: Any) -> ValidationResult:
    """Validate the body of an analyze request.

    Checks run in order and the first failure wins:
    missing -> wrong-type -> empty -> too-long.

    Args:
        payload: Decoded JSON body (anything; non-mappings count as missing).

    Returns:
        ValidationResult for the ``question`` field.
    """
    question = payload.get("question") if isinstance(payload, Mapping) else None

    # Only an absent or null question is "missing"; "" and other falsy values
    # fall through to the type and blank checks.
    if question is None:
        return ValidationResult.reject("missing", "Question is required")

    if not isinstance(question, str):
        return ValidationResult.reject("wrong-type", "Question must be a string")

    if not question.strip():
        return ValidationResult.reject("empty", "Question cannot be empty")

    # Length is measured on the raw text, before trimming.
    if len(question) > MAX_QUESTION_CHARS:
        return ValidationResult.reject(
            "too-long",
            f"Question is too long (max {MAX_QUESTION_CHARS} characters)",
        )

    return ValidationResult.ok()


def validate_symbol(params: Mapping[str, Any]) -> ValidationResult:
    """Validate the ``symbol`` path parameter.

    Only ASCII letters, digits and "-" are accepted. Case is preserved.

    Args:
        params: Path parameters of the request.

    Returns:
        ValidationResult for the ``symbol`` parameter.
    """
    symbol = params.get("symbol")

    if symbol is None or symbol == "":
        return ValidationResult.reject("missing", "Symbol is required")

    if not isinstance(symbol, str) or _SYMBOL_RE.fullmatch(symbol) is None:
        return ValidationResult.reject("invalid-format", "Invalid symbol format")

    return ValidationResult.ok()


def ensure_valid(result: ValidationResult) -> None:
    """Raise ValidationAppError when ``result`` is a rejection.

    Raises:
        ValidationAppError: Carrying the reason as code and the status code
            in ``details.http_status``.
    """
    if result.passed:
        return

    raise ValidationAppError(
        code=result.reason or "invalid_request",
        message=result.message or "Invalid request",
        details={
            "reason": result.reason or "invalid_request",
            "http_status": result.status_code or 400,
        },
    )
