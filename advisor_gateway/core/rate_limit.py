"""Rate limiting middleware for every inbound request.

Wires the request throttle into the HTTP layer:
- The throttle instance is owned by the application (``app.state.throttle``)
  and created by the app factory, never by this module.
- Requests are keyed by the connection's remote address.
- The check runs before routing, so unknown paths and bodies rejected by
  request validation count against the client's window too.
- A denied request is answered with HTTP 429 "Too many requests".

Usage:
    app.middleware("http")(rate_limit_middleware)
"""

from __future__ import annotations

import hashlib
import logging

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from advisor_gateway.adapters.rate_limit.base import AbstractRequestThrottle, ThrottleDecision
from advisor_gateway.core.config import settings
from advisor_gateway.schemas.envelope import error_body

logger = logging.getLogger(__name__)


def get_request_throttle(request: Request) -> AbstractRequestThrottle:
    """Return the throttle attached to the running application."""
    return request.app.state.throttle


def build_client_key(request: Request) -> str:
    """Client key for throttling: the remote host, or "unknown"."""
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def _hash_client_key(key: str) -> str:
    """Hash the client key for logging without exposing addresses."""
    return hashlib.sha256(key.encode()).hexdigest()[:16]


def _limit_headers(decision: ThrottleDecision) -> dict[str, str]:
    if not settings.app.rate_limit_include_headers:
        return {}
    return {
        "Retry-After": str(decision.retry_after_seconds or 0),
        "X-RateLimit-Limit": str(decision.limit),
        "X-RateLimit-Remaining": str(decision.remaining),
        "X-RateLimit-Reset": str(int(decision.reset_at // 1000)),
    }


async def rate_limit_middleware(request: Request, call_next) -> Response:
    """Admit the request or answer it with the 429 failure envelope.

    Middleware sits outside FastAPI's exception handlers, so the denial
    response is built here rather than raised.

    Side Effects:
        - Counts the request against the client's window when admitted
        - Logs ``rate_limit.exceeded`` on denial
    """

    if not settings.app.rate_limit_enabled:
        return await call_next(request)

    key = build_client_key(request)
    decision = get_request_throttle(request).check(key)
    if decision.allowed:
        logger.debug(
            "rate_limit.allowed",
            extra={
                "key_hash": _hash_client_key(key),
                "limit": decision.limit,
                "remaining": decision.remaining,
            },
        )
        return await call_next(request)

    logger.warning(
        "rate_limit.exceeded",
        extra={
            "key_hash": _hash_client_key(key),
            "path": request.url.path,
            "limit": decision.limit,
            "window_ms": settings.app.rate_limit_window_ms,
            "retry_after_s": decision.retry_after_seconds or 0,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=error_body("Too many requests"),
        headers=_limit_headers(decision) or None,
    )
