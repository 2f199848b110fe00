"""Global exception handlers producing the failure envelope.

Every error leaves the service as
``{"success": false, "error": <message>, "timestamp": <ISO-8601>}``:
- AppError subclasses -> 400 / 404 / 500 (``details.http_status`` wins)
- HTTPException (429 throttle, 404 routing) -> its own status and headers
- RequestValidationError (bad JSON, bad query) -> 400
- Unexpected Exception -> generic 500 (safety net)
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from advisor_gateway.core.errors import AppError, LLMAppError, NotFoundAppError
from advisor_gateway.core.logging import get_request_id
from advisor_gateway.schemas.envelope import error_body

logger = logging.getLogger(__name__)


def _status_for(exc: AppError) -> int:
    if exc.details and exc.details.get("http_status"):
        return int(exc.details["http_status"])
    if isinstance(exc, NotFoundAppError):
        return 404
    if isinstance(exc, LLMAppError):
        return 500
    return 400


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle domain application errors.

    Args:
        request: FastAPI request object.
        exc: AppError instance (or subclass).

    Returns:
        JSONResponse with the failure envelope.
    """
    status_code = _status_for(exc)

    log = logger.error if status_code >= 500 else logger.warning
    log(
        "app_error_handled",
        extra={
            "error_code": exc.code,
            "error_message": exc.message,
            "status_code": status_code,
            "request_path": request.url.path,
            "request_id": get_request_id(),
        },
    )

    return JSONResponse(status_code=status_code, content=error_body(exc.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework HTTP errors (throttle denials, unknown routes)."""
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = "Endpoint not found"
    else:
        message = str(exc.detail)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON bodies and bad query parameters become a 400."""
    logger.warning(
        "request_validation_failed",
        extra={
            "request_path": request.url.path,
            "error_count": len(exc.errors()),
            "request_id": get_request_id(),
        },
    )
    return JSONResponse(status_code=400, content=error_body("Invalid request"))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unexpected errors (safety net).

    Logs the failure and returns a generic message; nothing about the
    exception reaches the client.
    """
    logger.error(
        "unhandled_exception",
        extra={
            "error_type": type(exc).__name__,
            "error_msg": str(exc),
            "request_path": request.url.path,
            "request_method": request.method,
            "request_id": get_request_id(),
        },
    )

    return JSONResponse(status_code=500, content=error_body("Internal server error"))


def setup_exception_handlers(app) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.exception_handler(AppError)(app_error_handler)
    app.exception_handler(StarletteHTTPException)(http_exception_handler)
    app.exception_handler(RequestValidationError)(request_validation_handler)
    app.exception_handler(Exception)(general_exception_handler)
