"""Factory for the configured request throttle backend."""

from __future__ import annotations

from advisor_gateway.adapters.rate_limit.base import AbstractRequestThrottle
from advisor_gateway.adapters.rate_limit.in_memory import InMemoryRequestThrottle
from advisor_gateway.core.config import AppSettings, settings
from advisor_gateway.core.errors import ValidationAppError


def create_request_throttle(app_settings: AppSettings | None = None) -> AbstractRequestThrottle:
    """Build the throttle selected by ``rate_limit_backend``.

    Args:
        app_settings: Settings to read; defaults to the global app settings.

    Returns:
        AbstractRequestThrottle: A fresh, empty throttle store.

    Raises:
        ValidationAppError: If the backend name is not supported.
    """
    cfg = app_settings or settings.app
    backend = cfg.rate_limit_backend.lower()

    if backend == "memory":
        return InMemoryRequestThrottle(
            max_requests=cfg.rate_limit_max_requests,
            window_ms=cfg.rate_limit_window_ms,
        )

    # A shared-cache backend (e.g. Redis) is needed for a global limit across
    # worker processes; none ships yet.
    raise ValidationAppError(
        code="throttle_unknown_backend",
        message=f"Unknown rate limit backend: '{backend}'. Supported backends: memory",
        details={"backend": backend},
    )
