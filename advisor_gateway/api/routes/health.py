from __future__ import annotations

from fastapi import APIRouter

from advisor_gateway.core.config import settings
from advisor_gateway.schemas.envelope import utc_now_iso

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check() -> dict:
    """Health check endpoint.

    Used by load balancers and monitoring systems. Goes through the
    throttle like every other route.
    """

    return {
        "status": "healthy",
        "timestamp": utc_now_iso(),
        "version": settings.app.version,
    }
