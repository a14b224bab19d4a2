"""
Health check API views - liveness endpoint.
"""

from fastapi import APIRouter

from core.utils.time import iso_utc

from .schemas import HealthCheckResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Liveness check; no downstream calls."""
    return HealthCheckResponse(status="OK", timestamp=iso_utc())
