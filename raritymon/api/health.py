"""
Health check endpoints.

Provides liveness and readiness probes with cache database checks.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from raritymon.api.dependencies import get_cache
from raritymon.db.cache import RarityCache
from raritymon.models.errors import StoreError

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    cache: Annotated[RarityCache, Depends(get_cache)],
) -> HealthResponse:
    """
    Readiness probe.

    Returns ready if the cache database is reachable, 503 otherwise.
    """
    try:
        await cache.ping()
        return HealthResponse(status="ready", database="connected")
    except StoreError:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", database="disconnected")
