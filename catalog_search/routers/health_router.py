"""
Health check and monitoring router.

Provides endpoints for health checks, readiness checks and service stats.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import dependencies
from ..config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    service: str = settings.SERVICE_NAME
    version: str = settings.VERSION


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    ready: bool
    checks: dict
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Basic health check endpoint - returns 200 if service is running",
)
async def health_check():
    """
    Basic health check.

    Always returns 200 OK if the service is running.
    """
    return HealthResponse(status="healthy", timestamp=_now())


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Check if the catalog is loaded and the service can answer searches",
)
async def readiness_check():
    """
    Readiness check.

    Returns 200 if the catalog service is initialized, 503 otherwise.
    """
    try:
        service = dependencies.get_catalog_service()
    except RuntimeError:
        checks = {"catalog": "not_loaded"}
    else:
        checks = {"catalog": "healthy", "items": len(service.repository.list_items())}

    ready = checks["catalog"] == "healthy"
    response = ReadinessResponse(ready=ready, checks=checks, timestamp=_now())

    if not ready:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=response.model_dump()
        )
    return response


@router.get(
    "/stats", summary="Service statistics", description="Catalog, cache and scorer statistics"
)
async def service_stats():
    """Get catalog, result cache and scorer statistics."""
    service = dependencies.get_catalog_service()
    return {"timestamp": _now(), **service.get_statistics()}
