"""
Health Check API endpoints.
"""

import logging
from datetime import datetime

from fastapi import APIRouter

from src.config import settings
from src.config.constants import ServiceStatus
from src.api.schemas import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the ranking engine and places provider.",
)
async def health_check():
    """
    Health check of the service components.

    Checks:
    - Ranking engine (orchestrator and hybrid ranker available)
    - Places provider (API key configured)
    """
    from src.modules.nearby_ranking import get_orchestrator
    from src.modules.places_provider import get_places_provider, PlacesProviderError

    services = {}

    try:
        orchestrator = get_orchestrator()
        services["ranking_engine"] = orchestrator.ranker is not None
    except Exception as e:
        logger.error(f"Ranking engine health check failed: {e}")
        services["ranking_engine"] = False

    try:
        get_places_provider()
        services["places_provider"] = True
    except PlacesProviderError as e:
        logger.warning(f"Places provider health check failed: {e}")
        services["places_provider"] = False

    if not services["ranking_engine"]:
        overall_status = ServiceStatus.UNHEALTHY
    elif not all(services.values()):
        overall_status = ServiceStatus.DEGRADED
    else:
        overall_status = ServiceStatus.HEALTHY

    return HealthResponse(
        status=overall_status.value,
        timestamp=datetime.utcnow(),
        services=services,
        version=settings.app_version,
    )


@router.get(
    "/live",
    summary="Liveness probe",
    description="Simple liveness check for Kubernetes.",
)
async def liveness():
    """Simple liveness probe - returns 200 if server is running."""
    return {"status": "alive"}


@router.get(
    "/ready",
    summary="Readiness probe",
    description="Readiness check for Kubernetes.",
)
async def readiness():
    """Ready when a places provider can be built from the settings."""
    if not settings.google_maps_api_key:
        return {"status": "not_ready", "reason": "GOOGLE_MAPS_API_KEY is not set"}

    return {"status": "ready"}
