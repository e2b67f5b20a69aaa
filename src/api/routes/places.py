"""
Nearby places API endpoints.

Searches the configured places provider around a point and re-ranks the
results with the hybrid (proximity + relevance) score.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from src.config import settings
from src.modules.nearby_ranking import (
    NearbySearchRequestSchema,
    NearbySearchResponseSchema,
    Orchestrator,
)
from src.modules.places_provider import PlacesProviderConfigError, PlacesProviderError
from src.api.dependencies import get_orchestrator_dep, limiter
from src.api.schemas import ErrorResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/nearby",
    response_model=NearbySearchResponseSchema,
    responses={
        200: {"description": "Places ranked by hybrid score"},
        422: {"description": "Invalid coordinates or radius"},
        500: {"model": ErrorResponse, "description": "Places provider or internal error"},
        503: {"model": ErrorResponse, "description": "Places provider not configured"},
    },
    summary="Search and rank nearby places",
    description="""
    Searches places around a point and re-ranks them.

    **Process:**
    1. **Search**: query the places provider (Google Places) with the origin,
       radius and optional type/keyword filters
    2. **Distance**: great-circle (Haversine) distance from the origin
    3. **Hybrid score**: 70% proximity (1 at the origin, 0 at or beyond the
       radius) + 30% provider relevance (1 for the first result)
    4. **Ranking**: sort by score, descending, and keep the top 10

    **Body:**
    - `lat` / `lng`: origin in decimal degrees
    - `radius` (optional): search radius in meters, also used to normalize
      distances
    - `type`, `keyword` (optional): provider filters
    """,
)
@limiter.limit(settings.rate_limit)
async def search_nearby(
    request: Request,
    search_request: NearbySearchRequestSchema,
    orchestrator: Orchestrator = Depends(get_orchestrator_dep),
) -> NearbySearchResponseSchema:
    """
    Search and rank places near a location.

    Args:
        request: Incoming HTTP request (used by the rate limiter)
        search_request: Origin, radius and filters
        orchestrator: Nearby search orchestrator

    Returns:
        NearbySearchResponseSchema with at most 10 ranked places
    """
    logger.info(
        f"Nearby search request at ({search_request.lat}, {search_request.lng})"
    )

    try:
        return await orchestrator.search_nearby(search_request)

    except PlacesProviderConfigError as e:
        logger.error(f"Places provider not configured: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )
    except (PlacesProviderError, ValueError) as e:
        logger.error(f"Error searching nearby places: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Nearby search error: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}"
        )
