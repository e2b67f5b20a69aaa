"""
Orchestrator - Nearby search coordinator

Runs one nearby search end to end:
1. Fetch raw candidates from the places provider
2. Measure distances and compute hybrid scores
3. Sort, truncate and format the response
"""

import logging
from datetime import datetime
from typing import List, Optional

from src.config import settings
from src.logging_config import get_logger
from src.modules.places_provider import (
    LocationSchema,
    NearbySearchParams,
    PlaceSchema,
    PlacesProvider,
    get_places_provider,
)
from .hybrid_ranker import HybridRanker
from .schemas import (
    Candidate,
    GeoPoint,
    NearbySearchMetadataSchema,
    NearbySearchRequestSchema,
    NearbySearchResponseSchema,
    RankedPlaceSchema,
    RankingContext,
    ScoredCandidate,
)
from .utils import format_distance

logger = logging.getLogger(__name__)
event_logger = get_logger(__name__)


class Orchestrator:
    """
    Orchestrates the nearby places search workflow.

    Workflow:
    1. Build provider parameters from the request
    2. Search the provider (relevance order)
    3. Rank candidates with the hybrid ranker
    4. Format and return response
    """

    def __init__(
        self,
        provider: Optional[PlacesProvider] = None,
        ranker: Optional[HybridRanker] = None
    ):
        """
        Initialize orchestrator.

        Args:
            provider: Places provider (default: built from settings on
                first search)
            ranker: Hybrid ranker (default: keeps the top 10)
        """
        self._provider = provider
        self.ranker = ranker or HybridRanker()

    @property
    def provider(self) -> PlacesProvider:
        """Places provider, built lazily so a missing API key fails per request."""
        if self._provider is None:
            self._provider = get_places_provider()
        return self._provider

    async def search_nearby(
        self,
        request: NearbySearchRequestSchema
    ) -> NearbySearchResponseSchema:
        """
        Complete nearby search workflow.

        Args:
            request: Origin, optional radius and filters

        Returns:
            NearbySearchResponseSchema with at most 10 ranked places

        Raises:
            PlacesProviderError: If the provider cannot be built or fails
        """
        start_time = datetime.now()
        radius_m = request.radius or settings.default_search_radius_m
        origin = GeoPoint(latitude=request.lat, longitude=request.lng)

        logger.info(
            f"Starting nearby search at ({request.lat}, {request.lng}) "
            f"radius={radius_m}m type={request.type} keyword={request.keyword}"
        )

        params = NearbySearchParams(
            location=LocationSchema(lat=request.lat, lng=request.lng),
            radius=radius_m,
            type=request.type,
            keyword=request.keyword,
        )
        places = await self.provider.search_nearby(params)

        if not places:
            logger.warning("No places returned by the provider")
            return self._build_response(
                ranked_places=[],
                total_candidates=0,
                radius_m=radius_m,
                start_time=start_time,
                warnings=["No places found near this location"],
            )

        candidates = [
            Candidate(
                location=GeoPoint(latitude=place.lat, longitude=place.lng),
                relevance_position=position,
            )
            for position, place in enumerate(places)
        ]

        ranked = self.ranker.rank(
            origin=origin,
            candidates=candidates,
            context=RankingContext(
                total_candidates=len(candidates),
                search_radius_meters=radius_m,
            ),
        )

        ranked_places = self._format_ranked_places(places, ranked)

        response = self._build_response(
            ranked_places=ranked_places,
            total_candidates=len(places),
            radius_m=radius_m,
            start_time=start_time,
        )

        event_logger.info(
            "nearby_search_ranked",
            total_candidates=len(places),
            returned=len(ranked_places),
            search_radius_m=radius_m,
            duration_ms=response.metadata.processing_time_ms,
        )

        return response

    def _format_ranked_places(
        self,
        places: List[PlaceSchema],
        ranked: List[ScoredCandidate]
    ) -> List[RankedPlaceSchema]:
        """
        Join ranking results back to the provider's places.

        The relevance position is the place's index in the provider list.
        """
        ranked_places = []

        for rank, scored in enumerate(ranked, start=1):
            place = places[scored.relevance_position]
            ranked_places.append(
                RankedPlaceSchema(
                    rank=rank,
                    place_id=place.place_id,
                    name=place.name,
                    lat=place.lat,
                    lng=place.lng,
                    address=place.address,
                    types=place.types,
                    distance=scored.distance_meters,
                    distance_label=format_distance(scored.distance_meters),
                    relevance_position=scored.relevance_position,
                    score=scored.score,
                )
            )

        return ranked_places

    def _build_response(
        self,
        ranked_places: List[RankedPlaceSchema],
        total_candidates: int,
        radius_m: float,
        start_time: datetime,
        warnings: Optional[List[str]] = None
    ) -> NearbySearchResponseSchema:
        end_time = datetime.now()
        processing_time_ms = (end_time - start_time).total_seconds() * 1000

        return NearbySearchResponseSchema(
            status="success",
            timestamp=end_time,
            places=ranked_places,
            metadata=NearbySearchMetadataSchema(
                total_candidates=total_candidates,
                returned=len(ranked_places),
                search_radius_m=radius_m,
                processing_time_ms=round(processing_time_ms, 2),
            ),
            warnings=warnings,
        )


# ============================================================
# DEPENDENCY INJECTION / FACTORY
# ============================================================

_orchestrator_instance: Optional[Orchestrator] = None


def get_orchestrator() -> Orchestrator:
    """
    Get singleton instance of Orchestrator.

    Used for dependency injection in FastAPI routes.

    Returns:
        Orchestrator instance
    """
    global _orchestrator_instance

    if _orchestrator_instance is None:
        _orchestrator_instance = Orchestrator()
        logger.info("Orchestrator instance created")

    return _orchestrator_instance
