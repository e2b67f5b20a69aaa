"""
Google Places Nearby Search provider.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from src.config import settings
from .base import PlacesProviderError
from .schemas import NearbySearchParams, PlaceSchema

logger = logging.getLogger(__name__)

# Statuses that carry a usable (possibly empty) result list
OK_STATUSES = {"OK", "ZERO_RESULTS"}


class GooglePlacesProvider:
    """
    Searches places around a point with the Google Places Nearby Search API.

    Results are returned in Google's own order; their index in the list is
    the relevance position used later by the hybrid ranker.
    """

    DEFAULT_RADIUS_M = 1500

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the provider.

        Args:
            api_key: Google Maps API key
            base_url: Places API base URL (default from settings)
            timeout_seconds: HTTP timeout (default from settings)
            client: Shared AsyncClient; a short-lived one is opened per
                search when omitted
        """
        if not api_key:
            raise ValueError("Google Maps API key is required")

        self.api_key = api_key
        self.base_url = (base_url or settings.google_places_base_url).rstrip("/")
        self.timeout_seconds = timeout_seconds or settings.places_request_timeout_seconds
        self._client = client

    @property
    def nearby_search_url(self) -> str:
        return f"{self.base_url}/nearbysearch/json"

    def build_query(self, params: NearbySearchParams) -> Dict[str, str]:
        """Build the query string for a nearby search."""
        radius = params.radius if params.radius is not None else self.DEFAULT_RADIUS_M

        query = {
            "location": f"{params.location.lat},{params.location.lng}",
            "radius": f"{radius:g}",
            "key": self.api_key,
        }
        if params.type:
            query["type"] = params.type
        if params.keyword:
            query["keyword"] = params.keyword

        return query

    async def search_nearby(self, params: NearbySearchParams) -> List[PlaceSchema]:
        """
        Run a nearby search.

        Args:
            params: Origin, radius and optional type/keyword filters

        Returns:
            Places in Google's relevance order

        Raises:
            PlacesProviderError: On transport failure, HTTP error status or
                a non-OK API status
        """
        query = self.build_query(params)

        logger.info(
            f"Google nearby search at {query['location']} "
            f"radius={query['radius']}m type={params.type} keyword={params.keyword}"
        )

        try:
            if self._client is not None:
                response = await self._client.get(self.nearby_search_url, params=query)
            else:
                async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                    response = await client.get(self.nearby_search_url, params=query)
        except httpx.HTTPError as e:
            logger.error(f"Google Places request failed: {e}")
            raise PlacesProviderError(f"Failed to search nearby places: {e}") from e

        if response.is_error:
            raise PlacesProviderError(
                f"Google Places API error: {response.reason_phrase or response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise PlacesProviderError(
                "Failed to search nearby places: invalid JSON payload"
            ) from e

        api_status = data.get("status")
        if api_status not in OK_STATUSES:
            logger.warning(
                f"Google Places returned status {api_status}: "
                f"{data.get('error_message', '')}"
            )
            raise PlacesProviderError(f"Google Places API error: {api_status}")

        places = [self._to_place(result) for result in data.get("results") or []]

        logger.info(f"Google nearby search returned {len(places)} places")

        return places

    @staticmethod
    def _to_place(result: Dict[str, Any]) -> PlaceSchema:
        """Map one Google result to the provider-neutral place record."""
        location = result["geometry"]["location"]
        return PlaceSchema(
            place_id=result["place_id"],
            name=result["name"],
            lat=location["lat"],
            lng=location["lng"],
            address=result.get("vicinity"),
            types=result.get("types"),
        )
