"""
Places provider abstraction.

The nearby search only depends on the ``PlacesProvider`` protocol; the
concrete provider is picked here from the settings so it can be swapped
(Mapbox, HERE, ...) without touching the ranking code.
"""

from src.config import settings
from .base import PlacesProvider, PlacesProviderError, PlacesProviderConfigError
from .google_provider import GooglePlacesProvider
from .schemas import LocationSchema, NearbySearchParams, PlaceSchema


def get_places_provider() -> PlacesProvider:
    """
    Build the configured places provider.

    Raises:
        PlacesProviderConfigError: If GOOGLE_MAPS_API_KEY is not set
    """
    if not settings.google_maps_api_key:
        raise PlacesProviderConfigError(
            "GOOGLE_MAPS_API_KEY environment variable is not set"
        )

    return GooglePlacesProvider(api_key=settings.google_maps_api_key)


__all__ = [
    "PlacesProvider",
    "PlacesProviderError",
    "PlacesProviderConfigError",
    "GooglePlacesProvider",
    "LocationSchema",
    "NearbySearchParams",
    "PlaceSchema",
    "get_places_provider",
]
