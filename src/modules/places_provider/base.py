"""
Places provider interface.

Any upstream geographic search service can back the nearby search as
long as it answers one question: given an origin and filters, which
places are there, most relevant first.
"""

from typing import List, Protocol, runtime_checkable

from .schemas import NearbySearchParams, PlaceSchema


class PlacesProviderError(Exception):
    """Raised when the upstream places service fails or answers with an error."""


class PlacesProviderConfigError(PlacesProviderError):
    """Raised when no provider can be built from the current settings."""


@runtime_checkable
class PlacesProvider(Protocol):
    """Single-method search capability implemented by every provider."""

    async def search_nearby(self, params: NearbySearchParams) -> List[PlaceSchema]:
        """Return candidate places ordered by the provider's own relevance."""
        ...
