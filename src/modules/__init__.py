# Modules package
from .nearby_ranking import HybridRanker, Orchestrator
from .places_provider import PlacesProvider, GooglePlacesProvider

__all__ = [
    "HybridRanker",
    "Orchestrator",
    "PlacesProvider",
    "GooglePlacesProvider",
]
