"""
Nearby Places Ranking

Re-ranks places returned by an upstream geographic search so that places
close to the user come first without ignoring the provider's relevance.

This module provides:
- Great-circle distance using the Haversine formula
- Hybrid scoring (70% proximity, 30% provider relevance)
- Sorting and truncation of the candidate set (top 10)
- The nearby search orchestrator used by the API
"""

from .hybrid_ranker import HybridRanker, hybrid_score, rank_candidates
from .orchestrator import Orchestrator, get_orchestrator
from .schemas import (
    Candidate,
    GeoPoint,
    NearbySearchRequestSchema,
    NearbySearchResponseSchema,
    RankedPlaceSchema,
    RankingContext,
    ScoredCandidate,
)
from .utils import distance_meters, format_distance

__all__ = [
    "HybridRanker",
    "hybrid_score",
    "rank_candidates",
    "Orchestrator",
    "get_orchestrator",
    "Candidate",
    "GeoPoint",
    "NearbySearchRequestSchema",
    "NearbySearchResponseSchema",
    "RankedPlaceSchema",
    "RankingContext",
    "ScoredCandidate",
    "distance_meters",
    "format_distance",
]
