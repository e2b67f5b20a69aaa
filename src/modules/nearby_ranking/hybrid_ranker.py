"""
Hybrid Ranker

Re-ranks the places returned by an upstream search by blending geographic
proximity with the provider's own relevance ordering.
"""

import logging
from typing import List, Sequence

import numpy as np

from .constants import MAX_RANKED_RESULTS, PROXIMITY_WEIGHT, RELEVANCE_WEIGHT
from .schemas import Candidate, GeoPoint, RankingContext, ScoredCandidate
from .utils import distance_meters

logger = logging.getLogger(__name__)


def hybrid_score(
    distance_meters: float,
    relevance_position: int,
    total_candidates: int,
    search_radius_meters: float
) -> float:
    """
    Calculate the hybrid ranking score of one candidate.

    Formula:
        relevance = 1 - position / total
        proximity = 1 - min(distance / radius, 1)
        score     = 0.3 × relevance + 0.7 × proximity

    Distances at or beyond the radius all count as maximally far.
    Callers guarantee ``total_candidates >= 1`` and
    ``search_radius_meters > 0``.

    Args:
        distance_meters: Distance from the search origin in meters
        relevance_position: Zero-based index in the provider's results
        total_candidates: Number of results returned by the provider
        search_radius_meters: Search radius in meters

    Returns:
        Score between 0 and 1 (higher is better); exactly 1.0 for the
        first result sitting on the origin
    """
    relevance_score = 1 - relevance_position / total_candidates
    proximity_score = 1 - min(distance_meters / search_radius_meters, 1)

    return RELEVANCE_WEIGHT * relevance_score + PROXIMITY_WEIGHT * proximity_score


class HybridRanker:
    """
    Scores, sorts and truncates a candidate set.

    Steps:
    1. Measure each candidate's distance to the search origin
    2. Score all candidates (vectorized form of ``hybrid_score``)
    3. Sort by score, descending; ties keep the provider's order
    4. Keep the first ``limit`` candidates
    """

    def __init__(self, limit: int = MAX_RANKED_RESULTS):
        """
        Initialize hybrid ranker.

        Args:
            limit: Maximum number of candidates kept (default: 10)
        """
        self.limit = limit

    def calculate_distances(
        self,
        origin: GeoPoint,
        candidates: Sequence[Candidate]
    ) -> np.ndarray:
        """Distances in meters from the origin, in candidate order."""
        return np.array(
            [distance_meters(origin, candidate.location) for candidate in candidates],
            dtype=float,
        )

    def calculate_scores(
        self,
        distances: np.ndarray,
        positions: np.ndarray,
        context: RankingContext
    ) -> np.ndarray:
        """
        Score every candidate of a ranking pass at once.

        Same arithmetic as ``hybrid_score``, so each value is identical to
        the scalar result for that candidate.

        Args:
            distances: Distances in meters (length m)
            positions: Relevance positions (length m)
            context: Total candidate count and search radius

        Returns:
            Hybrid scores (length m)
        """
        relevance_scores = 1 - positions / context.total_candidates
        proximity_scores = 1 - np.minimum(distances / context.search_radius_meters, 1)

        scores = RELEVANCE_WEIGHT * relevance_scores + PROXIMITY_WEIGHT * proximity_scores

        logger.debug(f"Hybrid scores: {scores}")

        return scores

    def rank(
        self,
        origin: GeoPoint,
        candidates: Sequence[Candidate],
        context: RankingContext
    ) -> List[ScoredCandidate]:
        """
        Complete ranking pass.

        Args:
            origin: Search origin
            candidates: Candidates in provider order
            context: Total candidate count and search radius

        Returns:
            At most ``limit`` scored candidates, best first
        """
        if not candidates:
            return []

        distances = self.calculate_distances(origin, candidates)
        positions = np.array(
            [candidate.relevance_position for candidate in candidates],
            dtype=float,
        )

        scores = self.calculate_scores(distances, positions, context)

        # Stable sort on the negated scores keeps ties in provider order
        order = np.argsort(-scores, kind="stable")[:self.limit]

        ranked = [
            ScoredCandidate(
                location=candidates[i].location,
                relevance_position=candidates[i].relevance_position,
                distance_meters=float(distances[i]),
                score=float(scores[i]),
            )
            for i in order
        ]

        logger.info(
            f"Hybrid ranking complete: {len(candidates)} candidates, "
            f"{len(ranked)} kept, top score {ranked[0].score:.4f}"
        )

        return ranked


def rank_candidates(
    origin: GeoPoint,
    candidates: Sequence[Candidate],
    search_radius_meters: float,
    limit: int = MAX_RANKED_RESULTS
) -> List[ScoredCandidate]:
    """Rank candidates with a context built from the candidate count."""
    context = RankingContext(
        total_candidates=len(candidates),
        search_radius_meters=search_radius_meters,
    )
    return HybridRanker(limit=limit).rank(origin, candidates, context)
