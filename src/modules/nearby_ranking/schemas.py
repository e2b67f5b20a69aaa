"""
Schemas for the nearby places ranking engine.

Ranking-pass values are plain NamedTuples (immutable, created and thrown
away per request); request and response bodies are Pydantic models.
"""

from datetime import datetime
from typing import List, NamedTuple, Optional

from pydantic import BaseModel, Field

from .constants import MAX_RANKED_RESULTS, MAX_SEARCH_RADIUS_M


class GeoPoint(NamedTuple):
    """Geographic point in decimal degrees."""
    latitude: float
    longitude: float


class Candidate(NamedTuple):
    """A place returned by the upstream search, before ranking."""
    location: GeoPoint
    relevance_position: int  # zero-based index in the provider's list


class ScoredCandidate(NamedTuple):
    """A candidate with its distance to the origin and its hybrid score."""
    location: GeoPoint
    relevance_position: int
    distance_meters: float
    score: float


class RankingContext(NamedTuple):
    """Parameters shared by every candidate of one ranking pass."""
    total_candidates: int
    search_radius_meters: float


class NearbySearchRequestSchema(BaseModel):
    """Nearby places search request."""
    lat: float = Field(..., ge=-90, le=90, description="Latitude of the search origin")
    lng: float = Field(..., ge=-180, le=180, description="Longitude of the search origin")
    radius: Optional[float] = Field(
        None,
        gt=0,
        le=MAX_SEARCH_RADIUS_M,
        description="Search radius in meters (None = service default)"
    )
    type: Optional[str] = Field(None, description="Place type, e.g. restaurant")
    keyword: Optional[str] = Field(None, max_length=200, description="Free-text keyword")

    model_config = {
        "json_schema_extra": {
            "example": {
                "lat": 40.73,
                "lng": -73.99,
                "radius": 5000,
                "type": "restaurant",
                "keyword": "pizza",
            }
        }
    }


class RankedPlaceSchema(BaseModel):
    """Place ranked with its hybrid score."""
    rank: int = Field(..., ge=1, description="Rank after re-ranking")
    place_id: str = Field(..., description="Provider place identifier")
    name: str = Field(..., description="Place name")
    lat: float
    lng: float
    address: Optional[str] = None
    types: Optional[List[str]] = None
    distance: float = Field(..., ge=0, description="Distance from the origin in meters")
    distance_label: str = Field(..., description="Distance formatted for display")
    relevance_position: int = Field(..., ge=0, description="Index in the provider's results")
    score: float = Field(..., ge=0, le=1, description="Hybrid score (0-1)")


class NearbySearchMetadataSchema(BaseModel):
    """Search metadata."""
    total_candidates: int = Field(..., ge=0, description="Places returned by the provider")
    returned: int = Field(..., ge=0, le=MAX_RANKED_RESULTS, description="Places kept after ranking")
    search_radius_m: float = Field(..., gt=0, description="Radius used for the search and scoring")
    processing_time_ms: float = Field(..., ge=0, description="Total processing time")


class NearbySearchResponseSchema(BaseModel):
    """Nearby places search response."""
    status: str = Field(default="success")
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    places: List[RankedPlaceSchema] = Field(..., description="Places ranked by hybrid score")
    metadata: NearbySearchMetadataSchema
    warnings: Optional[List[str]] = None
