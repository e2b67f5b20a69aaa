"""
Pydantic schemas shared by every places provider.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class LocationSchema(BaseModel):
    """Search origin in decimal degrees."""
    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lng: float = Field(..., ge=-180, le=180, description="Longitude")


class PlaceSchema(BaseModel):
    """Provider-neutral place record."""
    place_id: str = Field(..., description="Provider place identifier")
    name: str = Field(..., description="Display name")
    lat: float = Field(..., description="Latitude")
    lng: float = Field(..., description="Longitude")
    address: Optional[str] = Field(None, description="Short address (vicinity)")
    types: Optional[List[str]] = Field(None, description="Provider place types")
    distance: Optional[float] = Field(
        None, ge=0, description="Distance in meters from the search origin"
    )


class NearbySearchParams(BaseModel):
    """Parameters of one nearby search."""
    location: LocationSchema
    radius: Optional[float] = Field(None, gt=0, description="Search radius in meters")
    type: Optional[str] = Field(None, description="Place type filter, e.g. restaurant")
    keyword: Optional[str] = Field(None, description="Free-text keyword")
