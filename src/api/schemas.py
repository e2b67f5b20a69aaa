"""
API schemas shared by the HTTP layer.
"""

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response for health check."""

    status: str
    timestamp: datetime
    services: Dict[str, bool]
    version: str


class ServiceInfoResponse(BaseModel):
    """Response for the root endpoint."""

    name: str
    version: str
    docs: str
    health: str


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    detail: Optional[str] = None
    status_code: int

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": "Places provider error",
                "detail": "Google Places API error: OVER_QUERY_LIMIT",
                "status_code": 500,
            }
        }
    }
