"""
Application constants and enumerations.
"""

from enum import Enum


class ServiceStatus(str, Enum):
    """Health status values."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
