"""
Distance utilities for the nearby places ranking engine
"""

import math

from .constants import EARTH_RADIUS_M, METERS_PER_KM
from .schemas import GeoPoint


def haversine_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius: float = EARTH_RADIUS_M
) -> float:
    """
    Calculate the great-circle distance between two points on Earth
    using the Haversine formula.

    Formula:
        d = 2R × arcsin(√(sin²((φ₂-φ₁)/2) + cos(φ₁)cos(φ₂)sin²((λ₂-λ₁)/2)))

    No range check is done on the coordinates; out-of-range values give a
    defined but meaningless result.

    Args:
        lat1: Latitude of point 1 in degrees
        lon1: Longitude of point 1 in degrees
        lat2: Latitude of point 2 in degrees
        lon2: Longitude of point 2 in degrees
        radius: Sphere radius, the result uses the same unit (default: meters)

    Returns:
        Distance in the unit of ``radius``

    Example:
        >>> round(haversine_distance(0.0, 0.0, 0.0, 1.0))
        111195
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )

    return 2 * radius * math.asin(math.sqrt(a))


def distance_meters(point_a: GeoPoint, point_b: GeoPoint) -> float:
    """
    Great-circle distance in meters between two points.

    Symmetric, and exactly 0.0 when both points are the same.
    """
    return haversine_distance(
        point_a.latitude,
        point_a.longitude,
        point_b.latitude,
        point_b.longitude,
    )


def format_distance(meters: float) -> str:
    """
    Format a distance for display.

    Examples:
        >>> format_distance(250)
        '250m'
        >>> format_distance(1500)
        '1.5km'
    """
    if meters < METERS_PER_KM:
        return f"{round(meters)}m"
    return f"{meters / METERS_PER_KM:.1f}km"
