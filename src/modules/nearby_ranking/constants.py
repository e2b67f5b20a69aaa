"""
Constants for the nearby places ranking engine
"""

# Earth mean radius in meters (for Haversine calculations)
EARTH_RADIUS_M = 6_371_000.0

METERS_PER_KM = 1000.0

# Hybrid score weights (must sum to 1)
# Proximity is favoured over the upstream provider's relevance ordering
PROXIMITY_WEIGHT = 0.7
RELEVANCE_WEIGHT = 0.3

# Number of places kept after re-ranking
MAX_RANKED_RESULTS = 10

# Largest radius accepted by the Places Nearby Search API (meters)
MAX_SEARCH_RADIUS_M = 50000.0
