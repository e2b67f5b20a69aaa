"""Tests for the distance utilities (nearby ranking)."""

import pytest

from src.modules.nearby_ranking.schemas import GeoPoint
from src.modules.nearby_ranking.utils import (
    distance_meters,
    format_distance,
    haversine_distance,
)

ONE_DEGREE_AT_EQUATOR_M = 111_195


class TestDistanceMeters:
    """Test suite for great-circle distance."""

    def setup_method(self):
        """Set up test fixtures."""
        self.new_york = GeoPoint(latitude=40.7128, longitude=-74.006)
        self.times_square = GeoPoint(latitude=40.7614, longitude=-73.9776)

    def test_same_point_is_zero(self):
        """Identical points are exactly 0 m apart."""
        assert distance_meters(self.new_york, self.new_york) == 0

    @pytest.mark.parametrize("point", [
        GeoPoint(0.0, 0.0),
        GeoPoint(90.0, 180.0),
        GeoPoint(-33.8688, 151.2093),
    ])
    def test_same_point_is_zero_anywhere(self, point):
        assert distance_meters(point, point) == 0

    def test_symmetry(self):
        """d(a, b) == d(b, a)."""
        assert distance_meters(self.new_york, self.times_square) == \
            distance_meters(self.times_square, self.new_york)

    def test_one_degree_longitude_at_equator(self):
        distance = distance_meters(GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0))
        assert distance == pytest.approx(ONE_DEGREE_AT_EQUATOR_M, rel=0.01)

    def test_one_degree_latitude_at_equator(self):
        distance = distance_meters(GeoPoint(0.0, 0.0), GeoPoint(1.0, 0.0))
        assert distance == pytest.approx(ONE_DEGREE_AT_EQUATOR_M, rel=0.01)

    def test_city_distance(self):
        """New York to Times Square is roughly 5.9 km."""
        distance = distance_meters(self.new_york, self.times_square)

        assert 0 < distance < 10_000
        assert distance == pytest.approx(5910, abs=100)

    def test_nearby_points_under_one_km(self):
        close = GeoPoint(latitude=40.7138, longitude=-74.005)

        distance = distance_meters(self.new_york, close)

        assert 0 < distance < 1000

    def test_haversine_custom_radius(self):
        """The result is expressed in the unit of the radius."""
        km = haversine_distance(0.0, 0.0, 0.0, 1.0, radius=6371.0)
        assert km == pytest.approx(111.195, rel=0.001)


class TestFormatDistance:
    """Test suite for distance display."""

    def test_meters(self):
        assert format_distance(0) == "0m"
        assert format_distance(250) == "250m"
        assert format_distance(999) == "999m"

    def test_kilometers(self):
        assert format_distance(1000) == "1.0km"
        assert format_distance(1500) == "1.5km"
        assert format_distance(10000) == "10.0km"

    def test_kilometers_rounded_to_one_decimal(self):
        assert format_distance(1234) == "1.2km"
        assert format_distance(1567) == "1.6km"
