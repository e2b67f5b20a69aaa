"""Tests for the nearby places API endpoints."""

from typing import List

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.api.dependencies import get_orchestrator_dep
from src.config import settings
from src.modules.nearby_ranking import Orchestrator
from src.modules.places_provider import (
    NearbySearchParams,
    PlaceSchema,
    PlacesProviderError,
)

NEARBY_URL = f"{settings.api_prefix}/places/nearby"


class StubPlacesProvider:
    """Provider returning canned places or raising a canned error."""

    def __init__(self, places: List[PlaceSchema] = None, error: Exception = None):
        self.places = places or []
        self.error = error
        self.calls: List[NearbySearchParams] = []

    async def search_nearby(self, params: NearbySearchParams) -> List[PlaceSchema]:
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return self.places


MOCK_PLACES = [
    PlaceSchema(
        place_id="ChIJN1t_tDeuEmsRUsoyG83frY4",
        name="Prince St Pizza",
        lat=40.7229,
        lng=-73.9949,
        address="27 Prince St, New York",
    ),
    PlaceSchema(
        place_id="ChIJrTLr-GyuEmsRBfy61i59si0",
        name="Joe's Pizza",
        lat=40.7308,
        lng=-74.0022,
        address="7 Carmine St, New York",
    ),
]


class TestNearbyPlacesRoute:
    """Test suite for POST /places/nearby."""

    def setup_method(self):
        """Set up test fixtures."""
        self.app = create_app()
        self.client = TestClient(self.app)

    def use_provider(self, provider):
        orchestrator = Orchestrator(provider=provider)
        self.app.dependency_overrides[get_orchestrator_dep] = lambda: orchestrator
        return provider

    def test_missing_coordinates(self):
        self.use_provider(StubPlacesProvider())

        response = self.client.post(NEARBY_URL, json={"lat": 40.73})

        assert response.status_code == 422

    def test_coordinates_not_numbers(self):
        self.use_provider(StubPlacesProvider())

        response = self.client.post(NEARBY_URL, json={"lat": "invalid", "lng": -73.99})

        assert response.status_code == 422

    @pytest.mark.parametrize("body", [
        {"lat": 100, "lng": -73.99},
        {"lat": 40.73, "lng": -181},
        {"lat": 40.73, "lng": -73.99, "radius": 0},
        {"lat": 40.73, "lng": -73.99, "radius": 60000},
    ])
    def test_out_of_range(self, body):
        provider = self.use_provider(StubPlacesProvider())

        response = self.client.post(NEARBY_URL, json=body)

        assert response.status_code == 422
        assert provider.calls == []

    def test_returns_ranked_places(self):
        self.use_provider(StubPlacesProvider(MOCK_PLACES))

        response = self.client.post(
            NEARBY_URL, json={"lat": 40.73, "lng": -73.99, "radius": 2000}
        )
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "success"
        assert len(data["places"]) == 2
        for place in data["places"]:
            for field in ("place_id", "name", "lat", "lng", "distance", "score", "rank"):
                assert field in place

        scores = [p["score"] for p in data["places"]]
        assert scores == sorted(scores, reverse=True)
        assert data["metadata"]["total_candidates"] == 2
        assert data["metadata"]["search_radius_m"] == 2000

    def test_passes_optional_parameters(self):
        provider = self.use_provider(StubPlacesProvider())

        self.client.post(
            NEARBY_URL,
            json={
                "lat": 40.73,
                "lng": -73.99,
                "radius": 2000,
                "type": "restaurant",
                "keyword": "pizza",
            },
        )

        params = provider.calls[0]
        assert (params.location.lat, params.location.lng) == (40.73, -73.99)
        assert params.radius == 2000
        assert params.type == "restaurant"
        assert params.keyword == "pizza"

    def test_returns_at_most_ten(self):
        places = [
            PlaceSchema(place_id=f"P{i}", name=f"Place {i}", lat=40.73 + i * 0.001, lng=-73.99)
            for i in range(15)
        ]
        self.use_provider(StubPlacesProvider(places))

        response = self.client.post(NEARBY_URL, json={"lat": 40.73, "lng": -73.99})
        data = response.json()

        assert response.status_code == 200
        assert len(data["places"]) == 10
        assert [p["rank"] for p in data["places"]] == list(range(1, 11))

    def test_provider_error(self):
        self.use_provider(StubPlacesProvider(error=PlacesProviderError("Provider error")))

        response = self.client.post(NEARBY_URL, json={"lat": 40.73, "lng": -73.99})

        assert response.status_code == 500
        assert response.json()["detail"] == "Provider error"

    def test_provider_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "google_maps_api_key", None)
        self.use_provider(None)

        response = self.client.post(NEARBY_URL, json={"lat": 40.73, "lng": -73.99})

        assert response.status_code == 503
        assert "GOOGLE_MAPS_API_KEY" in response.json()["detail"]

    def test_correlation_id_echoed(self):
        self.use_provider(StubPlacesProvider())

        response = self.client.post(
            NEARBY_URL,
            json={"lat": 40.73, "lng": -73.99},
            headers={"X-Correlation-ID": "corr-123"},
        )

        assert response.headers["X-Correlation-ID"] == "corr-123"


class TestHealthRoutes:
    """Test suite for health and root endpoints."""

    def setup_method(self):
        """Set up test fixtures."""
        self.client = TestClient(create_app())

    def test_root(self):
        data = self.client.get("/").json()

        assert data["name"] == settings.app_name
        assert data["health"] == f"{settings.api_prefix}/health"

    def test_liveness(self):
        response = self.client.get(f"{settings.api_prefix}/health/live")

        assert response.status_code == 200
        assert response.json() == {"status": "alive"}

    def test_health_degraded_without_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "google_maps_api_key", None)

        data = self.client.get(f"{settings.api_prefix}/health/").json()

        assert data["status"] == "degraded"
        assert data["services"]["places_provider"] is False
        assert data["services"]["ranking_engine"] is True

    def test_health_with_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "google_maps_api_key", "test-key")

        data = self.client.get(f"{settings.api_prefix}/health/").json()

        assert data["status"] == "healthy"

    def test_readiness(self, monkeypatch):
        monkeypatch.setattr(settings, "google_maps_api_key", None)
        assert self.client.get(f"{settings.api_prefix}/health/ready").json()["status"] == "not_ready"

        monkeypatch.setattr(settings, "google_maps_api_key", "test-key")
        assert self.client.get(f"{settings.api_prefix}/health/ready").json()["status"] == "ready"
