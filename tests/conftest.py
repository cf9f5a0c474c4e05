"""Shared test fixtures."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field, replace

import pytest

from foodwise.adapters.places_client import PlacesClient
from foodwise.config import Settings
from foodwise.containers import AppContainer
from foodwise.domain.catalog import Catalogs
from foodwise.domain.profile import DIET_TYPES, UserProfile
from foodwise.services.cache import InMemoryCache
from foodwise.services.catalog import load_default_catalogs
from foodwise.services.engine import RecommendationEngine
from foodwise.services.locations import LocationService

SF_ORIGIN = (37.7749, -122.4194)

BASE_PROFILE = UserProfile(
    weight=70,
    height=175,
    age=25,
    gender="male",
    diet_type="balanced",
    fitness_goal="weight-loss",
    activity_level="moderate",
    budget="medium",
)


def places_payload() -> dict[str, object]:
    """Nearby Search payload with one usable vegan place and one steakhouse."""
    return {
        "status": "OK",
        "results": [
            {
                "place_id": "place-1",
                "name": "Green Leaf Vegan Kitchen",
                "types": ["vegan_restaurant", "restaurant"],
                "rating": 4.6,
                "price_level": 2,
                "vicinity": "1 Market St",
                "geometry": {"location": {"lat": 37.7749, "lng": -122.4094}},
                "opening_hours": {"open_now": True},
            },
            {
                "place_id": "place-2",
                "name": "Steak Grill House",
                "types": ["restaurant"],
                "rating": 4.1,
                "price_level": 4,
                "vicinity": "2 Mission St",
                "geometry": {"location": {"lat": 37.7849, "lng": -122.4194}},
            },
            {"place_id": "place-3", "name": "Nowhere Diner"},
        ],
    }


@dataclass
class FakePlacesClient(PlacesClient):
    """Fake places client returning a fixed payload."""

    payload: dict[str, object] = field(default_factory=places_payload)
    error: Exception | None = None
    delay_seconds: float = 0.0
    calls: list[tuple[float, float, int, str]] = field(default_factory=list)

    async def nearby_search(
        self, lat: float, lng: float, radius_m: int, keyword: str
    ) -> dict[str, object]:
        self.calls.append((lat, lng, radius_m, keyword))
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def make_profile() -> Callable[..., UserProfile]:
    def _make(**overrides: object) -> UserProfile:
        if "allergies" in overrides:
            overrides["allergies"] = frozenset(overrides["allergies"])
        return replace(BASE_PROFILE, **overrides)

    return _make


@pytest.fixture(scope="session")
def catalogs() -> Catalogs:
    return load_default_catalogs()


@pytest.fixture
def settings() -> Settings:
    return Settings(places_api_key=None, environment="test")


@pytest.fixture
def places_client() -> FakePlacesClient:
    return FakePlacesClient()


@pytest.fixture
def location_service(
    catalogs: Catalogs, places_client: FakePlacesClient
) -> LocationService:
    return LocationService(
        static_locations=catalogs.locations,
        diet_types=DIET_TYPES,
        client=places_client,
        cache=InMemoryCache(),
        timeout_seconds=1.0,
        retry_delay_seconds=0,
    )


@pytest.fixture
def container(
    settings: Settings, catalogs: Catalogs, location_service: LocationService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        engine=RecommendationEngine(catalogs),
        location_service=location_service,
        close_resources=close_resources,
    )
