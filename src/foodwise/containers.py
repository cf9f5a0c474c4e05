"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from foodwise.adapters.places_client import HttpxPlacesClient
from foodwise.config import Settings
from foodwise.domain.profile import DIET_TYPES
from foodwise.services.cache import InMemoryCache
from foodwise.services.catalog import load_default_catalogs
from foodwise.services.engine import RecommendationEngine
from foodwise.services.locations import LocationService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    engine: RecommendationEngine
    location_service: LocationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalogs = load_default_catalogs(resolved_settings.catalog_dir)
    engine = RecommendationEngine(catalogs)

    places_client = None
    if resolved_settings.live_locations_enabled:
        places_client = HttpxPlacesClient.create(
            api_key=resolved_settings.places_api_key,
            base_url=resolved_settings.places_base_url,
        )
    location_service = LocationService(
        static_locations=catalogs.locations,
        diet_types=DIET_TYPES,
        client=places_client,
        cache=InMemoryCache(),
        radius_m=resolved_settings.places_search_radius_m,
        timeout_seconds=resolved_settings.places_timeout_seconds,
        cache_ttl_seconds=resolved_settings.places_cache_ttl_seconds,
    )

    async def close_resources() -> None:
        if places_client is not None:
            await places_client.close()

    return AppContainer(
        settings=resolved_settings,
        engine=engine,
        location_service=location_service,
        close_resources=close_resources,
    )
