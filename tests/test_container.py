"""Tests for container wiring."""

import asyncio

from foodwise.adapters.places_client import HttpxPlacesClient
from foodwise.config import Settings
from foodwise.containers import build_container


def test_build_container_without_places_key(settings) -> None:
    container = build_container(settings)

    assert container.location_service.client is None
    assert len(container.engine.catalogs.foods) == 12
    asyncio.run(container.close_resources())


def test_build_container_with_places_key() -> None:
    settings = Settings(places_api_key="places-key", places_timeout_seconds=3)

    container = build_container(settings)

    client = container.location_service.client
    assert isinstance(client, HttpxPlacesClient)
    assert client.api_key == "places-key"
    assert container.location_service.timeout_seconds == 3
    asyncio.run(container.close_resources())


def test_live_locations_enabled_requires_key() -> None:
    assert Settings(places_api_key=None).live_locations_enabled is False
    assert Settings(places_api_key="  ").live_locations_enabled is False
    assert Settings(places_api_key="k").live_locations_enabled is True
