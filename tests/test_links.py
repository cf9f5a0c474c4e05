"""Tests for Maps link building."""

import httpx

from foodwise.domain.catalog import Coordinates, Location
from foodwise.services.links import directions_url, maps_url

LOCATION = Location(
    name="Green Garden Cafe",
    type="Vegetarian Restaurant",
    distance_miles=0.3,
    rating=4.5,
    price_range="medium",
    diet_types=frozenset({"vegetarian"}),
    address="123 Health Street, Downtown",
    coordinates=Coordinates(lat=37.7785, lng=-122.4182),
)


def test_maps_url_queries_name_and_address() -> None:
    url = httpx.URL(maps_url(LOCATION))

    assert url.host == "www.google.com"
    assert url.path == "/maps/search/"
    assert url.params["query"] == "Green Garden Cafe, 123 Health Street, Downtown"
    assert url.params["center"] == "37.7785,-122.4182"
    assert "query_place_id" not in url.params


def test_directions_from_user_position() -> None:
    url = httpx.URL(directions_url(LOCATION, Coordinates(lat=37.7749, lng=-122.4194)))

    assert url.path == "/maps/dir/"
    assert url.params["origin"] == "37.7749,-122.4194"
    assert url.params["destination"] == "37.7785,-122.4182"


def test_directions_without_coordinates_use_address() -> None:
    location = Location(
        name="Corner Deli",
        type="Deli",
        distance_miles=0.6,
        rating=4.0,
        price_range="low",
        diet_types=frozenset({"all"}),
        address="1 Corner St",
        place_id="place-9",
    )

    url = httpx.URL(directions_url(location))

    assert "origin" not in url.params
    assert url.params["destination"] == "Corner Deli, 1 Corner St"
    assert httpx.URL(maps_url(location)).params["query_place_id"] == "place-9"
