"""Tests for the Places HTTP adapter."""

import asyncio

import httpx
import pytest

from foodwise.adapters.places_client import HttpxPlacesClient
from foodwise.errors import PlacesError


def _client(handler) -> HttpxPlacesClient:
    transport = httpx.MockTransport(handler)
    return HttpxPlacesClient(
        api_key="key",
        base_url="https://places.test/api/place",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_nearby_search_sends_query_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "OK", "results": [{"name": "A"}]})

    payload = asyncio.run(
        _client(handler).nearby_search(37.77, -122.41, 5000, "vegan plant-based")
    )

    assert payload["results"] == [{"name": "A"}]
    request = seen[0]
    assert request.url.path == "/api/place/nearbysearch/json"
    assert request.url.params["location"] == "37.77,-122.41"
    assert request.url.params["radius"] == "5000"
    assert request.url.params["type"] == "restaurant"
    assert request.url.params["keyword"] == "vegan plant-based"
    assert request.url.params["opennow"] == "true"
    assert request.url.params["key"] == "key"


def test_zero_results_is_not_an_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "ZERO_RESULTS", "results": []})

    payload = asyncio.run(_client(handler).nearby_search(0, 0, 100, "healthy"))

    assert payload["results"] == []


def test_error_status_raises_places_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"status": "REQUEST_DENIED", "error_message": "bad key"},
        )

    with pytest.raises(PlacesError, match="REQUEST_DENIED"):
        asyncio.run(_client(handler).nearby_search(0, 0, 100, "healthy"))


def test_http_error_is_raised() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={})

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(_client(handler).nearby_search(0, 0, 100, "healthy"))
