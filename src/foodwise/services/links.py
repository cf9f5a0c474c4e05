"""Google Maps links for recommended locations."""

import httpx

from foodwise.domain.catalog import Coordinates, Location

_SEARCH_URL = "https://www.google.com/maps/search/"
_DIRECTIONS_URL = "https://www.google.com/maps/dir/"


def maps_url(location: Location) -> str:
    """Return a Maps search link for a location."""
    params: dict[str, str] = {
        "api": "1",
        "query": f"{location.name}, {location.address}",
    }
    if location.place_id:
        params["query_place_id"] = location.place_id
    if location.coordinates is not None:
        params["center"] = _format_point(location.coordinates)
    return str(httpx.URL(_SEARCH_URL, params=params))


def directions_url(location: Location, origin: Coordinates | None = None) -> str:
    """Return a Maps directions link, starting at ``origin`` when known."""
    params: dict[str, str] = {"api": "1"}
    if origin is not None:
        params["origin"] = _format_point(origin)
    if location.coordinates is not None:
        params["destination"] = _format_point(location.coordinates)
    else:
        params["destination"] = f"{location.name}, {location.address}"
    return str(httpx.URL(_DIRECTIONS_URL, params=params))


def _format_point(point: Coordinates) -> str:
    return f"{point.lat},{point.lng}"
