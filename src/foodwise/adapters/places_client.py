"""Google Places Nearby Search client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from foodwise.errors import PlacesError

DEFAULT_PLACES_BASE_URL = "https://maps.googleapis.com/maps/api/place"
_OK_STATUSES = {"OK", "ZERO_RESULTS"}


class PlacesClient(Protocol):
    """Interface for nearby restaurant searches."""

    async def nearby_search(
        self, lat: float, lng: float, radius_m: int, keyword: str
    ) -> dict[str, object]:
        """Return raw Nearby Search data for restaurants around a point."""


@dataclass
class HttpxPlacesClient(PlacesClient):
    """HTTPX-backed Places client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, api_key: str, base_url: str = DEFAULT_PLACES_BASE_URL
    ) -> "HttpxPlacesClient":
        """Create a Places client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def nearby_search(
        self, lat: float, lng: float, radius_m: int, keyword: str
    ) -> dict[str, object]:
        """Search open restaurants matching ``keyword`` within ``radius_m``."""
        url = f"{self.base_url}/nearbysearch/json"
        response = await self.http_client.get(
            url,
            params={
                "location": f"{lat},{lng}",
                "radius": radius_m,
                "type": "restaurant",
                "keyword": keyword,
                "opennow": "true",
                "key": self.api_key,
            },
            timeout=15,
        )
        response.raise_for_status()
        payload = response.json()
        status = payload.get("status")
        if status not in _OK_STATUSES:
            message = payload.get("error_message") or "no error message"
            raise PlacesError(f"Places API error: {status} ({message})")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
