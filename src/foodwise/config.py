"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from foodwise.adapters.places_client import DEFAULT_PLACES_BASE_URL

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    places_api_key: str | None = None
    places_base_url: str = DEFAULT_PLACES_BASE_URL
    places_search_radius_m: int = 5000
    places_timeout_seconds: float = 10.0
    places_cache_ttl_seconds: float = 300
    catalog_dir: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def live_locations_enabled(self) -> bool:
        """Return true when a Places API key is configured."""
        return bool(self.places_api_key and self.places_api_key.strip())
