"""Error types raised by the recommendation engine."""


class FoodWiseError(Exception):
    """Base error for the FoodWise package."""


class ValidationError(FoodWiseError):
    """Raised when a user profile field is missing, out of range or unknown."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class CatalogError(FoodWiseError):
    """Raised when a catalog entry is malformed."""


class PlacesError(FoodWiseError):
    """Raised when the places provider returns an error status."""
