"""Catalog reference data and ranked results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float


@dataclass(frozen=True)
class FoodItem:
    """Generic food suggestion."""

    name: str
    description: str
    diet_types: frozenset[str]
    benefits: tuple[str, ...]
    allergens: frozenset[str]


@dataclass(frozen=True)
class MenuDish:
    """Dish served at a specific location."""

    name: str
    description: str
    price: str
    calories: float
    protein: float
    diet_types: frozenset[str]
    benefits: tuple[str, ...]
    allergens: frozenset[str]
    rating: float
    popular: bool


@dataclass(frozen=True)
class Location:
    """Restaurant or store near the user."""

    name: str
    type: str
    distance_miles: float
    rating: float
    price_range: str
    diet_types: frozenset[str]
    address: str
    phone: str | None = None
    coordinates: Coordinates | None = None
    place_id: str | None = None
    open_now: bool | None = None


@dataclass(frozen=True)
class RankedFood:
    """Food item with the score it earned for a profile."""

    food: FoodItem
    score: float


@dataclass(frozen=True)
class RankedDish:
    """Menu dish with the score it earned for a profile."""

    dish: MenuDish
    score: float


@dataclass(frozen=True)
class DishSuggestion:
    """Generic dish idea for a place without a known menu."""

    name: str
    description: str
    health_score: float
    calorie_estimate: int


@dataclass(frozen=True)
class Catalogs:
    """All reference data the engine ranks over."""

    foods: tuple[FoodItem, ...]
    menus: dict[str, tuple[MenuDish, ...]]
    locations: tuple[Location, ...]
