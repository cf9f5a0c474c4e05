"""Nearby location and dish recommendations."""

import asyncio
import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from foodwise.adapters.places_client import PlacesClient
from foodwise.domain.catalog import (
    Coordinates,
    DishSuggestion,
    Location,
    MenuDish,
    RankedDish,
)
from foodwise.domain.profile import UserProfile
from foodwise.services.cache import Cache
from foodwise.services.scoring import (
    DISH_BENEFIT_WEIGHT,
    allergen_free,
    benefit_bonus,
    diet_matches,
    dish_priorities,
)

MAX_LOCATIONS = 5
MAX_DISHES = 3
POPULAR_DISH_BONUS = 15
RATING_WEIGHT = 10

BUDGET_PRICE_RANGES: dict[str, frozenset[str]] = {
    "low": frozenset({"low"}),
    "medium": frozenset({"low", "medium"}),
    "high": frozenset({"low", "medium", "high"}),
    "premium": frozenset({"low", "medium", "high", "premium"}),
}

DIET_KEYWORDS: dict[str, str] = {
    "vegetarian": "vegetarian vegan plant-based",
    "vegan": "vegan plant-based",
    "keto": "keto low-carb ketogenic",
    "paleo": "paleo organic natural",
    "mediterranean": "mediterranean healthy",
    "low-carb": "low-carb keto healthy",
    "balanced": "healthy fresh organic",
    "high-protein": "protein healthy fitness",
}
DEFAULT_DIET_KEYWORD = "healthy restaurant"

# Words in a place's name/types that suggest a diet is served there.
_DIET_SIGNALS: dict[str, tuple[str, ...]] = {
    "vegetarian": ("vegetarian", "vegan", "plant", "green", "garden", "organic"),
    "vegan": ("vegan", "plant", "raw", "organic", "green"),
    "keto": ("keto", "low-carb", "protein", "meat", "grill"),
    "paleo": ("paleo", "organic", "natural", "farm", "fresh"),
    "mediterranean": ("mediterranean", "greek", "olive", "fresh", "healthy"),
}
_SIGNAL_WEIGHT = 0.2
_BALANCED_COMPATIBILITY = 0.7
_UNSCORED_COMPATIBILITY = 0.5
_MIN_COMPATIBILITY = 0.3

_PRICE_LEVELS = {0: "low", 1: "low", 2: "medium", 3: "high", 4: "high"}
_DEFAULT_PRICE_RANGE = "medium"

_EARTH_RADIUS_MILES = 3958.8

_DIET_DISH_IDEAS: dict[str, tuple[tuple[str, str], ...]] = {
    "vegetarian": (
        (
            "Quinoa Buddha Bowl",
            "Nutrient-dense bowl with quinoa, vegetables, and tahini dressing",
        ),
        (
            "Veggie Burger",
            "Plant-based protein with whole grain bun and sweet potato fries",
        ),
        (
            "Mediterranean Salad",
            "Fresh greens with chickpeas, olives, and olive oil dressing",
        ),
    ),
    "vegan": (
        ("Acai Bowl", "Antioxidant-rich acai with fresh fruits and nuts"),
        ("Lentil Curry", "Protein-rich lentils with vegetables and brown rice"),
        (
            "Avocado Toast",
            "Whole grain bread with avocado, tomatoes, and hemp seeds",
        ),
    ),
    "keto": (
        ("Grilled Salmon", "High-fat fish with asparagus and butter sauce"),
        ("Ribeye Steak", "High-fat cut with sauteed mushrooms and spinach"),
        ("Chicken Caesar Salad", "No croutons, extra parmesan and olive oil"),
    ),
    "mediterranean": (
        ("Grilled Fish", "Fresh fish with olive oil, lemon, and herbs"),
        ("Greek Salad", "Tomatoes, cucumber, olives, and feta cheese"),
        ("Hummus Plate", "Chickpea hummus with vegetables and olive oil"),
    ),
}
_HEALTHY_WORDS = (
    "grilled",
    "fresh",
    "organic",
    "quinoa",
    "salmon",
    "avocado",
    "vegetables",
)
_UNHEALTHY_WORDS = ("fried", "processed", "sugar", "refined")
_BASE_HEALTH_SCORE = 0.5
_HEALTH_STEP = 0.1

# First kind found in the dish name wins.
_DISH_KIND_CALORIES = (
    ("salad", 300),
    ("bowl", 450),
    ("burger", 600),
    ("steak", 700),
    ("fish", 400),
    ("curry", 500),
)
_DEFAULT_DISH_CALORIES = 450

_logger = logging.getLogger(__name__)


def budget_allows(price_range: str, budget: str) -> bool:
    """Return true when a price range fits the budget tier (cheaper tiers included)."""
    return price_range in BUDGET_PRICE_RANGES.get(budget, frozenset())


def recommend_locations(
    profile: UserProfile, catalog: Sequence[Location], *, limit: int = MAX_LOCATIONS
) -> list[Location]:
    """Return the closest locations matching the user's budget and diet."""
    suitable = [
        location
        for location in catalog
        if budget_allows(location.price_range, profile.budget)
        and diet_matches(location.diet_types, profile.diet_type)
    ]
    return sorted(suitable, key=lambda location: location.distance_miles)[:limit]


def top_dishes_for(
    location_name: str,
    profile: UserProfile,
    menu_catalog: Mapping[str, Sequence[MenuDish]],
    *,
    limit: int = MAX_DISHES,
) -> list[RankedDish]:
    """Rank a location's dishes by rating, popularity and goal fit."""
    menu = menu_catalog.get(location_name)
    if not menu:
        return []

    priorities = dish_priorities(profile.fitness_goal)
    ranked = [
        RankedDish(dish=dish, score=_dish_score(dish, priorities))
        for dish in menu
        if diet_matches(dish.diet_types, profile.diet_type)
        and allergen_free(dish.allergens, profile.allergies)
    ]
    ranked.sort(key=lambda item: item.score, reverse=True)
    return ranked[:limit]


def _dish_score(dish: MenuDish, priorities: tuple[str, ...]) -> float:
    score = dish.rating * RATING_WEIGHT
    if dish.popular:
        score += POPULAR_DISH_BONUS
    return score + benefit_bonus(dish.benefits, priorities, DISH_BENEFIT_WEIGHT)


def health_score(name: str, description: str) -> float:
    """Score 0-1 from healthy and unhealthy words in a dish's text."""
    text = f"{name} {description}".lower()
    score = _BASE_HEALTH_SCORE
    score += _HEALTH_STEP * sum(1 for word in _HEALTHY_WORDS if word in text)
    score -= _HEALTH_STEP * sum(1 for word in _UNHEALTHY_WORDS if word in text)
    return round(min(max(score, 0.0), 1.0), 2)


def estimate_calories(name: str) -> int:
    """Rough calorie estimate from the kind of dish named."""
    lowered = name.lower()
    for kind, calories in _DISH_KIND_CALORIES:
        if kind in lowered:
            return calories
    return _DEFAULT_DISH_CALORIES


def suggest_dishes(
    diet_type: str, *, limit: int = MAX_DISHES
) -> list[DishSuggestion]:
    """Return generic dish ideas for a diet, healthiest first.

    Used for places whose menu is unknown. Diets without their own ideas get
    the mediterranean set.
    """
    ideas = _DIET_DISH_IDEAS.get(diet_type, _DIET_DISH_IDEAS["mediterranean"])
    suggestions = [
        DishSuggestion(
            name=name,
            description=description,
            health_score=health_score(name, description),
            calorie_estimate=estimate_calories(name),
        )
        for name, description in ideas
    ]
    suggestions.sort(key=lambda item: item.health_score, reverse=True)
    return suggestions[:limit]


def diet_keyword(diet_type: str) -> str:
    """Return the search keyword used for a diet type."""
    return DIET_KEYWORDS.get(diet_type, DEFAULT_DIET_KEYWORD)


def map_price_level(price_level: object) -> str:
    """Map a Places price level (0-4) to a price range."""
    if isinstance(price_level, int):
        return _PRICE_LEVELS.get(price_level, _DEFAULT_PRICE_RANGE)
    return _DEFAULT_PRICE_RANGE


def diet_compatibility(text: str, diet_type: str) -> float:
    """Score 0-1 how likely a place serves a diet, from its name and types."""
    if diet_type == "balanced":
        return _BALANCED_COMPATIBILITY
    signals = _DIET_SIGNALS.get(diet_type)
    if signals is None:
        return _UNSCORED_COMPATIBILITY
    lowered = text.lower()
    hits = sum(1 for signal in signals if signal in lowered)
    return min(hits * _SIGNAL_WEIGHT, 1.0)


def infer_diet_types(text: str, candidates: Sequence[str]) -> frozenset[str]:
    """Return the diet types a place is compatible with."""
    return frozenset(
        diet
        for diet in candidates
        if diet_compatibility(text, diet) > _MIN_COMPATIBILITY
    )


def haversine_miles(origin: Coordinates, target: Coordinates) -> float:
    """Great-circle distance between two points in miles."""
    lat1, lat2 = math.radians(origin.lat), math.radians(target.lat)
    d_lat = lat2 - lat1
    d_lng = math.radians(target.lng - origin.lng)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    return 2 * _EARTH_RADIUS_MILES * math.asin(math.sqrt(a))


def locations_from_places(
    payload: Mapping[str, object], origin: Coordinates, diet_types: Sequence[str]
) -> list[Location]:
    """Convert a Nearby Search payload into Location records.

    Results without a name or geometry are skipped.
    """
    locations: list[Location] = []
    results = payload.get("results") or []
    for place in results:
        name = place.get("name")
        point = (place.get("geometry") or {}).get("location") or {}
        if not name or "lat" not in point or "lng" not in point:
            _logger.debug("Skipping place without name or geometry: %s", place)
            continue
        types = place.get("types") or []
        coordinates = Coordinates(lat=float(point["lat"]), lng=float(point["lng"]))
        text = " ".join([name, *types])
        locations.append(
            Location(
                name=name,
                type=types[0].replace("_", " ") if types else "Restaurant",
                distance_miles=round(haversine_miles(origin, coordinates), 1),
                rating=float(place.get("rating") or 0),
                price_range=map_price_level(place.get("price_level")),
                diet_types=infer_diet_types(text, diet_types),
                address=place.get("vicinity") or "",
                coordinates=coordinates,
                place_id=place.get("place_id"),
                open_now=(place.get("opening_hours") or {}).get("open_now"),
            )
        )
    return locations


@dataclass(frozen=True)
class NearbyLocations:
    """Ranked locations and whether they came from the live provider."""

    locations: list[Location]
    live: bool


@dataclass
class LocationService:
    """Finds nearby locations, preferring live data when available."""

    static_locations: Sequence[Location]
    diet_types: Sequence[str]
    client: PlacesClient | None = None
    cache: Cache | None = None
    radius_m: int = 5000
    timeout_seconds: float = 10.0
    cache_ttl_seconds: float = 300
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def find_nearby(
        self, profile: UserProfile, origin: Coordinates | None = None
    ) -> NearbyLocations:
        """Return ranked nearby locations, falling back to the static catalog."""
        if self.client is None or origin is None:
            return self._static(profile)

        try:
            live = await self._live_locations(profile, origin)
        except Exception:
            _logger.warning(
                "Live location lookup failed; using static catalog",
                exc_info=True,
                extra={"diet_type": profile.diet_type},
            )
            return self._static(profile)

        if not live:
            _logger.warning(
                "Live location lookup returned no places; using static catalog"
            )
            return self._static(profile)
        return NearbyLocations(
            locations=recommend_locations(profile, live), live=True
        )

    def _static(self, profile: UserProfile) -> NearbyLocations:
        return NearbyLocations(
            locations=recommend_locations(profile, self.static_locations), live=False
        )

    async def _live_locations(
        self, profile: UserProfile, origin: Coordinates
    ) -> list[Location]:
        cache_key = (
            f"places:{origin.lat:.3f},{origin.lng:.3f}:"
            f"{profile.diet_type}:{self.radius_m}"
        )
        if self.cache is not None:
            cached = self.cache.get(cache_key)
            if isinstance(cached, list):
                return cached

        payload = await self._search_with_retry(origin, diet_keyword(profile.diet_type))
        locations = locations_from_places(payload, origin, self.diet_types)
        if self.cache is not None and locations:
            self.cache.set(cache_key, locations, ttl_seconds=self.cache_ttl_seconds)
        return locations

    async def _search_with_retry(
        self, origin: Coordinates, keyword: str
    ) -> dict[str, object]:
        """Call the provider under a timeout, retrying briefly."""
        attempt = 0
        while True:
            try:
                return await asyncio.wait_for(
                    self.client.nearby_search(
                        origin.lat, origin.lng, self.radius_m, keyword
                    ),
                    timeout=self.timeout_seconds,
                )
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Places search failed (attempt %s/%s): %r",
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)
