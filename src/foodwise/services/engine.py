"""Recommendation engine tying the calculators and recommenders together."""

import random
from dataclasses import dataclass, field

from foodwise.domain.catalog import (
    Catalogs,
    Coordinates,
    DishSuggestion,
    Location,
    RankedDish,
    RankedFood,
)
from foodwise.domain.nutrition import NutritionGoals
from foodwise.domain.profile import UserProfile
from foodwise.services.foods import recommend_foods
from foodwise.services.locations import (
    LocationService,
    recommend_locations,
    suggest_dishes,
    top_dishes_for,
)
from foodwise.services.nutrition import compute_nutrition_goals


@dataclass(frozen=True)
class LocationRecommendation:
    """A nearby location with the dishes worth ordering there.

    Places missing from the menu catalog get generic ``suggested_dishes``
    instead of ranked ``top_dishes``.
    """

    location: Location
    top_dishes: list[RankedDish]
    suggested_dishes: list[DishSuggestion] = field(default_factory=list)


@dataclass(frozen=True)
class RecommendationReport:
    """Everything computed for one profile submission."""

    nutrition_goals: NutritionGoals
    foods: list[RankedFood]
    locations: list[LocationRecommendation]
    live_locations: bool = False


@dataclass
class RecommendationEngine:
    """Stateless facade over the reference catalogs."""

    catalogs: Catalogs

    def compute_nutrition_goals(self, profile: UserProfile) -> NutritionGoals:
        """Return daily nutrition targets; raises ValidationError."""
        return compute_nutrition_goals(profile)

    def recommend_foods(
        self, profile: UserProfile, rng: random.Random | None = None
    ) -> list[RankedFood]:
        """Return the top ranked foods."""
        return recommend_foods(profile, self.catalogs.foods, rng=rng)

    def recommend_locations(self, profile: UserProfile) -> list[Location]:
        """Return the closest suitable locations from the static catalog."""
        return recommend_locations(profile, self.catalogs.locations)

    def top_dishes_for(
        self, location_name: str, profile: UserProfile
    ) -> list[RankedDish]:
        """Return the best dishes at a location."""
        return top_dishes_for(location_name, profile, self.catalogs.menus)

    def recommend(self, profile: UserProfile) -> RecommendationReport:
        """Compute goals, foods and static locations in one pass."""
        goals = self.compute_nutrition_goals(profile)
        return RecommendationReport(
            nutrition_goals=goals,
            foods=self.recommend_foods(profile),
            locations=self._with_dishes(profile, self.recommend_locations(profile)),
        )

    async def recommend_nearby(
        self,
        profile: UserProfile,
        location_service: LocationService,
        origin: Coordinates | None = None,
    ) -> RecommendationReport:
        """Like ``recommend`` but sources locations through the location service."""
        goals = self.compute_nutrition_goals(profile)
        nearby = await location_service.find_nearby(profile, origin)
        return RecommendationReport(
            nutrition_goals=goals,
            foods=self.recommend_foods(profile),
            locations=self._with_dishes(profile, nearby.locations),
            live_locations=nearby.live,
        )

    def _with_dishes(
        self, profile: UserProfile, locations: list[Location]
    ) -> list[LocationRecommendation]:
        recommendations = []
        for location in locations:
            if location.name in self.catalogs.menus:
                recommendation = LocationRecommendation(
                    location=location,
                    top_dishes=self.top_dishes_for(location.name, profile),
                )
            else:
                recommendation = LocationRecommendation(
                    location=location,
                    top_dishes=[],
                    suggested_dishes=suggest_dishes(profile.diet_type),
                )
            recommendations.append(recommendation)
        return recommendations
