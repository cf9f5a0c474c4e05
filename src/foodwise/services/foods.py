"""Goal-weighted food recommendations."""

import logging
import random
from collections.abc import Sequence

from foodwise.domain.catalog import FoodItem, RankedFood
from foodwise.domain.profile import UserProfile
from foodwise.services.scoring import (
    DISH_GOAL_PRIORITIES,
    FOOD_BENEFIT_WEIGHT,
    allergen_free,
    benefit_bonus,
    diet_matches,
    food_priorities,
)

MAX_FOOD_RECOMMENDATIONS = 8
_JITTER_SCALE = 10

BASE_MATCH_SCORE = 70
DIET_MATCH_BONUS = 15
GOAL_BENEFIT_BONUS = 5
ALLERGEN_PENALTY = 30
DEFAULT_CATEGORY = "nutrient-dense"

_logger = logging.getLogger(__name__)


def recommend_foods(
    profile: UserProfile,
    catalog: Sequence[FoodItem],
    *,
    limit: int = MAX_FOOD_RECOMMENDATIONS,
    rng: random.Random | None = None,
) -> list[RankedFood]:
    """Rank catalog foods for a profile.

    Items tagged "balanced" count as compatible with every diet. When no item
    survives the diet and allergen filters the whole catalog is ranked instead,
    so a non-empty catalog always yields suggestions. Ties keep catalog order.
    Passing ``rng`` adds up to 10 points of jitter per item.
    """
    suitable = [
        food
        for food in catalog
        if diet_matches(food.diet_types, profile.diet_type, balanced_is_universal=True)
        and allergen_free(food.allergens, profile.allergies)
    ]
    if not suitable:
        if catalog:
            _logger.info(
                "No foods match diet=%s allergies=%s; ranking full catalog",
                profile.diet_type,
                sorted(profile.allergies),
            )
        suitable = list(catalog)

    priorities = food_priorities(profile.fitness_goal)
    ranked = [
        RankedFood(
            food=food,
            score=_base_score(rng)
            + benefit_bonus(food.benefits, priorities, FOOD_BENEFIT_WEIGHT),
        )
        for food in suitable
    ]
    ranked.sort(key=lambda item: item.score, reverse=True)
    return ranked[:limit]


def _base_score(rng: random.Random | None) -> float:
    if rng is None:
        return 0.0
    return rng.random() * _JITTER_SCALE


def match_score(food: FoodItem, profile: UserProfile) -> int:
    """Return a 0-100 compatibility score for showing next to a food."""
    score = BASE_MATCH_SCORE
    if profile.diet_type in food.diet_types:
        score += DIET_MATCH_BONUS
    # Goal benefits use the dish vocabulary; unknown goals earn nothing.
    goal_benefits = set(DISH_GOAL_PRIORITIES.get(profile.fitness_goal, ()))
    score += GOAL_BENEFIT_BONUS * len(goal_benefits.intersection(food.benefits))
    if not allergen_free(food.allergens, profile.allergies):
        score -= ALLERGEN_PENALTY
    return min(max(score, 0), 100)


def primary_benefit(food: FoodItem) -> str:
    """Return the category a food is listed under."""
    return food.benefits[0] if food.benefits else DEFAULT_CATEGORY


def group_by_primary_benefit(
    ranked: Sequence[RankedFood],
) -> dict[str, list[RankedFood]]:
    """Group ranked foods by their first benefit, keeping rank order."""
    groups: dict[str, list[RankedFood]] = {}
    for item in ranked:
        groups.setdefault(primary_benefit(item.food), []).append(item)
    return groups
