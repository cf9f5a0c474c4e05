"""Goal priorities and compatibility checks shared by the recommenders."""

from collections.abc import Iterable, Sequence

FOOD_GOAL_PRIORITIES: dict[str, tuple[str, ...]] = {
    "weight-loss": ("low-calorie", "high-fiber", "high-protein"),
    "weight-gain": ("high-calorie", "healthy-fats", "complex-carbs"),
    "muscle-gain": ("high-protein", "complex-carbs", "healthy-fats"),
    "maintenance": ("balanced", "nutrient-dense"),
    "endurance": ("complex-carbs", "antioxidants", "electrolytes"),
}
DEFAULT_FOOD_PRIORITIES = ("balanced", "nutrient-dense")

# Dish benefit tags use a slightly different vocabulary than foods.
DISH_GOAL_PRIORITIES: dict[str, tuple[str, ...]] = {
    "weight-loss": ("low-calorie", "high-protein", "fiber"),
    "weight-gain": ("high-calorie", "healthy-fats", "complex-carbs"),
    "muscle-gain": ("high-protein", "muscle-building", "complete-amino"),
    "maintenance": ("balanced", "nutrient-dense"),
    "endurance": ("complex-carbs", "antioxidants", "energy-boost"),
}
DEFAULT_DISH_PRIORITIES = ("balanced",)

FOOD_BENEFIT_WEIGHT = 10
DISH_BENEFIT_WEIGHT = 8

ALL_DIETS = "all"


def food_priorities(fitness_goal: str) -> tuple[str, ...]:
    """Return the ordered benefit tags that matter for a goal."""
    return FOOD_GOAL_PRIORITIES.get(fitness_goal, DEFAULT_FOOD_PRIORITIES)


def dish_priorities(fitness_goal: str) -> tuple[str, ...]:
    """Return the ordered dish benefit tags that matter for a goal."""
    return DISH_GOAL_PRIORITIES.get(fitness_goal, DEFAULT_DISH_PRIORITIES)


def benefit_bonus(
    benefits: Iterable[str], priorities: Sequence[str], weight: int
) -> float:
    """Sum (len(priorities) - index) * weight over priorities present in benefits."""
    present = set(benefits)
    return sum(
        (len(priorities) - index) * weight
        for index, priority in enumerate(priorities)
        if priority in present
    )


def diet_matches(
    diet_types: frozenset[str], diet_type: str, *, balanced_is_universal: bool = False
) -> bool:
    """Return true when an entry is compatible with the user's diet type."""
    if diet_type in diet_types or ALL_DIETS in diet_types:
        return True
    return balanced_is_universal and "balanced" in diet_types


def allergen_free(allergens: frozenset[str], allergies: frozenset[str]) -> bool:
    """Return true when none of the entry's allergens affect the user."""
    return allergens.isdisjoint(allergies)
