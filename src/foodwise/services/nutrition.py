"""Calorie and macronutrient targets (Mifflin-St Jeor based)."""

import math
from numbers import Real

from foodwise.domain.nutrition import MacroSplit, NutritionGoals
from foodwise.domain.profile import (
    FITNESS_GOALS,
    GENDERS,
    UserProfile,
)
from foodwise.errors import ValidationError

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very-active": 1.9,
}

GOAL_CALORIE_OFFSETS: dict[str, float] = {
    "weight-loss": -500,
    "weight-gain": 500,
    "muscle-gain": 300,
    "maintenance": 0,
    "endurance": 0,
}

# protein / carbs / fat share of calories
MACRO_RATIOS: dict[str, tuple[float, float, float]] = {
    "keto": (0.25, 0.05, 0.70),
    "high-protein": (0.35, 0.35, 0.30),
    "low-carb": (0.30, 0.20, 0.50),
}
DEFAULT_MACRO_RATIO = (0.25, 0.45, 0.30)

_KCAL_PER_G_PROTEIN = 4
_KCAL_PER_G_CARBS = 4
_KCAL_PER_G_FAT = 9
_FIBER_G_PER_1000_KCAL = 14
_WATER_ML_PER_KG = 35


def compute_bmr(weight: float, height: float, age: int, gender: str) -> float:
    """Return basal metabolic rate in kcal/day."""
    if gender not in GENDERS:
        raise ValidationError("gender", f"expected one of {GENDERS}, got {gender!r}")
    base = 10 * weight + 6.25 * height - 5 * age
    return base + (5 if gender == "male" else -161)


def compute_daily_calories(bmr: float, activity_level: str, fitness_goal: str) -> float:
    """Scale BMR by activity and shift it toward the fitness goal."""
    multiplier = ACTIVITY_MULTIPLIERS.get(activity_level)
    if multiplier is None:
        raise ValidationError(
            "activity_level",
            f"expected one of {tuple(ACTIVITY_MULTIPLIERS)}, got {activity_level!r}",
        )
    offset = GOAL_CALORIE_OFFSETS.get(fitness_goal)
    if offset is None:
        raise ValidationError(
            "fitness_goal", f"expected one of {FITNESS_GOALS}, got {fitness_goal!r}"
        )
    return bmr * multiplier + offset


def compute_macros(calories: float, diet_type: str) -> MacroSplit:
    """Split calories into macro grams.

    Diet types without a dedicated ratio (balanced, vegetarian, vegan, paleo,
    mediterranean, or anything unrecognized) get the default 25/45/30 split.
    """
    protein_pct, carbs_pct, fat_pct = MACRO_RATIOS.get(diet_type, DEFAULT_MACRO_RATIO)
    return MacroSplit(
        protein_g=calories * protein_pct / _KCAL_PER_G_PROTEIN,
        carbs_g=calories * carbs_pct / _KCAL_PER_G_CARBS,
        fat_g=calories * fat_pct / _KCAL_PER_G_FAT,
    )


def compute_fiber_and_water(calories: float, weight: float) -> tuple[int, int]:
    """Return (fiber grams, water ml) targets."""
    fiber = round_half_up(calories / 1000 * _FIBER_G_PER_1000_KCAL)
    water = round_half_up(weight * _WATER_ML_PER_KG)
    return fiber, water


def validate_profile(profile: UserProfile) -> None:
    """Raise ValidationError for the first invalid field of the profile."""
    _require_positive("weight", profile.weight)
    _require_positive("height", profile.height)
    if isinstance(profile.age, bool) or not isinstance(profile.age, int):
        raise ValidationError("age", f"expected a whole number, got {profile.age!r}")
    _require_positive("age", profile.age)
    if profile.gender not in GENDERS:
        raise ValidationError(
            "gender", f"expected one of {GENDERS}, got {profile.gender!r}"
        )
    if profile.activity_level not in ACTIVITY_MULTIPLIERS:
        raise ValidationError(
            "activity_level",
            f"expected one of {tuple(ACTIVITY_MULTIPLIERS)}, "
            f"got {profile.activity_level!r}",
        )
    if profile.fitness_goal not in FITNESS_GOALS:
        raise ValidationError(
            "fitness_goal",
            f"expected one of {FITNESS_GOALS}, got {profile.fitness_goal!r}",
        )


def compute_nutrition_goals(profile: UserProfile) -> NutritionGoals:
    """Compute rounded daily nutrition targets for a profile."""
    validate_profile(profile)
    bmr = compute_bmr(profile.weight, profile.height, profile.age, profile.gender)
    calories = compute_daily_calories(
        bmr, profile.activity_level, profile.fitness_goal
    )
    macros = compute_macros(calories, profile.diet_type)
    fiber, water = compute_fiber_and_water(calories, profile.weight)
    return NutritionGoals(
        calories=round_half_up(calories),
        protein=round_half_up(macros.protein_g),
        carbs=round_half_up(macros.carbs_g),
        fat=round_half_up(macros.fat_g),
        fiber=fiber,
        water=water,
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return math.floor(value + 0.5)


def _require_positive(field: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(field, f"expected a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(field, f"must be positive, got {value!r}")
