"""Nutrition target models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroSplit:
    """Unrounded macronutrient grams for a calorie budget."""

    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class NutritionGoals:
    """Daily targets shown to the user, rounded to whole units."""

    calories: int
    protein: int
    carbs: int
    fat: int
    fiber: int
    water: int
