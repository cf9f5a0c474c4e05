"""User profile domain model."""

from dataclasses import dataclass, field

GENDERS = ("male", "female")
DIET_TYPES = (
    "balanced",
    "vegetarian",
    "vegan",
    "keto",
    "paleo",
    "mediterranean",
    "low-carb",
    "high-protein",
)
FITNESS_GOALS = (
    "weight-loss",
    "weight-gain",
    "muscle-gain",
    "maintenance",
    "endurance",
)
ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "active", "very-active")
BUDGETS = ("low", "medium", "high", "premium")


@dataclass(frozen=True)
class UserProfile:
    """Inputs for a single recommendation pass."""

    weight: float
    height: float
    age: int
    gender: str
    diet_type: str
    fitness_goal: str
    activity_level: str
    budget: str
    allergies: frozenset[str] = field(default_factory=frozenset)
