"""Request and response models for the HTTP API."""

from pydantic import BaseModel, Field

from foodwise.domain.catalog import (
    Coordinates,
    DishSuggestion,
    Location,
    RankedDish,
    RankedFood,
)
from foodwise.domain.nutrition import NutritionGoals
from foodwise.domain.profile import UserProfile
from foodwise.services.foods import match_score, primary_benefit
from foodwise.services.links import directions_url, maps_url


class ProfileIn(BaseModel):
    """Profile form fields.

    Enum fields are plain strings; the engine validates them.
    """

    weight: float
    height: float
    age: int
    gender: str
    diet_type: str = "balanced"
    fitness_goal: str = "maintenance"
    activity_level: str
    budget: str = "medium"
    allergies: list[str] = Field(default_factory=list)

    def to_domain(self) -> UserProfile:
        """Convert to the engine's profile type."""
        return UserProfile(
            weight=self.weight,
            height=self.height,
            age=self.age,
            gender=self.gender.strip().lower(),
            diet_type=self.diet_type,
            fitness_goal=self.fitness_goal,
            activity_level=self.activity_level,
            budget=self.budget,
            allergies=frozenset(self.allergies),
        )


class CoordinatesIn(BaseModel):
    """User position."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    def to_domain(self) -> Coordinates:
        return Coordinates(lat=self.lat, lng=self.lng)


class RecommendationRequest(BaseModel):
    """Body of POST /recommendations."""

    profile: ProfileIn
    coordinates: CoordinatesIn | None = None


class NutritionGoalsOut(BaseModel):
    calories: int
    protein: int
    carbs: int
    fat: int
    fiber: int
    water: int

    @classmethod
    def from_domain(cls, goals: NutritionGoals) -> "NutritionGoalsOut":
        return cls(
            calories=goals.calories,
            protein=goals.protein,
            carbs=goals.carbs,
            fat=goals.fat,
            fiber=goals.fiber,
            water=goals.water,
        )


class FoodOut(BaseModel):
    name: str
    description: str
    benefits: list[str]
    category: str
    score: float
    match_score: int

    @classmethod
    def from_domain(cls, ranked: RankedFood, profile: UserProfile) -> "FoodOut":
        return cls(
            name=ranked.food.name,
            description=ranked.food.description,
            benefits=list(ranked.food.benefits),
            category=primary_benefit(ranked.food),
            score=ranked.score,
            match_score=match_score(ranked.food, profile),
        )


class DishOut(BaseModel):
    name: str
    description: str
    price: str
    calories: float
    protein: float
    benefits: list[str]
    rating: float
    popular: bool
    score: float

    @classmethod
    def from_domain(cls, ranked: RankedDish) -> "DishOut":
        dish = ranked.dish
        return cls(
            name=dish.name,
            description=dish.description,
            price=dish.price,
            calories=dish.calories,
            protein=dish.protein,
            benefits=list(dish.benefits),
            rating=dish.rating,
            popular=dish.popular,
            score=ranked.score,
        )


class SuggestionOut(BaseModel):
    name: str
    description: str
    health_score: float
    calorie_estimate: int

    @classmethod
    def from_domain(cls, suggestion: DishSuggestion) -> "SuggestionOut":
        return cls(
            name=suggestion.name,
            description=suggestion.description,
            health_score=suggestion.health_score,
            calorie_estimate=suggestion.calorie_estimate,
        )


class LocationOut(BaseModel):
    name: str
    type: str
    distance_miles: float
    rating: float
    price_range: str
    address: str
    phone: str | None
    open_now: bool | None
    maps_url: str
    directions_url: str
    top_dishes: list[DishOut]
    suggested_dishes: list[SuggestionOut]

    @classmethod
    def from_domain(
        cls,
        location: Location,
        dishes: list[RankedDish],
        suggestions: list[DishSuggestion],
        origin: Coordinates | None,
    ) -> "LocationOut":
        return cls(
            name=location.name,
            type=location.type,
            distance_miles=location.distance_miles,
            rating=location.rating,
            price_range=location.price_range,
            address=location.address,
            phone=location.phone,
            open_now=location.open_now,
            maps_url=maps_url(location),
            directions_url=directions_url(location, origin),
            top_dishes=[DishOut.from_domain(dish) for dish in dishes],
            suggested_dishes=[
                SuggestionOut.from_domain(suggestion) for suggestion in suggestions
            ],
        )


class RecommendationResponse(BaseModel):
    nutrition_goals: NutritionGoalsOut
    foods: list[FoodOut]
    food_groups: dict[str, list[str]]
    locations: list[LocationOut]
    live_locations: bool
