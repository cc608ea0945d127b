"""Calorie lookup domain models and errors."""

from dataclasses import dataclass

ENERGY_NUTRIENT_NUMBER = "208"
DEFAULT_SERVING_SIZE_G = 100.0
USDA_SOURCE = "USDA FoodData Central"


class CalorieLookupError(Exception):
    """Base class for failures of the calorie lookup flow."""


class InvalidRequest(CalorieLookupError):
    """Raised when the dish name or serving count is unusable."""


class DishNotFound(CalorieLookupError):
    """Raised when the food database has no match for a dish."""


class UpstreamLookupFailure(CalorieLookupError):
    """Raised when the food database cannot be reached or answers badly."""


@dataclass(frozen=True)
class CalorieQuery:
    """Validated calorie lookup input."""

    dish_name: str
    servings: float


@dataclass(frozen=True)
class FoodSearchHit:
    """First search result for a dish."""

    fdc_id: int
    description: str


@dataclass(frozen=True)
class LabelCalories:
    """Calories printed on the food label, already per serving."""

    value: float


@dataclass(frozen=True)
class NutrientTableCalories:
    """Energy per 100 g from the nutrient table plus the declared serving size."""

    kcal_per_100g: float | None
    serving_size_g: float | None


CalorieSource = LabelCalories | NutrientTableCalories


@dataclass(frozen=True)
class FoodDetail:
    """Food detail reduced to what calorie resolution needs."""

    fdc_id: int
    description: str
    calories: CalorieSource


@dataclass(frozen=True)
class CalorieResult:
    """Calorie estimate returned to the caller."""

    dish_name: str
    servings: float
    calories_per_serving: int
    total_calories: int
    source: str
