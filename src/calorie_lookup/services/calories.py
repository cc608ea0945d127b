"""Calorie resolution: validate, look up, normalize."""

import logging
import math
from dataclasses import dataclass
from numbers import Real

from calorie_lookup.domain.calories import (
    DEFAULT_SERVING_SIZE_G,
    USDA_SOURCE,
    CalorieQuery,
    CalorieResult,
    FoodDetail,
    InvalidRequest,
    LabelCalories,
    UpstreamLookupFailure,
)
from calorie_lookup.services.lookup import NutritionLookupService

_logger = logging.getLogger(__name__)


def validate_query(dish_name: object, servings: object = 1) -> CalorieQuery:
    """Return a CalorieQuery or raise InvalidRequest."""
    if not isinstance(dish_name, str) or not dish_name.strip():
        raise InvalidRequest("dish_name is required")
    if (
        isinstance(servings, bool)
        or not isinstance(servings, Real)
        or not math.isfinite(servings)
        or servings <= 0
    ):
        raise InvalidRequest("servings must be a positive number")
    return CalorieQuery(dish_name=dish_name.strip(), servings=servings)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    # value + 0.5 can itself round up, e.g. for 0.49999999999999994.
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def calories_per_serving(detail: FoodDetail) -> float:
    """Return the unrounded calories for one serving of the food."""
    source = detail.calories
    if isinstance(source, LabelCalories):
        return source.value
    kcal_per_100g = source.kcal_per_100g or 0.0
    # A zero serving size is treated like a missing one.
    grams_per_serving = source.serving_size_g or DEFAULT_SERVING_SIZE_G
    return (kcal_per_100g / 100) * grams_per_serving


def normalize_calories(
    query: CalorieQuery, detail: FoodDetail, source: str = USDA_SOURCE
) -> CalorieResult:
    """Compute per-serving and total calories, rounding only the outputs."""
    per_serving = calories_per_serving(detail)
    if not math.isfinite(per_serving):
        raise UpstreamLookupFailure("FDC food detail has non-finite calories")
    total = per_serving * query.servings
    if not math.isfinite(total):
        raise InvalidRequest("servings too large for a calorie total")
    return CalorieResult(
        dish_name=query.dish_name,
        servings=query.servings,
        calories_per_serving=round_half_up(per_serving),
        total_calories=round_half_up(total),
        source=source,
    )


@dataclass
class CalorieService:
    """Entry point for calorie estimates of a dish."""

    lookup: NutritionLookupService
    source: str = USDA_SOURCE

    async def get_calories(
        self, dish_name: object, servings: object = 1
    ) -> CalorieResult:
        """Resolve a dish name and serving count to a calorie estimate."""
        query = validate_query(dish_name, servings)
        detail = await self.lookup.find_food(query.dish_name)
        result = normalize_calories(query, detail, source=self.source)
        _logger.info(
            "Calories resolved: dish=%r fdc_id=%s per_serving=%s total=%s",
            query.dish_name,
            detail.fdc_id,
            result.calories_per_serving,
            result.total_calories,
        )
        return result
