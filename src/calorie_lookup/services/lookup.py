"""Nutrition lookup against USDA FDC: search, then fetch detail."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from calorie_lookup.adapters.fdc_client import FdcClient
from calorie_lookup.domain.calories import (
    ENERGY_NUTRIENT_NUMBER,
    CalorieSource,
    DishNotFound,
    FoodDetail,
    FoodSearchHit,
    LabelCalories,
    NutrientTableCalories,
    UpstreamLookupFailure,
)

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class NutritionLookupService:
    """Resolve a dish name to a single FDC food detail record.

    The two upstream calls run strictly in sequence; the search hit's
    identifier is the only value handed from the first to the second.
    Nothing is cached and nothing is retried.
    """

    fdc_client: FdcClient

    async def find_food(self, dish_name: str) -> FoodDetail:
        """Return the best-matching food detail for a dish name."""
        hit = await self.search_first(dish_name)
        return await self.get_detail(hit)

    async def search_first(self, dish_name: str) -> FoodSearchHit:
        """Return the first search hit or raise DishNotFound."""
        payload = await self._call(
            lambda: self.fdc_client.search_foods(dish_name, page_size=1),
            action="search",
        )
        if not isinstance(payload, dict):
            raise UpstreamLookupFailure("FDC search response is not an object")
        foods = payload.get("foods")
        if not foods or (isinstance(foods, list) and not foods[0]):
            _logger.info("No FDC match for dish=%r", dish_name)
            raise DishNotFound(dish_name)
        if not isinstance(foods, list):
            raise UpstreamLookupFailure("FDC search foods is not a list")
        return _parse_search_hit(foods[0])

    async def get_detail(self, hit: FoodSearchHit) -> FoodDetail:
        """Fetch and parse the detail record for a search hit."""
        payload = await self._call(
            lambda: self.fdc_client.get_food(hit.fdc_id),
            action=f"get_food:{hit.fdc_id}",
        )
        return _parse_food_detail(payload, hit)

    async def _call(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call the FDC client once, wrapping any failure."""
        try:
            return await func()
        except Exception as exc:
            _logger.exception(
                "FDC %s failed (status=%s)", action, _status_code_from_exception(exc)
            )
            raise UpstreamLookupFailure(f"FDC {action} failed") from exc


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _parse_search_hit(food: object) -> FoodSearchHit:
    """Build a search hit from a raw FDC search entry."""
    if not isinstance(food, dict) or food.get("fdcId") is None:
        raise UpstreamLookupFailure("FDC search hit has no fdcId")
    try:
        fdc_id = int(food["fdcId"])
    except (TypeError, ValueError) as exc:
        raise UpstreamLookupFailure("FDC search hit has an invalid fdcId") from exc
    return FoodSearchHit(fdc_id=fdc_id, description=str(food.get("description", "")))


def _parse_food_detail(payload: object, hit: FoodSearchHit) -> FoodDetail:
    """Reduce a raw FDC food payload to a FoodDetail."""
    if not isinstance(payload, dict):
        raise UpstreamLookupFailure("FDC food detail is not an object")
    try:
        calories = _extract_calorie_source(payload)
    except (TypeError, ValueError) as exc:
        raise UpstreamLookupFailure("FDC food detail has malformed nutrients") from exc
    return FoodDetail(
        fdc_id=hit.fdc_id,
        description=str(payload.get("description") or hit.description),
        calories=calories,
    )


def _extract_calorie_source(payload: dict[str, object]) -> CalorieSource:
    """Pick the label calories when present, else the nutrient table."""
    label_nutrients = payload.get("labelNutrients") or {}
    label_calories = (
        label_nutrients.get("calories") if isinstance(label_nutrients, dict) else None
    )
    if isinstance(label_calories, dict) and label_calories.get("value") is not None:
        return LabelCalories(value=float(label_calories["value"]))

    kcal_per_100g = None
    for nutrient in payload.get("foodNutrients") or []:
        if _nutrient_number(nutrient) == ENERGY_NUTRIENT_NUMBER:
            amount = nutrient.get("amount")
            kcal_per_100g = float(amount) if amount is not None else None
            break

    serving_size = payload.get("servingSize")
    return NutrientTableCalories(
        kcal_per_100g=kcal_per_100g,
        serving_size_g=float(serving_size) if serving_size is not None else None,
    )


def _nutrient_number(nutrient: object) -> str | None:
    """Return the nutrient code from abridged or full FDC nutrient entries."""
    if not isinstance(nutrient, dict):
        return None
    number = nutrient.get("nutrientNumber")
    if number is None:
        nutrient_info = nutrient.get("nutrient") or {}
        if isinstance(nutrient_info, dict):
            number = nutrient_info.get("number")
    return str(number) if number is not None else None
