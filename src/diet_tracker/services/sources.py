"""Source adapters normalizing foods into ``FoodSearchResult``.

Each adapter owns one source (USDA FDC, the curated Indian foods table,
user custom foods). ``to_search_result`` never raises: missing nutrients
become 0 and malformed records become an "Invalid food data" placeholder
so one bad row cannot break a whole search.
"""

import asyncio
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from diet_tracker.domain.foods import (
    CuratedFood,
    CustomFood,
    FoodSearchResult,
    SourceTag,
)
from diet_tracker.domain.nutrition import (
    NUTRIENT_TABLE,
    NUTRIENTS_BY_ID,
    NutrientKind,
    NutrientValue,
)
from diet_tracker.services.foods import CuratedFoodService, CustomFoodService
from diet_tracker.services.nutrition import NutritionService

_logger = logging.getLogger(__name__)

INVALID_FOOD_ID = "invalid-food"
INVALID_FOOD_DESCRIPTION = "Invalid food data"


class FoodSource(Protocol):
    """A searchable food source."""

    tag: SourceTag

    async def search(
        self, query: str, user_id: int | None = None
    ) -> list[FoodSearchResult]:
        """Return matching foods in canonical form."""

    def to_search_result(self, record: object) -> FoodSearchResult:
        """Convert one native record to the canonical shape."""


def invalid_result(tag: SourceTag) -> FoodSearchResult:
    """Placeholder shown in place of a record that could not be read."""
    return FoodSearchResult(
        id=INVALID_FOOD_ID,
        description=INVALID_FOOD_DESCRIPTION,
        nutrients=(),
        source_tag=tag,
    )


@dataclass
class UsdaSource(FoodSource):
    """Adapter over the USDA FDC search API."""

    nutrition_service: NutritionService
    tag: SourceTag = SourceTag.USDA

    async def search(
        self, query: str, user_id: int | None = None
    ) -> list[FoodSearchResult]:
        """Search FDC and normalize each returned food."""
        payload = await self.nutrition_service.search(query)
        foods = payload.get("foods") or []
        return [self.to_search_result(food) for food in foods]

    def to_search_result(self, record: object) -> FoodSearchResult:
        """Reshape an FDC food, keeping only canonical nutrients."""
        try:
            if not isinstance(record, Mapping) or record.get("fdcId") is None:
                raise ValueError("missing fdcId")
            return FoodSearchResult(
                id=str(record["fdcId"]),
                description=_description(record.get("description"), "Unknown Food"),
                nutrients=_usda_nutrients(record.get("foodNutrients") or []),
                source_tag=self.tag,
                food_group=_optional_str(record.get("foodCategory")),
                brand_name=_optional_str(record.get("brandName")),
                data_type=_optional_str(record.get("dataType")),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            _logger.warning("Invalid USDA food data %r: %s", record, exc)
            return invalid_result(self.tag)


@dataclass
class CuratedSource(FoodSource):
    """Adapter over the curated Indian foods table."""

    food_service: CuratedFoodService
    tag: SourceTag = SourceTag.CURATED

    async def search(
        self, query: str, user_id: int | None = None
    ) -> list[FoodSearchResult]:
        """Search curated foods by name."""
        foods = await asyncio.to_thread(self.food_service.search, query)
        return [self.to_search_result(food) for food in foods]

    def to_search_result(self, record: object) -> FoodSearchResult:
        """Map a curated row's flat fields into the nutrient array."""
        try:
            if not isinstance(record, CuratedFood):
                raise TypeError(f"expected CuratedFood, got {type(record).__name__}")
            return FoodSearchResult(
                id=f"indian-{record.id}",
                description=_description(record.food_name, "Unknown Indian Food"),
                nutrients=_flat_nutrients(record),
                source_tag=self.tag,
                food_group=record.food_group or "Indian Foods",
                food_code=record.food_code,
            )
        except (AttributeError, TypeError, ValueError) as exc:
            _logger.warning("Invalid Indian food data %r: %s", record, exc)
            return invalid_result(self.tag)


@dataclass
class CustomSource(FoodSource):
    """Adapter over a user's custom foods."""

    food_service: CustomFoodService
    tag: SourceTag = SourceTag.CUSTOM

    async def search(
        self, query: str, user_id: int | None = None
    ) -> list[FoodSearchResult]:
        """Search the user's custom foods; anonymous searches get none."""
        if user_id is None:
            return []
        foods = await asyncio.to_thread(self.food_service.search, user_id, query)
        return [self.to_search_result(food) for food in foods]

    def to_search_result(self, record: object) -> FoodSearchResult:
        """Map a custom food's flat fields into the nutrient array."""
        try:
            if not isinstance(record, CustomFood):
                raise TypeError(f"expected CustomFood, got {type(record).__name__}")
            return FoodSearchResult(
                id=f"custom-{record.id}",
                description=_description(record.food_name, "Unknown Custom Food"),
                nutrients=_flat_nutrients(record),
                source_tag=self.tag,
                food_group=record.food_group or "Custom Foods",
            )
        except (AttributeError, TypeError, ValueError) as exc:
            _logger.warning("Invalid custom food data %r: %s", record, exc)
            return invalid_result(self.tag)


def _flat_nutrients(record: CuratedFood | CustomFood) -> tuple[NutrientValue, ...]:
    values = {
        NutrientKind.CALORIES: record.calories,
        NutrientKind.PROTEIN: record.protein,
        NutrientKind.CARBS: record.carbs,
        NutrientKind.FAT: record.fat,
        NutrientKind.FIBER: record.fiber,
        NutrientKind.CALCIUM: record.calcium,
        NutrientKind.IRON: record.iron,
    }
    return tuple(
        NutrientValue.of(spec.kind, _amount(values[spec.kind]))
        for spec in NUTRIENT_TABLE
    )


def _usda_nutrients(food_nutrients: object) -> tuple[NutrientValue, ...]:
    """Keep canonical FDC nutrients; both search and detail shapes are read."""
    if not isinstance(food_nutrients, list):
        raise TypeError("foodNutrients must be a list")
    found: dict[int, NutrientValue] = {}
    for nutrient in food_nutrients:
        if not isinstance(nutrient, Mapping):
            continue
        info = nutrient.get("nutrient") or {}
        nutrient_id = info.get("id") or nutrient.get("nutrientId")
        spec = NUTRIENTS_BY_ID.get(nutrient_id)
        if spec is None or nutrient_id in found:
            continue
        raw_value = nutrient.get("value", nutrient.get("amount"))
        found[nutrient_id] = NutrientValue(
            nutrient_id=spec.nutrient_id,
            nutrient_name=str(
                nutrient.get("nutrientName") or info.get("name") or spec.name
            ),
            nutrient_number=str(
                nutrient.get("nutrientNumber") or info.get("number") or spec.number
            ),
            unit_name=str(
                nutrient.get("unitName") or info.get("unitName") or spec.unit
            ),
            value=_amount(raw_value),
        )
    return tuple(
        found.get(spec.nutrient_id) or NutrientValue.of(spec.kind, 0.0)
        for spec in NUTRIENT_TABLE
    )


def _amount(value: object) -> float:
    """Coerce a stored nutrient amount; missing and negative read as 0.

    NaN and infinity are malformed, so the record becomes a placeholder.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise TypeError("boolean is not a nutrient amount")
    amount = float(value)
    if not math.isfinite(amount):
        raise ValueError(f"non-finite nutrient amount: {value!r}")
    return max(amount, 0.0)


def _description(value: object, fallback: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return fallback


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, Mapping):
        description = value.get("description")
        return str(description) if description else None
    return str(value)
