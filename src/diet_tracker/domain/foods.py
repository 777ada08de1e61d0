"""Domain models for food sources and unified search results."""

from dataclasses import dataclass
from enum import Enum

from diet_tracker.domain.nutrition import NutrientValue


class SourceTag(Enum):
    """Which food source produced a search result."""

    USDA = "usda"
    CURATED = "curated"
    CUSTOM = "custom"


@dataclass(frozen=True)
class CuratedFood:
    """A row of the curated Indian foods table (values per 100 g)."""

    id: int
    food_name: str | None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    calcium: float | None = None
    iron: float | None = None
    food_group: str | None = None
    food_code: str | None = None


@dataclass(frozen=True)
class CustomFood:
    """A user-defined food (values per 100 g), visible only to its owner."""

    id: int
    user_id: int
    food_name: str | None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    calcium: float | None = None
    iron: float | None = None
    food_group: str | None = None


@dataclass(frozen=True)
class FoodSearchResult:
    """A food from any source, normalized to one shape."""

    id: str
    description: str
    nutrients: tuple[NutrientValue, ...]
    source_tag: SourceTag
    food_group: str | None = None
    food_code: str | None = None
    brand_name: str | None = None
    data_type: str | None = None
