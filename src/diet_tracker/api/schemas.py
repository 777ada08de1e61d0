"""Pydantic models for the REST API (camelCase on the wire)."""

from dataclasses import asdict
from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from diet_tracker.domain.food_log import MealType, NewFoodLogEntry
from diet_tracker.domain.foods import FoodSearchResult, SourceTag
from diet_tracker.domain.nutrition import NutrientValue, ServingNutrition


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_domain(cls, record: object) -> "CamelModel":
        """Build the model from a domain dataclass."""
        return cls.model_validate(asdict(record))


class FoodLogEntryIn(CamelModel):
    """Body for creating a food log entry."""

    user_id: int
    date: date
    meal_type: MealType
    food_name: str = Field(min_length=1)
    quantity: float = Field(gt=0)
    unit: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    fdc_id: str | None = None

    def to_domain(self) -> NewFoodLogEntry:
        """Convert to the domain entry."""
        return NewFoodLogEntry(**self.model_dump())


class FoodLogEntryOut(CamelModel):
    """A persisted food log entry, echoed as stored."""

    id: int
    user_id: int
    date: date
    meal_type: MealType
    food_name: str
    quantity: float
    unit: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fdc_id: str | None = None


class NutrientModel(CamelModel):
    """One nutrient of a search result."""

    nutrient_id: int
    nutrient_name: str
    nutrient_number: str
    unit_name: str
    value: float = Field(ge=0, allow_inf_nan=False)


class FoodSearchResultModel(CamelModel):
    """A unified search result; ``id`` keeps the ``fdcId`` wire name."""

    id: str = Field(alias="fdcId")
    description: str = Field(min_length=1)
    nutrients: list[NutrientModel] = Field(default_factory=list)
    source_tag: SourceTag
    food_group: str | None = None
    food_code: str | None = None
    brand_name: str | None = None
    data_type: str | None = None

    def to_domain(self) -> FoodSearchResult:
        """Convert to the domain result."""
        return FoodSearchResult(
            id=self.id,
            description=self.description,
            nutrients=tuple(
                NutrientValue(**nutrient.model_dump()) for nutrient in self.nutrients
            ),
            source_tag=self.source_tag,
            food_group=self.food_group,
            food_code=self.food_code,
            brand_name=self.brand_name,
            data_type=self.data_type,
        )


class SearchResponse(CamelModel):
    """Unified search answer."""

    results: list[FoodSearchResultModel]
    error: str | None = None


class ServingRequest(CamelModel):
    """Body for computing the nutrition of a serving."""

    food: FoodSearchResultModel
    quantity: float = Field(ge=0, allow_inf_nan=False)
    unit: str = "g"


class ServingModel(CamelModel):
    """Nutrition for one serving; micro-nutrients are omitted when absent."""

    quantity: float
    unit: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    calcium: float | None = None
    iron: float | None = None


class ServingResponse(CamelModel):
    """Precise values for storage plus the rounded display form."""

    precise: ServingModel
    display: ServingModel

    @classmethod
    def from_serving(cls, serving: ServingNutrition) -> "ServingResponse":
        """Build both forms from a computed serving."""
        return cls(
            precise=ServingModel.from_domain(serving),
            display=ServingModel.from_domain(serving.rounded()),
        )


class LogFromResultIn(CamelModel):
    """Body for logging a selected search result."""

    user_id: int
    date: date
    meal_type: MealType
    quantity: float = Field(gt=0, allow_inf_nan=False)
    unit: str = Field(default="g", min_length=1)
    food: FoodSearchResultModel


class UserGoalIn(CamelModel):
    """Body for creating user goals."""

    user_id: int
    calorie_goal: float | None = Field(default=None, gt=0)
    protein_goal: float | None = Field(default=None, gt=0)
    carbs_goal: float | None = Field(default=None, gt=0)
    fat_goal: float | None = Field(default=None, gt=0)


class UserGoalPatch(CamelModel):
    """Partial update of user goals."""

    calorie_goal: float | None = Field(default=None, gt=0)
    protein_goal: float | None = Field(default=None, gt=0)
    carbs_goal: float | None = Field(default=None, gt=0)
    fat_goal: float | None = Field(default=None, gt=0)


class UserGoalOut(CamelModel):
    """Stored user goals."""

    id: int
    user_id: int
    calorie_goal: float
    protein_goal: float
    carbs_goal: float
    fat_goal: float


class FoodNutritionFields(CamelModel):
    """Per-100 g nutrition shared by curated and custom foods."""

    food_name: str = Field(min_length=1)
    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    calcium: float | None = Field(default=None, ge=0)
    iron: float | None = Field(default=None, ge=0)
    food_group: str | None = None


class CuratedFoodIn(FoodNutritionFields):
    """Body for a curated food."""

    food_code: str | None = None


class StoredFoodFields(CamelModel):
    """Nutrition fields of a stored food, echoed without input limits."""

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


class CuratedFoodOut(StoredFoodFields):
    """A stored curated food."""

    food_code: str | None = None


class CustomFoodIn(FoodNutritionFields):
    """Body for a custom food."""

    user_id: int


class CustomFoodOut(StoredFoodFields):
    """A stored custom food."""

    user_id: int


class WaterIntakeIn(CamelModel):
    """Body for setting a day's water intake."""

    user_id: int
    date: date
    amount: float = Field(ge=0)
    goal: float | None = Field(default=None, gt=0)


class WaterIntakePatch(CamelModel):
    """Partial override of a water intake record."""

    amount: float | None = Field(default=None, ge=0)
    goal: float | None = Field(default=None, gt=0)


class WaterIntakeOut(CamelModel):
    """A water intake record; ``id`` is null for the unsaved default."""

    id: int | None = None
    user_id: int
    date: date
    amount: float
    goal: float
