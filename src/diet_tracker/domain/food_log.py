"""Domain models for the daily food log."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class MealType(Enum):
    """Meal slot a logged food belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class NewFoodLogEntry:
    """A food log entry that has not been persisted yet."""

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


@dataclass(frozen=True)
class FoodLogEntry:
    """A persisted food log entry."""

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
