"""Food log service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from diet_tracker.domain.food_log import FoodLogEntry, MealType, NewFoodLogEntry
from diet_tracker.domain.foods import FoodSearchResult
from diet_tracker.errors import NotFoundError, ValidationError
from diet_tracker.services.calculator import compute_serving

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for logged foods."""

    def list_entries(self, user_id: int, day: date) -> list[FoodLogEntry]:
        """Return all entries for a user on a day."""

    def list_entries_for_meal(
        self, user_id: int, day: date, meal_type: MealType
    ) -> list[FoodLogEntry]:
        """Return the entries for one meal slot."""

    def create_entry(self, entry: NewFoodLogEntry) -> FoodLogEntry:
        """Persist an entry and return it with its id."""

    def delete_entry(self, entry_id: int) -> bool:
        """Delete an entry; return False when it did not exist."""


@dataclass
class FoodLogService:
    """Application service for the daily food log."""

    repository: FoodLogRepository

    def list_for_day(self, user_id: int, day: date) -> list[FoodLogEntry]:
        """Return a user's entries for a day."""
        return self.repository.list_entries(user_id, day)

    def list_for_meal(
        self, user_id: int, day: date, meal_type: MealType
    ) -> list[FoodLogEntry]:
        """Return a user's entries for one meal of a day."""
        return self.repository.list_entries_for_meal(user_id, day, meal_type)

    def create_entry(self, entry: NewFoodLogEntry) -> FoodLogEntry:
        """Validate and persist an entry."""
        _validate_entry(entry)
        return self.repository.create_entry(entry)

    def log_selection(  # noqa: PLR0913
        self,
        *,
        user_id: int,
        day: date,
        meal_type: MealType,
        food: FoodSearchResult,
        quantity: float,
        unit: str,
    ) -> FoodLogEntry:
        """Compute nutrition for a selected search result and log it."""
        serving = compute_serving(food, quantity, unit)
        entry = NewFoodLogEntry(
            user_id=user_id,
            date=day,
            meal_type=meal_type,
            food_name=food.description,
            quantity=quantity,
            unit=unit,
            calories=serving.calories,
            protein=serving.protein,
            carbs=serving.carbs,
            fat=serving.fat,
            fdc_id=food.id,
        )
        created = self.create_entry(entry)
        _logger.info(
            "Logged food: user_id=%s source=%s meal=%s",
            user_id,
            food.source_tag.value,
            meal_type.value,
        )
        return created

    def delete_entry(self, entry_id: int) -> None:
        """Hard-delete an entry or raise NotFoundError."""
        if not self.repository.delete_entry(entry_id):
            raise NotFoundError("Food item not found")


def _validate_entry(entry: NewFoodLogEntry) -> None:
    if not entry.food_name or not entry.food_name.strip():
        raise ValidationError("foodName is required")
    if not entry.unit:
        raise ValidationError("unit is required")
    if entry.quantity <= 0:
        raise ValidationError("quantity must be greater than 0")
    for field_name in ("calories", "protein", "carbs", "fat"):
        if getattr(entry, field_name) < 0:
            raise ValidationError(f"{field_name} must not be negative")
