"""Supabase repository for the food log."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from diet_tracker.domain.food_log import FoodLogEntry, MealType, NewFoodLogEntry
from diet_tracker.services.food_log import FoodLogRepository


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for logged foods."""

    client: Client

    def list_entries(self, user_id: int, day: date) -> list[FoodLogEntry]:
        """Return all entries for a user on a day."""
        response = (
            self.client.table("food_items")
            .select("*")
            .eq("user_id", user_id)
            .eq("date", day.isoformat())
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def list_entries_for_meal(
        self, user_id: int, day: date, meal_type: MealType
    ) -> list[FoodLogEntry]:
        """Return the entries for one meal slot."""
        response = (
            self.client.table("food_items")
            .select("*")
            .eq("user_id", user_id)
            .eq("date", day.isoformat())
            .eq("meal_type", meal_type.value)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def create_entry(self, entry: NewFoodLogEntry) -> FoodLogEntry:
        """Insert an entry row and return it."""
        response = (
            self.client.table("food_items")
            .insert(
                {
                    "user_id": entry.user_id,
                    "date": entry.date.isoformat(),
                    "meal_type": entry.meal_type.value,
                    "food_name": entry.food_name,
                    "quantity": entry.quantity,
                    "unit": entry.unit,
                    "calories": entry.calories,
                    "protein": entry.protein,
                    "carbs": entry.carbs,
                    "fat": entry.fat,
                    "fdc_id": entry.fdc_id or None,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: int) -> bool:
        """Delete an entry row by id."""
        response = self.client.table("food_items").delete().eq("id", entry_id).execute()
        return bool(response.data)


def _parse_entry(row: dict[str, object]) -> FoodLogEntry:
    return FoodLogEntry(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        date=date.fromisoformat(str(row["date"])),
        meal_type=MealType(row["meal_type"]),
        food_name=str(row.get("food_name", "")),
        quantity=float(row.get("quantity", 0.0)),
        unit=str(row.get("unit", "")),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        fdc_id=row.get("fdc_id"),
    )
