"""Supabase repository for user custom foods."""

from dataclasses import dataclass

from supabase import Client

from diet_tracker.domain.foods import CustomFood
from diet_tracker.services.foods import CustomFoodRepository


@dataclass
class SupabaseCustomFoodRepository(CustomFoodRepository):
    """Supabase-backed repository for custom foods."""

    client: Client

    def list_foods(self, user_id: int) -> list[CustomFood]:
        """Return a user's custom foods ordered by name."""
        response = (
            self.client.table("custom_foods")
            .select("*")
            .eq("user_id", user_id)
            .order("food_name")
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: int) -> CustomFood | None:
        """Return a custom food by id, if present."""
        response = (
            self.client.table("custom_foods")
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def search_foods(self, user_id: int, query: str, limit: int) -> list[CustomFood]:
        """Search one user's foods by name."""
        response = (
            self.client.table("custom_foods")
            .select("*")
            .eq("user_id", user_id)
            .ilike("food_name", f"%{query}%")
            .limit(limit)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def create_food(self, payload: dict[str, object]) -> CustomFood:
        """Create a custom food and return it."""
        response = self.client.table("custom_foods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create custom food")
        return _parse_food(response.data[0])

    def delete_food(self, food_id: int) -> bool:
        """Delete a custom food by id."""
        response = (
            self.client.table("custom_foods").delete().eq("id", food_id).execute()
        )
        return bool(response.data)


def _parse_food(row: dict[str, object]) -> CustomFood:
    return CustomFood(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        food_name=row.get("food_name"),
        calories=row.get("calories"),
        protein=row.get("protein"),
        carbs=row.get("carbs"),
        fat=row.get("fat"),
        fiber=row.get("fiber"),
        calcium=row.get("calcium"),
        iron=row.get("iron"),
        food_group=row.get("food_group"),
    )
