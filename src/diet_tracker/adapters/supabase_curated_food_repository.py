"""Supabase repository for the curated Indian foods table."""

from dataclasses import dataclass

from supabase import Client

from diet_tracker.domain.foods import CuratedFood
from diet_tracker.services.foods import CuratedFoodRepository


@dataclass
class SupabaseCuratedFoodRepository(CuratedFoodRepository):
    """Supabase-backed repository for curated foods."""

    client: Client

    def list_foods(self) -> list[CuratedFood]:
        """Return every curated food."""
        response = self.client.table("indian_foods").select("*").execute()
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: int) -> CuratedFood | None:
        """Return a curated food by id, if present."""
        response = (
            self.client.table("indian_foods")
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def search_foods(self, query: str, limit: int) -> list[CuratedFood]:
        """Search foods by name."""
        response = (
            self.client.table("indian_foods")
            .select("*")
            .ilike("food_name", f"%{query}%")
            .limit(limit)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def create_food(self, payload: dict[str, object]) -> CuratedFood:
        """Create a curated food and return it."""
        response = self.client.table("indian_foods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create Indian food")
        return _parse_food(response.data[0])

    def create_foods(self, payloads: list[dict[str, object]]) -> list[CuratedFood]:
        """Insert all rows in a single statement, so the batch is atomic."""
        response = self.client.table("indian_foods").insert(payloads).execute()
        if len(response.data or []) != len(payloads):
            raise RuntimeError("Failed to create Indian foods batch")
        return [_parse_food(row) for row in response.data]


def _parse_food(row: dict[str, object]) -> CuratedFood:
    """Parse a curated food row into a domain model."""
    return CuratedFood(
        id=int(row["id"]),
        food_name=row.get("food_name"),
        calories=row.get("calories"),
        protein=row.get("protein"),
        carbs=row.get("carbs"),
        fat=row.get("fat"),
        fiber=row.get("fiber"),
        calcium=row.get("calcium"),
        iron=row.get("iron"),
        food_group=row.get("food_group"),
        food_code=row.get("food_code"),
    )
