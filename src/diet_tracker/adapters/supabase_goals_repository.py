"""Supabase repository for user goals."""

from dataclasses import dataclass

from supabase import Client

from diet_tracker.domain.goals import UserGoal
from diet_tracker.services.goals import GoalsRepository


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Supabase implementation for user goals."""

    client: Client

    def get_goals(self, user_id: int) -> UserGoal | None:
        """Return the goals row for a user, if present."""
        response = (
            self.client.table("user_goals")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])

    def create_goals(self, user_id: int, goals: dict[str, float]) -> UserGoal:
        """Insert a goals row and return it."""
        response = (
            self.client.table("user_goals")
            .insert({"user_id": user_id, **goals})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user goals")
        return _parse_goal(response.data[0])

    def update_goals(self, goal_id: int, changes: dict[str, float]) -> UserGoal:
        """Update a goals row and return it."""
        response = (
            self.client.table("user_goals").update(changes).eq("id", goal_id).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user goals")
        return _parse_goal(response.data[0])


def _parse_goal(row: dict[str, object]) -> UserGoal:
    return UserGoal(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        calorie_goal=float(row.get("calorie_goal", 0.0)),
        protein_goal=float(row.get("protein_goal", 0.0)),
        carbs_goal=float(row.get("carbs_goal", 0.0)),
        fat_goal=float(row.get("fat_goal", 0.0)),
    )
