"""Supabase repository for water intake."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from diet_tracker.domain.water import WaterIntakeRecord
from diet_tracker.services.water import WaterIntakeRepository


@dataclass
class SupabaseWaterIntakeRepository(WaterIntakeRepository):
    """Supabase implementation for water intake.

    The ``water_intake`` table carries a unique constraint on
    ``(user_id, date)``; writes go through ``INSERT ... ON CONFLICT DO UPDATE``
    so concurrent writers for the same day converge on one row.
    """

    client: Client

    def get_intake(self, user_id: int, day: date) -> WaterIntakeRecord | None:
        """Return the record for a user and day, if present."""
        response = (
            self.client.table("water_intake")
            .select("*")
            .eq("user_id", user_id)
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_intake(response.data[0])

    def get_intake_by_id(self, intake_id: int) -> WaterIntakeRecord | None:
        """Return a record by id, if present."""
        response = (
            self.client.table("water_intake")
            .select("*")
            .eq("id", intake_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_intake(response.data[0])

    def upsert_intake(
        self, user_id: int, day: date, amount: float, goal: float
    ) -> WaterIntakeRecord:
        """Insert or update the (user, day) row in one statement."""
        response = (
            self.client.table("water_intake")
            .upsert(
                {
                    "user_id": user_id,
                    "date": day.isoformat(),
                    "amount": amount,
                    "goal": goal,
                },
                on_conflict="user_id,date",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save water intake")
        return _parse_intake(response.data[0])


def _parse_intake(row: dict[str, object]) -> WaterIntakeRecord:
    return WaterIntakeRecord(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        date=date.fromisoformat(str(row["date"])),
        amount=float(row.get("amount", 0.0)),
        goal=float(row.get("goal", 0.0)),
    )
