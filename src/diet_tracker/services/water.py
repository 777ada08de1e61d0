"""Water intake service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from diet_tracker.domain.water import DEFAULT_WATER_GOAL, WaterIntakeRecord
from diet_tracker.errors import NotFoundError, ValidationError


class WaterIntakeRepository(Protocol):
    """Persistence interface for water intake."""

    def get_intake(self, user_id: int, day: date) -> WaterIntakeRecord | None:
        """Return the record for a user and day, if present."""

    def get_intake_by_id(self, intake_id: int) -> WaterIntakeRecord | None:
        """Return a record by id, if present."""

    def upsert_intake(
        self, user_id: int, day: date, amount: float, goal: float
    ) -> WaterIntakeRecord:
        """Atomically insert or update the single record for (user, day)."""


@dataclass
class WaterIntakeService:
    """Service for daily water intake."""

    repository: WaterIntakeRepository
    default_goal: float = DEFAULT_WATER_GOAL

    def get_for_day(self, user_id: int, day: date) -> WaterIntakeRecord:
        """Return the day's record, or an unsaved zero-amount default."""
        existing = self.repository.get_intake(user_id, day)
        if existing:
            return existing
        return WaterIntakeRecord(
            id=None, user_id=user_id, date=day, amount=0.0, goal=self.default_goal
        )

    def upsert(
        self, user_id: int, day: date, amount: float, goal: float | None = None
    ) -> WaterIntakeRecord:
        """Set the day's amount and goal, creating the record when missing."""
        resolved_goal = self.default_goal if goal is None else goal
        if amount < 0:
            raise ValidationError("amount must not be negative")
        if resolved_goal <= 0:
            raise ValidationError("goal must be greater than 0")
        return self.repository.upsert_intake(user_id, day, amount, resolved_goal)

    def update(
        self,
        intake_id: int,
        amount: float | None = None,
        goal: float | None = None,
    ) -> WaterIntakeRecord:
        """Override amount and/or goal on an existing record."""
        existing = self.repository.get_intake_by_id(intake_id)
        if existing is None:
            raise NotFoundError("Water intake record not found")
        return self.upsert(
            existing.user_id,
            existing.date,
            existing.amount if amount is None else amount,
            existing.goal if goal is None else goal,
        )
