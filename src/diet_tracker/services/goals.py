"""User goal service."""

from dataclasses import dataclass
from typing import Protocol

from diet_tracker.domain.goals import DEFAULT_GOALS, UserGoal
from diet_tracker.errors import NotFoundError, ValidationError

_GOAL_FIELDS = ("calorie_goal", "protein_goal", "carbs_goal", "fat_goal")


class GoalsRepository(Protocol):
    """Persistence interface for user goals."""

    def get_goals(self, user_id: int) -> UserGoal | None:
        """Return the goals for a user, if present."""

    def create_goals(self, user_id: int, goals: dict[str, float]) -> UserGoal:
        """Create the goals row for a user."""

    def update_goals(self, goal_id: int, changes: dict[str, float]) -> UserGoal:
        """Apply changes to a goals row and return it."""


@dataclass
class GoalsService:
    """Service for calorie and macro goals."""

    repository: GoalsRepository

    def get_or_create(self, user_id: int) -> UserGoal:
        """Return the user's goals, creating the defaults on first read."""
        existing = self.repository.get_goals(user_id)
        if existing:
            return existing
        return self.repository.create_goals(user_id, dict(DEFAULT_GOALS))

    def create(self, user_id: int, goals: dict[str, float]) -> UserGoal:
        """Create goals for a user; unspecified targets take the defaults."""
        values = {**DEFAULT_GOALS, **_clean(goals)}
        return self.repository.create_goals(user_id, values)

    def update(self, user_id: int, changes: dict[str, float]) -> UserGoal:
        """Merge the given targets into the user's existing goals."""
        existing = self.repository.get_goals(user_id)
        if existing is None:
            raise NotFoundError("User goals not found")
        cleaned = _clean(changes)
        if not cleaned:
            return existing
        return self.repository.update_goals(existing.id, cleaned)


def _clean(goals: dict[str, float]) -> dict[str, float]:
    cleaned: dict[str, float] = {}
    for key, value in goals.items():
        if key not in _GOAL_FIELDS or value is None:
            continue
        if value <= 0:
            raise ValidationError(f"{key} must be greater than 0")
        cleaned[key] = float(value)
    return cleaned
