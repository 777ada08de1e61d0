"""Domain models for nutrition goals."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserGoal:
    """Daily calorie and macro targets for a user."""

    id: int
    user_id: int
    calorie_goal: float
    protein_goal: float
    carbs_goal: float
    fat_goal: float


DEFAULT_GOALS: dict[str, float] = {
    "calorie_goal": 2000,
    "protein_goal": 120,
    "carbs_goal": 250,
    "fat_goal": 65,
}
