"""Domain models for water intake."""

from dataclasses import dataclass
from datetime import date

DEFAULT_WATER_GOAL = 2000.0


@dataclass(frozen=True)
class WaterIntakeRecord:
    """Cumulative water intake for one user on one day.

    ``id`` is ``None`` for the synthesized default that is never persisted.
    """

    id: int | None
    user_id: int
    date: date
    amount: float
    goal: float
