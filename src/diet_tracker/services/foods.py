"""Services for the curated food table and user custom foods."""

from dataclasses import dataclass
from typing import Protocol

from diet_tracker.domain.foods import CuratedFood, CustomFood
from diet_tracker.errors import NotFoundError, ValidationError

SEARCH_LIMIT = 20


class CuratedFoodRepository(Protocol):
    """Persistence interface for the curated food table."""

    def list_foods(self) -> list[CuratedFood]:
        """Return every curated food."""

    def get_food(self, food_id: int) -> CuratedFood | None:
        """Return a curated food by id, if present."""

    def search_foods(self, query: str, limit: int) -> list[CuratedFood]:
        """Case-insensitive substring search on the food name."""

    def create_food(self, payload: dict[str, object]) -> CuratedFood:
        """Create a curated food and return it."""

    def create_foods(self, payloads: list[dict[str, object]]) -> list[CuratedFood]:
        """Create several curated foods in one all-or-nothing write."""


class CustomFoodRepository(Protocol):
    """Persistence interface for user custom foods."""

    def list_foods(self, user_id: int) -> list[CustomFood]:
        """Return a user's custom foods ordered by name."""

    def get_food(self, food_id: int) -> CustomFood | None:
        """Return a custom food by id, if present."""

    def search_foods(self, user_id: int, query: str, limit: int) -> list[CustomFood]:
        """Case-insensitive substring search within one user's foods."""

    def create_food(self, payload: dict[str, object]) -> CustomFood:
        """Create a custom food and return it."""

    def delete_food(self, food_id: int) -> bool:
        """Delete a custom food; return False when it did not exist."""


@dataclass
class CuratedFoodService:
    """Application service for the curated food table."""

    repository: CuratedFoodRepository
    search_limit: int = SEARCH_LIMIT

    def list_foods(self) -> list[CuratedFood]:
        """Return every curated food."""
        return self.repository.list_foods()

    def get_food(self, food_id: int) -> CuratedFood:
        """Return a curated food or raise NotFoundError."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFoundError("Indian food not found")
        return food

    def search(self, query: str) -> list[CuratedFood]:
        """Search curated foods by name."""
        cleaned = _require_query(query)
        return self.repository.search_foods(cleaned, self.search_limit)

    def create_food(self, payload: dict[str, object]) -> CuratedFood:
        """Create a curated food."""
        _require_name(payload)
        return self.repository.create_food(payload)

    def create_many(self, payloads: list[dict[str, object]]) -> list[CuratedFood]:
        """Create a batch of curated foods; nothing is written if any is invalid."""
        for index, payload in enumerate(payloads):
            _require_name(payload, position=index)
        if not payloads:
            return []
        return self.repository.create_foods(payloads)


@dataclass
class CustomFoodService:
    """Application service for user-defined foods."""

    repository: CustomFoodRepository
    search_limit: int = SEARCH_LIMIT

    def list_foods(self, user_id: int) -> list[CustomFood]:
        """Return a user's custom foods."""
        return self.repository.list_foods(user_id)

    def get_food(self, food_id: int) -> CustomFood:
        """Return a custom food or raise NotFoundError."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFoundError("Custom food not found")
        return food

    def search(self, user_id: int, query: str) -> list[CustomFood]:
        """Search one user's custom foods by name."""
        cleaned = _require_query(query)
        return self.repository.search_foods(user_id, cleaned, self.search_limit)

    def create_food(self, payload: dict[str, object]) -> CustomFood:
        """Create a custom food owned by ``payload["user_id"]``."""
        _require_name(payload)
        if payload.get("user_id") is None:
            raise ValidationError("userId is required")
        return self.repository.create_food(payload)

    def delete_food(self, food_id: int) -> None:
        """Delete a custom food or raise NotFoundError."""
        if not self.repository.delete_food(food_id):
            raise NotFoundError("Custom food not found")


def _require_query(query: str | None) -> str:
    cleaned = (query or "").strip()
    if not cleaned:
        raise ValidationError("Query parameter is required")
    return cleaned


def _require_name(payload: dict[str, object], position: int | None = None) -> None:
    name = payload.get("food_name")
    if isinstance(name, str) and name.strip():
        return
    if position is None:
        raise ValidationError("foodName is required")
    raise ValidationError(f"Item {position}: foodName is required")
