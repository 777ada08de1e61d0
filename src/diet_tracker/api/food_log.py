"""Food log endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, Response, status

from diet_tracker.api.schemas import FoodLogEntryIn, FoodLogEntryOut, LogFromResultIn
from diet_tracker.domain.food_log import MealType  # noqa: TC001

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/food-items", tags=["food-items"])


@router.get("", response_model=list[FoodLogEntryOut])
def list_food_items(
    request: Request,
    date: date,
    user_id: int = Query(alias="userId"),
) -> list[FoodLogEntryOut]:
    """Return a user's logged foods for a day."""
    container: AppContainer = request.app.state.container
    entries = container.food_log_service.list_for_day(user_id, date)
    return [FoodLogEntryOut.from_domain(entry) for entry in entries]


@router.get("/meal", response_model=list[FoodLogEntryOut])
def list_meal_items(
    request: Request,
    date: date,
    user_id: int = Query(alias="userId"),
    meal_type: MealType = Query(alias="mealType"),
) -> list[FoodLogEntryOut]:
    """Return a user's logged foods for one meal of a day."""
    container: AppContainer = request.app.state.container
    entries = container.food_log_service.list_for_meal(user_id, date, meal_type)
    return [FoodLogEntryOut.from_domain(entry) for entry in entries]


@router.post(
    "", response_model=FoodLogEntryOut, status_code=status.HTTP_201_CREATED
)
def create_food_item(body: FoodLogEntryIn, request: Request) -> FoodLogEntryOut:
    """Log a food with client-computed nutrition."""
    container: AppContainer = request.app.state.container
    entry = container.food_log_service.create_entry(body.to_domain())
    return FoodLogEntryOut.from_domain(entry)


@router.post(
    "/from-result",
    response_model=FoodLogEntryOut,
    status_code=status.HTTP_201_CREATED,
)
def log_search_result(body: LogFromResultIn, request: Request) -> FoodLogEntryOut:
    """Log a selected search result; nutrition is computed server-side."""
    container: AppContainer = request.app.state.container
    entry = container.food_log_service.log_selection(
        user_id=body.user_id,
        day=body.date,
        meal_type=body.meal_type,
        food=body.food.to_domain(),
        quantity=body.quantity,
        unit=body.unit,
    )
    return FoodLogEntryOut.from_domain(entry)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_food_item(item_id: int, request: Request) -> Response:
    """Hard-delete a logged food."""
    container: AppContainer = request.app.state.container
    container.food_log_service.delete_entry(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
