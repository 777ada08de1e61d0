"""User goal endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from diet_tracker.api.schemas import UserGoalIn, UserGoalOut, UserGoalPatch

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/user-goals", tags=["user-goals"])


@router.get("/{user_id}", response_model=UserGoalOut)
def get_user_goals(user_id: int, request: Request) -> UserGoalOut:
    """Return a user's goals, creating the defaults on first access."""
    container: AppContainer = request.app.state.container
    return UserGoalOut.from_domain(container.goals_service.get_or_create(user_id))


@router.post("", response_model=UserGoalOut, status_code=status.HTTP_201_CREATED)
def create_user_goals(body: UserGoalIn, request: Request) -> UserGoalOut:
    """Create goals for a user."""
    container: AppContainer = request.app.state.container
    goals = body.model_dump(exclude={"user_id"}, exclude_none=True)
    return UserGoalOut.from_domain(container.goals_service.create(body.user_id, goals))


@router.patch("/{user_id}", response_model=UserGoalOut)
def update_user_goals(
    user_id: int, body: UserGoalPatch, request: Request
) -> UserGoalOut:
    """Merge the sent targets into the user's goals."""
    container: AppContainer = request.app.state.container
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return UserGoalOut.from_domain(container.goals_service.update(user_id, changes))
