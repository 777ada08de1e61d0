"""Water intake endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, status

from diet_tracker.api.schemas import WaterIntakeIn, WaterIntakeOut, WaterIntakePatch

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/water-intake", tags=["water-intake"])


@router.get("", response_model=WaterIntakeOut)
def get_water_intake(
    request: Request, date: date, user_id: int = Query(alias="userId")
) -> WaterIntakeOut:
    """Return the day's intake or an unsaved zero-amount default."""
    container: AppContainer = request.app.state.container
    record = container.water_intake_service.get_for_day(user_id, date)
    return WaterIntakeOut.from_domain(record)


@router.post("", response_model=WaterIntakeOut, status_code=status.HTTP_201_CREATED)
def upsert_water_intake(body: WaterIntakeIn, request: Request) -> WaterIntakeOut:
    """Set the day's intake, creating or updating the single daily record."""
    container: AppContainer = request.app.state.container
    record = container.water_intake_service.upsert(
        body.user_id, body.date, body.amount, body.goal
    )
    return WaterIntakeOut.from_domain(record)


@router.patch("/{intake_id}", response_model=WaterIntakeOut)
def update_water_intake(
    intake_id: int, body: WaterIntakePatch, request: Request
) -> WaterIntakeOut:
    """Override amount and/or goal on an existing record."""
    container: AppContainer = request.app.state.container
    record = container.water_intake_service.update(
        intake_id, amount=body.amount, goal=body.goal
    )
    return WaterIntakeOut.from_domain(record)
