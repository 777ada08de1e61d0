"""Curated (Indian) food and custom food endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, Response, status

from diet_tracker.api.schemas import (
    CuratedFoodIn,
    CuratedFoodOut,
    CustomFoodIn,
    CustomFoodOut,
)

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

curated_router = APIRouter(prefix="/indian-foods", tags=["indian-foods"])
custom_router = APIRouter(prefix="/custom-foods", tags=["custom-foods"])


@curated_router.get("", response_model=list[CuratedFoodOut])
def list_curated_foods(request: Request) -> list[CuratedFoodOut]:
    """Return every curated food."""
    container: AppContainer = request.app.state.container
    foods = container.curated_food_service.list_foods()
    return [CuratedFoodOut.from_domain(food) for food in foods]


@curated_router.get("/search", response_model=list[CuratedFoodOut])
def search_curated_foods(
    request: Request, query: str | None = None
) -> list[CuratedFoodOut]:
    """Case-insensitive name search, at most 20 foods."""
    container: AppContainer = request.app.state.container
    foods = container.curated_food_service.search(query or "")
    return [CuratedFoodOut.from_domain(food) for food in foods]


@curated_router.get("/{food_id}", response_model=CuratedFoodOut)
def get_curated_food(food_id: int, request: Request) -> CuratedFoodOut:
    """Return one curated food."""
    container: AppContainer = request.app.state.container
    return CuratedFoodOut.from_domain(container.curated_food_service.get_food(food_id))


@curated_router.post(
    "", response_model=CuratedFoodOut, status_code=status.HTTP_201_CREATED
)
def create_curated_food(body: CuratedFoodIn, request: Request) -> CuratedFoodOut:
    """Add a curated food."""
    container: AppContainer = request.app.state.container
    food = container.curated_food_service.create_food(body.model_dump())
    return CuratedFoodOut.from_domain(food)


@curated_router.post(
    "/batch",
    response_model=list[CuratedFoodOut],
    status_code=status.HTTP_201_CREATED,
)
def create_curated_batch(
    body: list[CuratedFoodIn], request: Request
) -> list[CuratedFoodOut]:
    """Add several curated foods; one invalid element rejects the whole batch."""
    container: AppContainer = request.app.state.container
    foods = container.curated_food_service.create_many(
        [food.model_dump() for food in body]
    )
    return [CuratedFoodOut.from_domain(food) for food in foods]


@custom_router.get("", response_model=list[CustomFoodOut])
def list_custom_foods(
    request: Request, user_id: int = Query(alias="userId")
) -> list[CustomFoodOut]:
    """Return a user's custom foods ordered by name."""
    container: AppContainer = request.app.state.container
    foods = container.custom_food_service.list_foods(user_id)
    return [CustomFoodOut.from_domain(food) for food in foods]


@custom_router.get("/search", response_model=list[CustomFoodOut])
def search_custom_foods(
    request: Request,
    user_id: int = Query(alias="userId"),
    query: str | None = None,
) -> list[CustomFoodOut]:
    """Case-insensitive name search within a user's foods, at most 20."""
    container: AppContainer = request.app.state.container
    foods = container.custom_food_service.search(user_id, query or "")
    return [CustomFoodOut.from_domain(food) for food in foods]


@custom_router.get("/{food_id}", response_model=CustomFoodOut)
def get_custom_food(food_id: int, request: Request) -> CustomFoodOut:
    """Return one custom food."""
    container: AppContainer = request.app.state.container
    return CustomFoodOut.from_domain(container.custom_food_service.get_food(food_id))


@custom_router.post(
    "", response_model=CustomFoodOut, status_code=status.HTTP_201_CREATED
)
def create_custom_food(body: CustomFoodIn, request: Request) -> CustomFoodOut:
    """Add a custom food for a user."""
    container: AppContainer = request.app.state.container
    food = container.custom_food_service.create_food(body.model_dump())
    return CustomFoodOut.from_domain(food)


@custom_router.delete("/{food_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_custom_food(food_id: int, request: Request) -> Response:
    """Delete a custom food."""
    container: AppContainer = request.app.state.container
    container.custom_food_service.delete_food(food_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
