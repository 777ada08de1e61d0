"""USDA proxy, unified food search and serving calculation endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from diet_tracker.api.schemas import (
    FoodSearchResultModel,
    SearchResponse,
    ServingRequest,
    ServingResponse,
)
from diet_tracker.errors import ValidationError
from diet_tracker.services.calculator import compute_serving
from diet_tracker.services.search import SearchMode

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(tags=["nutrition"])


@router.get("/nutrition/search")
async def usda_search(request: Request, query: str | None = None) -> dict[str, object]:
    """Proxy a USDA FDC food search."""
    if not query:
        raise ValidationError("Query parameter is required")
    container: AppContainer = request.app.state.container
    return await container.nutrition_service.search(query)


@router.get("/nutrition/food/{fdc_id}")
async def usda_food(fdc_id: int, request: Request) -> dict[str, object]:
    """Proxy a USDA FDC food detail lookup."""
    container: AppContainer = request.app.state.container
    return await container.nutrition_service.get_food(fdc_id)


@router.post(
    "/nutrition/serving",
    response_model=ServingResponse,
    response_model_exclude_none=True,
)
def serving(body: ServingRequest) -> ServingResponse:
    """Compute the nutrition of a quantity of a search result."""
    computed = compute_serving(body.food.to_domain(), body.quantity, body.unit)
    return ServingResponse.from_serving(computed)


@router.get("/foods/search", response_model=SearchResponse)
async def search_foods(
    request: Request,
    query: str = "",
    mode: SearchMode = SearchMode.ALL,
    user_id: int | None = Query(default=None, alias="userId"),
) -> SearchResponse:
    """Search custom, curated and USDA foods in one call."""
    container: AppContainer = request.app.state.container
    outcome = await container.search_service.search(query, mode, user_id=user_id)
    return SearchResponse(
        results=[FoodSearchResultModel.from_domain(r) for r in outcome.results],
        error=outcome.error,
    )
