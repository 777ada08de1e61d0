"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.fdc_client import HttpxFdcClient
from diet_tracker.adapters.supabase_curated_food_repository import (
    SupabaseCuratedFoodRepository,
)
from diet_tracker.adapters.supabase_custom_food_repository import (
    SupabaseCustomFoodRepository,
)
from diet_tracker.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from diet_tracker.adapters.supabase_goals_repository import SupabaseGoalsRepository
from diet_tracker.adapters.supabase_water_intake_repository import (
    SupabaseWaterIntakeRepository,
)
from diet_tracker.config import Settings
from diet_tracker.services.food_log import FoodLogService
from diet_tracker.services.foods import CuratedFoodService, CustomFoodService
from diet_tracker.services.goals import GoalsService
from diet_tracker.services.nutrition import NutritionService
from diet_tracker.services.search import SearchService
from diet_tracker.services.sources import CuratedSource, CustomSource, UsdaSource
from diet_tracker.services.water import WaterIntakeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService
    search_service: SearchService
    food_log_service: FoodLogService
    goals_service: GoalsService
    curated_food_service: CuratedFoodService
    custom_food_service: CustomFoodService
    water_intake_service: WaterIntakeService
    close_resources: Callable[[], Awaitable[None]]


def build_search_service(
    nutrition_service: NutritionService,
    curated_food_service: CuratedFoodService,
    custom_food_service: CustomFoodService,
) -> SearchService:
    """Wire the three source adapters into a search service."""
    return SearchService(
        custom_source=CustomSource(custom_food_service),
        curated_source=CuratedSource(curated_food_service),
        usda_source=UsdaSource(nutrition_service),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.usda_api_key,
        base_url=resolved_settings.usda_base_url,
        timeout_seconds=resolved_settings.usda_timeout_seconds,
    )
    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        page_size=resolved_settings.usda_page_size,
    )
    curated_food_service = CuratedFoodService(
        SupabaseCuratedFoodRepository(supabase_client)
    )
    custom_food_service = CustomFoodService(
        SupabaseCustomFoodRepository(supabase_client)
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        search_service=build_search_service(
            nutrition_service, curated_food_service, custom_food_service
        ),
        food_log_service=FoodLogService(SupabaseFoodLogRepository(supabase_client)),
        goals_service=GoalsService(SupabaseGoalsRepository(supabase_client)),
        curated_food_service=curated_food_service,
        custom_food_service=custom_food_service,
        water_intake_service=WaterIntakeService(
            SupabaseWaterIntakeRepository(supabase_client)
        ),
        close_resources=close_resources,
    )
