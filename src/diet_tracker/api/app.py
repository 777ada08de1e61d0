"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from diet_tracker.api.food_log import router as food_log_router
from diet_tracker.api.foods import curated_router, custom_router
from diet_tracker.api.goals import router as goals_router
from diet_tracker.api.nutrition import router as nutrition_router
from diet_tracker.api.water import router as water_router
from diet_tracker.app_logging import configure_logging
from diet_tracker.containers import AppContainer
from diet_tracker.errors import DietTrackerError, InternalError

API_PREFIX = "/api"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    for router in (
        food_log_router,
        goals_router,
        nutrition_router,
        curated_router,
        custom_router,
        water_router,
    ):
        app.include_router(router, prefix=API_PREFIX)

    @app.exception_handler(DietTrackerError)
    async def handle_domain_error(
        request: Request, exc: DietTrackerError
    ) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.message
            )
        return JSONResponse(
            status_code=exc.status_code, content={"message": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": format_validation_errors(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("%s %s failed", request.method, request.url.path)
        error = InternalError()
        return JSONResponse(
            status_code=error.status_code, content={"message": error.message}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def format_validation_errors(errors: list[dict[str, object]]) -> str:
    """Render pydantic errors as one readable message."""
    parts: list[str] = []
    for error in errors:
        location = [
            str(part)
            for part in error.get("loc", ())
            if part not in {"body", "query", "path"}
        ]
        message = str(error.get("msg", "Invalid value"))
        parts.append(f"{'.'.join(location)}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"
