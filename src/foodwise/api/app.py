"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from foodwise.api.schemas import (
    FoodOut,
    LocationOut,
    NutritionGoalsOut,
    ProfileIn,
    RecommendationRequest,
    RecommendationResponse,
)
from foodwise.app_logging import configure_logging
from foodwise.containers import AppContainer
from foodwise.errors import CatalogError, ValidationError
from foodwise.services.foods import group_by_primary_benefit


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="FoodWise", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ValidationError)
    async def profile_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("Rejected profile: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "field": exc.field},
        )

    @app.exception_handler(CatalogError)
    async def catalog_error(request: Request, exc: CatalogError) -> JSONResponse:
        logger.error("Catalog error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/nutrition-goals")
    async def nutrition_goals(profile: ProfileIn, request: Request) -> NutritionGoalsOut:
        """Return daily calorie and macro targets."""
        state_container: AppContainer = request.app.state.container
        goals = state_container.engine.compute_nutrition_goals(profile.to_domain())
        return NutritionGoalsOut.from_domain(goals)

    @app.post("/recommendations")
    async def recommendations(
        body: RecommendationRequest, request: Request
    ) -> RecommendationResponse:
        """Return goals, ranked foods and nearby locations with top dishes."""
        state_container: AppContainer = request.app.state.container
        origin = body.coordinates.to_domain() if body.coordinates else None
        profile = body.profile.to_domain()
        report = await state_container.engine.recommend_nearby(
            profile,
            state_container.location_service,
            origin,
        )
        return RecommendationResponse(
            nutrition_goals=NutritionGoalsOut.from_domain(report.nutrition_goals),
            foods=[FoodOut.from_domain(food, profile) for food in report.foods],
            food_groups={
                category: [item.food.name for item in items]
                for category, items in group_by_primary_benefit(report.foods).items()
            },
            locations=[
                LocationOut.from_domain(
                    item.location, item.top_dishes, item.suggested_dishes, origin
                )
                for item in report.locations
            ],
            live_locations=report.live_locations,
        )

    return app
