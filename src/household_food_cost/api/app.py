"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from household_food_cost.api.models import (
    AdjustmentRequest,
    HouseholdConfigPayload,
    HouseholdEstimateRequest,
    QuickEstimateRequest,
)
from household_food_cost.app_logging import configure_logging
from household_food_cost.containers import AppContainer
from household_food_cost.errors import NotFoundError, ValidationError
from household_food_cost.services.adjustment import region_key_for_zip
from household_food_cost.services.household import default_leftovers


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.info("Rejected request %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "fields": exc.fields},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/profiles")
    async def list_profiles(request: Request) -> dict[str, object]:
        """Return the archetype catalog with descriptions and display groups."""
        state_container: AppContainer = request.app.state.container
        store = state_container.profile_store
        return {
            "profiles": [
                {"id": archetype_id, "description": store.describe(archetype_id)}
                for archetype_id in store.ids()
            ],
            "groups": [
                {"id": group_id, "label": label, "profiles": list(members)}
                for group_id, (label, members) in store.groups.items()
            ],
        }

    @app.get("/profiles/{archetype_id}")
    async def profile_detail(archetype_id: str, request: Request) -> dict[str, object]:
        """Return a single archetype profile."""
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.profile_store.lookup(archetype_id))

    @app.post("/households/compose")
    async def compose_household(
        payload: HouseholdConfigPayload, request: Request
    ) -> dict[str, object]:
        """Generate default people for adult and child counts."""
        state_container: AppContainer = request.app.state.container
        config = payload.to_config()
        people = state_container.estimation_service.compose(config)
        return {
            "people": [asdict(person) for person in people],
            "default_leftovers": default_leftovers(config),
        }

    @app.post("/estimates/household")
    async def household_estimate(
        payload: HouseholdEstimateRequest, request: Request
    ) -> dict[str, object]:
        """Return household totals, per-person breakdown and waste."""
        state_container: AppContainer = request.app.state.container
        service = state_container.estimation_service
        if payload.people is not None:
            people = [person.to_person() for person in payload.people]
        else:
            config = (payload.household or HouseholdConfigPayload()).to_config()
            people = service.compose(config)
        result = service.household(
            people,
            payload.unit_system,
            payload.zip_code,
            payload.preferences.to_preferences(),
            payload.leftovers_wasted,
        )
        return asdict(result)

    @app.post("/estimates/quick")
    async def quick_estimate(
        payload: QuickEstimateRequest, request: Request
    ) -> dict[str, object]:
        """Return a single-person calorie need and cost estimate."""
        state_container: AppContainer = request.app.state.container
        calories, estimate = state_container.estimation_service.quick(
            payload.person.to_person(),
            payload.unit_system,
            payload.zip_code,
            payload.preferences.to_preferences(),
            meals_out_per_week=payload.meals_out_per_week,
            adjusted=payload.adjusted,
        )
        return {"calories": calories, "estimate": asdict(estimate)}

    @app.get("/regions/{zip_code}")
    async def region_detail(zip_code: str, request: Request) -> dict[str, object]:
        """Resolve a ZIP code to its cost multiplier and region name."""
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.region_resolver.resolve(zip_code))

    @app.post("/adjustments")
    async def cost_adjustment(
        payload: AdjustmentRequest, request: Request
    ) -> dict[str, object]:
        """Return the seasonal and inflation adjustment for a region."""
        state_container: AppContainer = request.app.state.container
        region_key = payload.region_key
        if region_key is None:
            if not payload.zip_code:
                raise ValidationError(
                    "Provide a zip_code or region_key", ["zip_code", "region_key"]
                )
            region_key = region_key_for_zip(payload.zip_code)
        result = state_container.adjuster.adjust(region_key, payload.monthly_budget)
        return asdict(result)

    return app
