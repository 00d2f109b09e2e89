"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from household_food_cost.adapters.bls_client import HttpxBlsClient
from household_food_cost.config import Settings, parse_waste_model
from household_food_cost.services.adjustment import SeasonalInflationAdjuster
from household_food_cost.services.cache import InMemoryCache
from household_food_cost.services.estimates import EstimationService, QuickEstimator
from household_food_cost.services.household import (
    HouseholdAggregator,
    HouseholdComposer,
    waste_model_for,
)
from household_food_cost.services.price_index import PriceIndexService
from household_food_cost.services.profiles import ProfileStore
from household_food_cost.services.regions import RegionResolver


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_store: ProfileStore
    region_resolver: RegionResolver
    adjuster: SeasonalInflationAdjuster
    estimation_service: EstimationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    profile_store = ProfileStore()
    region_resolver = RegionResolver()
    bls_client = HttpxBlsClient.create(
        base_url=resolved_settings.bls_base_url,
        api_key=resolved_settings.bls_api_key,
    )
    price_index_service = PriceIndexService(client=bls_client, cache=InMemoryCache())
    adjuster = SeasonalInflationAdjuster(
        price_index_service=price_index_service,
        stale_after=timedelta(hours=resolved_settings.price_stale_after_hours),
        refresh_timeout_seconds=resolved_settings.price_refresh_timeout_seconds,
    )
    aggregator = HouseholdAggregator(
        region_resolver=region_resolver,
        waste_model=waste_model_for(parse_waste_model(resolved_settings.waste_model)),
    )
    estimation_service = EstimationService(
        composer=HouseholdComposer(profile_store),
        aggregator=aggregator,
        quick_estimator=QuickEstimator(
            region_resolver=region_resolver, adjuster=adjuster
        ),
    )

    async def close_resources() -> None:
        adjuster.cancel_refresh()
        await bls_client.close()

    return AppContainer(
        settings=resolved_settings,
        profile_store=profile_store,
        region_resolver=region_resolver,
        adjuster=adjuster,
        estimation_service=estimation_service,
        close_resources=close_resources,
    )
