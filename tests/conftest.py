"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from household_food_cost.adapters.bls_client import BlsClient
from household_food_cost.config import Settings
from household_food_cost.containers import AppContainer
from household_food_cost.data.regional_database import REGIONAL_DATABASE
from household_food_cost.domain.regions import PriceIndex, PriceIndices, RegionalData
from household_food_cost.services.adjustment import SeasonalInflationAdjuster
from household_food_cost.services.estimates import EstimationService, QuickEstimator
from household_food_cost.services.household import (
    HouseholdAggregator,
    HouseholdComposer,
)
from household_food_cost.services.profiles import ProfileStore
from household_food_cost.services.regions import RegionResolver

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=UTC)

BLS_PAYLOAD: dict[str, object] = {
    "status": "REQUEST_SUCCEEDED",
    "Results": {
        "series": [
            {
                "seriesID": "CUSR0000SAF11",
                "data": [
                    {
                        "year": "2026",
                        "period": "M08",
                        "value": "312.500",
                        "calculations": {"pct_changes": {"1": "0.2", "12": "2.5"}},
                    },
                    {"year": "2026", "period": "M07", "value": "311.875"},
                    {"year": "2025", "period": "M13", "value": "300.000"},
                    {"year": "2025", "period": "M08", "value": "304.878"},
                ],
            },
            {
                "seriesID": "CUSR0000SEFV",
                "data": [
                    {"year": "2026", "period": "M07", "value": "378.100"},
                    {"year": "2026", "period": "M08", "value": "380.000"},
                    {"year": "2025", "period": "M08", "value": "365.000"},
                ],
            },
        ]
    },
}


@dataclass
class SequenceRandom:
    """Deterministic random source returning queued values."""

    values: list[int]
    calls: list[tuple[int, int]] = field(default_factory=list)

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        value = self.values.pop(0)
        assert a <= value <= b
        return value


@dataclass
class FakeBlsClient(BlsClient):
    """BLS client returning a canned payload."""

    payload: dict[str, object] = field(default_factory=lambda: BLS_PAYLOAD)
    calls: int = 0

    async def fetch_series(
        self, series_ids: list[str], start_year: int, end_year: int
    ) -> dict[str, object]:
        self.calls += 1
        return self.payload


def fresh_regions(now: datetime = NOW) -> dict[str, RegionalData]:
    """Regional database with price indices stamped an hour before ``now``."""
    stamped = PriceIndices(
        groceries=PriceIndex(
            timestamp=now - timedelta(hours=1),
            base_value=276.589,
            monthly_change=0.3,
            year_over_year_change=3.4,
        ),
        restaurant=PriceIndex(
            timestamp=now - timedelta(hours=1),
            base_value=350.647,
            monthly_change=0.4,
            year_over_year_change=5.1,
        ),
    )
    return {
        key: RegionalData(
            cost_multiplier=data.cost_multiplier,
            seasonal_factors=data.seasonal_factors,
            price_indices=stamped,
        )
        for key, data in REGIONAL_DATABASE.items()
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(bls_api_key="bls-key")


@pytest.fixture
def profile_store() -> ProfileStore:
    return ProfileStore()


@pytest.fixture
def region_resolver() -> RegionResolver:
    return RegionResolver()


@pytest.fixture
def composer(profile_store: ProfileStore) -> HouseholdComposer:
    return HouseholdComposer(profile_store, rng=SequenceRandom([30, 41, 4, 15, 9]))


@pytest.fixture
def aggregator(region_resolver: RegionResolver) -> HouseholdAggregator:
    return HouseholdAggregator(region_resolver)


@pytest.fixture
def adjuster() -> SeasonalInflationAdjuster:
    return SeasonalInflationAdjuster(regions=fresh_regions())


@pytest.fixture
def container(
    settings: Settings,
    profile_store: ProfileStore,
    region_resolver: RegionResolver,
    composer: HouseholdComposer,
    aggregator: HouseholdAggregator,
    adjuster: SeasonalInflationAdjuster,
) -> AppContainer:
    estimation_service = EstimationService(
        composer=composer,
        aggregator=aggregator,
        quick_estimator=QuickEstimator(
            region_resolver=region_resolver,
            adjuster=adjuster,
            clock=lambda: NOW,
        ),
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        profile_store=profile_store,
        region_resolver=region_resolver,
        adjuster=adjuster,
        estimation_service=estimation_service,
        close_resources=close_resources,
    )
