"""Seasonal and inflation cost adjustment with USDA food plan benchmarks."""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta
from types import MappingProxyType

from household_food_cost.data.food_plans import USDA_FOOD_PLANS
from household_food_cost.data.regional_database import REGIONAL_DATABASE
from household_food_cost.domain.regions import (
    CostAdjustmentResult,
    FoodPlanComparison,
    PriceIndices,
    RegionalData,
)
from household_food_cost.errors import RegionNotFoundError, ValidationError
from household_food_cost.services.price_index import PriceIndexService

_logger = logging.getLogger(__name__)

SPRING_MONTHS = (3, 4, 5)
SUMMER_MONTHS = (6, 7, 8)
FALL_MONTHS = (9, 10, 11)


def season_for(day: date) -> str:
    """Return the season label for a date."""
    if day.month in SPRING_MONTHS:
        return "spring"
    if day.month in SUMMER_MONTHS:
        return "summer"
    if day.month in FALL_MONTHS:
        return "fall"
    return "winter"


def region_key_for_zip(zip_code: str) -> str:
    """Return the coarse region key (leading digit) for a ZIP code."""
    return (zip_code or "").strip()[:1]


def compare_to_food_plans(
    monthly_budget: float,
    category: str = "individual",
    plans: Mapping[str, Mapping[str, float]] = USDA_FOOD_PLANS,
) -> FoodPlanComparison:
    """Find the food plan closest to a monthly budget.

    Ties go to the plan listed first.
    """
    table = plans.get(category)
    if not table:
        raise ValidationError(f"Unknown food plan category: {category}", ["category"])
    plan_name, plan_cost = min(
        table.items(), key=lambda item: abs(monthly_budget - item[1])
    )
    return FoodPlanComparison(
        plan_name=plan_name,
        monthly_cost=plan_cost,
        percent_difference=(monthly_budget - plan_cost) / plan_cost * 100,
    )


def _as_aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


@dataclass
class SeasonalInflationAdjuster:
    """Regional cost adjustment for season and year-over-year food inflation.

    Price indices older than ``stale_after`` trigger a background refresh
    through ``price_index_service``. ``adjust`` never waits for the refresh: it
    answers from whatever data is resident and flags the result as stale.
    Refresh errors and timeouts are logged and the previous data is kept.
    """

    price_index_service: PriceIndexService | None = None
    regions: Mapping[str, RegionalData] = field(
        default_factory=lambda: REGIONAL_DATABASE
    )
    food_plans: Mapping[str, Mapping[str, float]] = field(
        default_factory=lambda: USDA_FOOD_PLANS
    )
    stale_after: timedelta = timedelta(hours=24)
    refresh_timeout_seconds: float = 10.0
    refresh_backoff: timedelta = timedelta(minutes=15)
    plan_category: str = "individual"
    _refresh_task: asyncio.Task[bool] | None = field(default=None, init=False)
    _last_attempt_at: datetime | None = field(default=None, init=False)

    def adjust(
        self, region_key: str, monthly_budget: float, now: datetime | None = None
    ) -> CostAdjustmentResult:
        """Return the seasonal and inflation adjustment for a region."""
        moment = _as_aware(now or datetime.now(tz=UTC))
        data = self.regions.get(region_key)
        if data is None:
            raise RegionNotFoundError(region_key)

        is_stale = self.is_stale(data, moment)
        if is_stale:
            self.schedule_refresh(moment)

        season = season_for(moment)
        groceries = data.price_indices.groceries
        seasonal_multiplier = data.seasonal_factors.for_season(season)
        inflation_adjustment = 1 + groceries.year_over_year_change / 100
        total_multiplier = (
            data.cost_multiplier * seasonal_multiplier * inflation_adjustment
        )
        return CostAdjustmentResult(
            base_multiplier=data.cost_multiplier,
            seasonal_multiplier=seasonal_multiplier,
            inflation_adjustment=inflation_adjustment,
            total_multiplier=total_multiplier,
            season=season,
            last_updated=groceries.timestamp,
            price_indices=data.price_indices,
            plan_comparison=compare_to_food_plans(
                monthly_budget, self.plan_category, self.food_plans
            ),
            is_stale=is_stale,
        )

    def adjust_for_zip(
        self, zip_code: str, monthly_budget: float, now: datetime | None = None
    ) -> CostAdjustmentResult:
        """Adjust using the region key derived from a ZIP code."""
        return self.adjust(region_key_for_zip(zip_code), monthly_budget, now)

    def is_stale(self, data: RegionalData, now: datetime) -> bool:
        """Return True when grocery price indices are older than the window."""
        return now - data.price_indices.groceries.timestamp > self.stale_after

    @property
    def refresh_in_progress(self) -> bool:
        """Return True while a background refresh is running."""
        return self._refresh_task is not None and not self._refresh_task.done()

    def schedule_refresh(self, now: datetime) -> bool:
        """Start a background refresh if none is running; return True if started."""
        if self.price_index_service is None or self.refresh_in_progress:
            return False
        if (
            self._last_attempt_at is not None
            and now - self._last_attempt_at < self.refresh_backoff
        ):
            return False
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            _logger.debug("No running event loop, skipping price index refresh")
            return False
        self._last_attempt_at = now
        self._refresh_task = loop.create_task(self._refresh(now))
        return True

    async def refresh_now(self, now: datetime | None = None) -> bool:
        """Refresh price indices and wait for the outcome."""
        moment = _as_aware(now or datetime.now(tz=UTC))
        if self.price_index_service is None:
            return False
        self._last_attempt_at = moment
        return await self._refresh(moment)

    def cancel_refresh(self) -> None:
        """Cancel an in-flight background refresh."""
        if self.refresh_in_progress and self._refresh_task is not None:
            self._refresh_task.cancel()

    async def wait_for_refresh(self) -> bool | None:
        """Wait for the current background refresh, if any, and return its result."""
        task = self._refresh_task
        if task is None:
            return None
        await asyncio.wait({task})
        if task.cancelled():
            return False
        return task.result()

    async def _refresh(self, now: datetime) -> bool:
        if self.price_index_service is None:
            return False
        try:
            indices = await asyncio.wait_for(
                self.price_index_service.fetch_latest(now),
                timeout=self.refresh_timeout_seconds,
            )
        except TimeoutError:
            _logger.warning(
                "Price index refresh timed out after %ss, keeping cached data",
                self.refresh_timeout_seconds,
            )
            return False
        except Exception:
            _logger.exception("Price index refresh failed, keeping cached data")
            return False
        self._apply(indices)
        return True

    def _apply(self, indices: PriceIndices) -> None:
        """Swap in new price indices for every region."""
        self.regions = MappingProxyType(
            {
                key: replace(data, price_indices=indices)
                for key, data in self.regions.items()
            }
        )
        _logger.info("Price indices refreshed for %s regions", len(self.regions))
