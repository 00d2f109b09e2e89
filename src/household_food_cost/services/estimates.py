"""Single-person quick estimates and the estimation entry points."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from household_food_cost.domain.household import (
    CostEstimate,
    HouseholdConfig,
    HouseholdResult,
    ShoppingPreferences,
)
from household_food_cost.domain.profiles import Person
from household_food_cost.errors import ValidationError
from household_food_cost.services.adjustment import (
    SeasonalInflationAdjuster,
    season_for,
)
from household_food_cost.services.energy import estimate_daily_calories
from household_food_cost.services.household import (
    BASE_COST_PER_CALORIE,
    DAYS_PER_MONTH,
    HouseholdAggregator,
    HouseholdComposer,
)
from household_food_cost.services.preferences import (
    compose_factor,
    validate_preferences,
)
from household_food_cost.services.regions import RegionResolver

MEALS_PER_DAY = 3
MEALS_PER_WEEK = MEALS_PER_DAY * 7
RESTAURANT_MULTIPLIER = 3.5
MEALS_OUT_SHARE = 0.4
MEALS_IN_SHARE = 0.6


def require_fields(**fields: object) -> None:
    """Raise ValidationError listing every empty required field."""
    missing = [name for name, value in fields.items() if value in (None, "")]
    if missing:
        raise ValidationError(
            f"Please fill in all fields: {', '.join(missing)}", fields=missing
        )


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class QuickEstimator:
    """Cost estimate for one person's daily calorie need."""

    region_resolver: RegionResolver
    adjuster: SeasonalInflationAdjuster | None = None
    base_cost_per_calorie: float = BASE_COST_PER_CALORIE
    restaurant_multiplier: float = RESTAURANT_MULTIPLIER
    clock: Callable[[], datetime] = _utcnow

    def estimate(
        self,
        calories: int,
        zip_code: str,
        prefs: ShoppingPreferences,
        meals_out_per_week: int = 1,
    ) -> CostEstimate:
        """Blend home and restaurant meal costs by the share of meals eaten out."""
        if not 0 <= meals_out_per_week <= MEALS_PER_WEEK:
            raise ValidationError(
                f"Meals out per week must be between 0 and {MEALS_PER_WEEK}",
                ["meals_out_per_week"],
            )
        validate_preferences(prefs)
        base_daily = calories * self.base_cost_per_calorie
        region = self.region_resolver.resolve(zip_code)
        preference_factor = compose_factor(prefs)

        percent_out = meals_out_per_week / MEALS_PER_WEEK
        percent_in = 1 - percent_out
        total_multiplier = (
            preference_factor * percent_in
            + preference_factor * self.restaurant_multiplier * percent_out
        ) * region.multiplier
        daily = base_daily * total_multiplier
        return CostEstimate(
            daily=daily,
            monthly=daily * DAYS_PER_MONTH,
            seasonal=season_for(self.clock()),
            regional=region.display_name,
            regional_multiplier=region.multiplier,
            total_multiplier=total_multiplier,
            meals_out_cost=(
                base_daily
                * preference_factor
                * self.restaurant_multiplier
                * region.multiplier
            )
            / MEALS_PER_DAY,
            meals_in_cost=(base_daily * preference_factor * region.multiplier)
            / MEALS_PER_DAY,
        )

    def estimate_adjusted(
        self,
        calories: int,
        zip_code: str,
        prefs: ShoppingPreferences,
        now: datetime | None = None,
    ) -> CostEstimate:
        """Apply the seasonal and inflation adjustment in place of the ZIP table.

        Meal costs assume 40% of the daily spend goes to meals out and 60% to
        meals at home, over three meals a day.
        """
        if self.adjuster is None:
            raise ValidationError("Seasonal adjustment is not configured", ["mode"])
        validate_preferences(prefs)
        moment = now or self.clock()
        preference_factor = compose_factor(prefs)
        daily_before_region = calories * self.base_cost_per_calorie * preference_factor
        adjustment = self.adjuster.adjust_for_zip(
            zip_code, daily_before_region * DAYS_PER_MONTH, moment
        )
        daily = daily_before_region * adjustment.total_multiplier
        region = self.region_resolver.resolve(zip_code)
        return CostEstimate(
            daily=daily,
            monthly=daily * DAYS_PER_MONTH,
            seasonal=adjustment.season,
            regional=f"Based on {region.display_name} prices",
            regional_multiplier=adjustment.base_multiplier,
            total_multiplier=preference_factor * adjustment.total_multiplier,
            meals_out_cost=daily * MEALS_OUT_SHARE / MEALS_PER_DAY,
            meals_in_cost=daily * MEALS_IN_SHARE / MEALS_PER_DAY,
        )


@dataclass
class EstimationService:
    """Entry points for the household and quick estimate modes."""

    composer: HouseholdComposer
    aggregator: HouseholdAggregator
    quick_estimator: QuickEstimator

    def compose(self, config: HouseholdConfig) -> list[Person]:
        """Generate default people for a household."""
        return self.composer.synthesize(config)

    def household(
        self,
        people: list[Person],
        unit_system: str,
        zip_code: str,
        prefs: ShoppingPreferences,
        leftovers_wasted: int | None = None,
    ) -> HouseholdResult:
        """Full household aggregate with waste figures."""
        require_fields(zip_code=zip_code, unit_system=unit_system)
        return self.aggregator.aggregate(
            people, unit_system, zip_code, prefs, leftovers_wasted
        )

    def household_for_config(
        self,
        config: HouseholdConfig,
        unit_system: str,
        zip_code: str,
        prefs: ShoppingPreferences,
        leftovers_wasted: int | None = None,
    ) -> HouseholdResult:
        """Compose default people for a config and aggregate them."""
        return self.household(
            self.compose(config), unit_system, zip_code, prefs, leftovers_wasted
        )

    def quick(
        self,
        person: Person,
        unit_system: str,
        zip_code: str,
        prefs: ShoppingPreferences,
        meals_out_per_week: int = 1,
        adjusted: bool = False,
    ) -> tuple[int, CostEstimate]:
        """Single-person estimate; returns the calorie need and its cost."""
        if unit_system == "imperial":
            weight, height = person.imperial_weight, person.imperial_height
        else:
            weight, height = person.metric_weight, person.metric_height
        require_fields(
            age=person.age,
            gender=person.gender,
            weight=weight,
            height=height,
            activity_level=person.activity_level,
            zip_code=zip_code,
        )
        calories = estimate_daily_calories(person, unit_system)
        if adjusted:
            return calories, self.quick_estimator.estimate_adjusted(
                calories, zip_code, prefs
            )
        return calories, self.quick_estimator.estimate(
            calories, zip_code, prefs, meals_out_per_week
        )
