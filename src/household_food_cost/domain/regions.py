"""Regional cost domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RegionMatch:
    """Resolved regional multiplier and display name for a ZIP code."""

    multiplier: float
    display_name: str


@dataclass(frozen=True)
class SeasonalFactors:
    """Cost factors per season."""

    winter: float
    spring: float
    summer: float
    fall: float

    def for_season(self, season: str) -> float:
        """Return the factor for a season label."""
        return float(getattr(self, season))


@dataclass(frozen=True)
class PriceIndex:
    """CPI-style price index snapshot."""

    timestamp: datetime
    base_value: float
    monthly_change: float
    year_over_year_change: float


@dataclass(frozen=True)
class PriceIndices:
    """Grocery and restaurant price indices."""

    groceries: PriceIndex
    restaurant: PriceIndex


@dataclass(frozen=True)
class RegionalData:
    """Regional cost multiplier, seasonal factors and price indices."""

    cost_multiplier: float
    seasonal_factors: SeasonalFactors
    price_indices: PriceIndices


@dataclass(frozen=True)
class FoodPlanComparison:
    """Nearest USDA food plan to a monthly budget."""

    plan_name: str
    monthly_cost: float
    percent_difference: float


@dataclass(frozen=True)
class CostAdjustmentResult:
    """Seasonal and inflation adjustment for a region."""

    base_multiplier: float
    seasonal_multiplier: float
    inflation_adjustment: float
    total_multiplier: float
    season: str
    last_updated: datetime
    price_indices: PriceIndices
    plan_comparison: FoodPlanComparison
    is_stale: bool
