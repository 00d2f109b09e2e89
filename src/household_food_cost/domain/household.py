"""Household, preference and result models."""

from dataclasses import dataclass, field

COST_TIERS = ("budget", "moderate", "premium")
PREP_STYLES = ("mostly_home", "mixed", "mostly_prepared")
STORE_TYPES = ("discount", "standard", "premium")
WASTE_LEVELS = ("low", "average", "high")

MIN_ADULTS = 1
MAX_ADULTS = 4
MIN_CHILDREN = 0
MAX_CHILDREN = 6


@dataclass(frozen=True)
class HouseholdConfig:
    """Adult and child counts that drive person list regeneration."""

    adults: int = 1
    children: int = 0

    @property
    def size(self) -> int:
        """Total number of people in the household."""
        return self.adults + self.children


@dataclass(frozen=True)
class ShoppingPreferences:
    """Shopping preference selections."""

    cost_tier: str = "moderate"
    prep_style: str = "mixed"
    store_type: str = "standard"
    waste_level: str = "average"


@dataclass(frozen=True)
class BreakdownEntry:
    """Per-person calories and daily cost."""

    label: str
    calories: int
    daily_cost: float


@dataclass(frozen=True)
class HouseholdResult:
    """Aggregated household totals and waste figures."""

    total_calories: int
    total_daily_cost: float
    total_monthly_cost: float
    wasted_calories: float
    wasted_cost: float
    breakdown: list[BreakdownEntry] = field(default_factory=list)


@dataclass(frozen=True)
class CostEstimate:
    """Single-person cost estimate."""

    daily: float
    monthly: float
    seasonal: str
    regional: str
    regional_multiplier: float
    total_multiplier: float
    meals_out_cost: float
    meals_in_cost: float
