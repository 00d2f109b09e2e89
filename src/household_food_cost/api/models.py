"""Pydantic request models for the estimation API."""

from typing import Literal

from pydantic import BaseModel, Field

from household_food_cost.domain.household import (
    MAX_ADULTS,
    MAX_CHILDREN,
    MIN_ADULTS,
    MIN_CHILDREN,
    HouseholdConfig,
    ShoppingPreferences,
)
from household_food_cost.domain.profiles import Person
from household_food_cost.services.estimates import MEALS_PER_WEEK

UnitSystem = Literal["imperial", "metric"]


class PersonPayload(BaseModel):
    """Household member as edited by the caller."""

    id: str
    label: str
    age: float | None = Field(default=None, ge=0)
    gender: Literal["male", "female"]
    imperial_height: str | None = None
    imperial_weight: float | None = Field(default=None, ge=0)
    metric_height: float | None = Field(default=None, ge=0)
    metric_weight: float | None = Field(default=None, ge=0)
    activity_level: str | None = None

    def to_person(self) -> Person:
        """Convert to the domain person."""
        return Person(**self.model_dump())


class PreferencesPayload(BaseModel):
    """Shopping preference selections."""

    cost_tier: Literal["budget", "moderate", "premium"] = "moderate"
    prep_style: Literal["mostly_home", "mixed", "mostly_prepared"] = "mixed"
    store_type: Literal["discount", "standard", "premium"] = "standard"
    waste_level: Literal["low", "average", "high"] = "average"

    def to_preferences(self) -> ShoppingPreferences:
        """Convert to domain preferences."""
        return ShoppingPreferences(**self.model_dump())


class HouseholdConfigPayload(BaseModel):
    """Adult and child counts."""

    adults: int = Field(default=1, ge=MIN_ADULTS, le=MAX_ADULTS)
    children: int = Field(default=0, ge=MIN_CHILDREN, le=MAX_CHILDREN)

    def to_config(self) -> HouseholdConfig:
        """Convert to the domain household config."""
        return HouseholdConfig(adults=self.adults, children=self.children)


class HouseholdEstimateRequest(BaseModel):
    """Household estimate input: explicit people or counts to compose."""

    people: list[PersonPayload] | None = None
    household: HouseholdConfigPayload | None = None
    unit_system: UnitSystem = "imperial"
    zip_code: str
    preferences: PreferencesPayload = Field(default_factory=PreferencesPayload)
    leftovers_wasted: int | None = Field(default=None, ge=0)


class QuickEstimateRequest(BaseModel):
    """Single-person estimate input."""

    person: PersonPayload
    unit_system: UnitSystem = "imperial"
    zip_code: str
    preferences: PreferencesPayload = Field(default_factory=PreferencesPayload)
    meals_out_per_week: int = Field(default=1, ge=0, le=MEALS_PER_WEEK)
    adjusted: bool = False


class AdjustmentRequest(BaseModel):
    """Seasonal and inflation adjustment input."""

    zip_code: str | None = None
    region_key: str | None = None
    monthly_budget: float = Field(ge=0)
