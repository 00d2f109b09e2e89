"""Household composition and cost aggregation."""

import random
from dataclasses import dataclass, field
from typing import Protocol

from household_food_cost.domain.household import (
    MAX_ADULTS,
    MAX_CHILDREN,
    MIN_ADULTS,
    MIN_CHILDREN,
    BreakdownEntry,
    HouseholdConfig,
    HouseholdResult,
    ShoppingPreferences,
)
from household_food_cost.domain.profiles import UNIT_SYSTEMS, Person
from household_food_cost.errors import ValidationError
from household_food_cost.services.energy import estimate_daily_calories
from household_food_cost.services.preferences import (
    compose_factor,
    validate_preferences,
    waste_percentage,
)
from household_food_cost.services.profiles import ProfileStore
from household_food_cost.services.regions import RegionResolver

BASE_COST_PER_CALORIE = 0.0025
DAYS_PER_MONTH = 30
LEFTOVERS_PER_PERSON = 3

EXTRA_ADULT_AGE_RANGE = (20, 50)
EXTRA_CHILD_AGE_RANGE = (1, 18)
TEMPLATED_CHILDREN = ("kid-7y-male", "kid-10y-female", "teen-13y-male")


class RandomSource(Protocol):
    """Source of random integers for filler household members."""

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""


def validate_household(config: HouseholdConfig) -> None:
    """Raise ValidationError when adult or child counts are out of range."""
    invalid = []
    if not MIN_ADULTS <= config.adults <= MAX_ADULTS:
        invalid.append("adults")
    if not MIN_CHILDREN <= config.children <= MAX_CHILDREN:
        invalid.append("children")
    if invalid:
        raise ValidationError(
            f"Household must have {MIN_ADULTS}-{MAX_ADULTS} adults and "
            f"{MIN_CHILDREN}-{MAX_CHILDREN} children",
            fields=invalid,
        )


def default_leftovers(config: HouseholdConfig) -> int:
    """Default count of wasted leftovers: three per person."""
    return config.size * LEFTOVERS_PER_PERSON


def _child_archetype(age: int, gender: str) -> str:
    if age <= 5:
        return f"kid-7y-{gender}"
    if age <= 12:
        return f"kid-10y-{gender}"
    return f"teen-13y-{gender}"


@dataclass
class HouseholdComposer:
    """Build the person list for a household from profile templates.

    Every call produces a fresh list; edits made to a previous list are not
    carried over.
    """

    profile_store: ProfileStore
    rng: RandomSource = field(default_factory=random.Random)

    def synthesize(self, config: HouseholdConfig) -> list[Person]:
        """Return the ordered people for a household config."""
        validate_household(config)
        people = self._adults(config.adults)
        people.extend(self._children(config.children))
        return people

    def _adults(self, count: int) -> list[Person]:
        if count == 1:
            return [self._person("adult-female", "adult-1", "Adult 1")]
        people = [
            self._person("adult-male", "adult-1", "Adult 1"),
            self._person("adult-female", "adult-2", "Adult 2"),
        ]
        for index in range(3, count + 1):
            age = self.rng.randint(*EXTRA_ADULT_AGE_RANGE)
            gender = "female" if index % 2 == 0 else "male"
            people.append(
                self._person(
                    f"adult-{gender}", f"adult-{index}", f"Adult {index}", age=age
                )
            )
        return people

    def _children(self, count: int) -> list[Person]:
        people = [
            self._person(archetype, f"child-{index}", f"Child {index}")
            for index, archetype in enumerate(TEMPLATED_CHILDREN[:count], start=1)
        ]
        for index in range(len(TEMPLATED_CHILDREN) + 1, count + 1):
            age = self.rng.randint(*EXTRA_CHILD_AGE_RANGE)
            gender = "female" if index % 2 == 0 else "male"
            people.append(
                self._person(
                    _child_archetype(age, gender),
                    f"child-{index}",
                    f"Child {index}",
                    age=age,
                )
            )
        return people

    def _person(
        self, archetype_id: str, person_id: str, label: str, **overrides: object
    ) -> Person:
        profile = self.profile_store.lookup(archetype_id)
        return Person.from_profile(profile, id=person_id, label=label, **overrides)


@dataclass(frozen=True)
class WasteContext:
    """Inputs available to a waste model."""

    total_calories: int
    total_monthly_cost: float
    people_count: int
    waste_level: str
    preference_factor: float
    regional_multiplier: float
    leftovers_wasted: int | None = None


class WasteModel(Protocol):
    """Strategy that derives wasted calories and cost."""

    def estimate(self, context: WasteContext) -> tuple[float, float]:
        """Return (wasted_calories, wasted_cost)."""


class PercentageWasteModel(WasteModel):
    """Waste as a fixed share of monthly cost and daily calories."""

    def estimate(self, context: WasteContext) -> tuple[float, float]:
        share = waste_percentage(context.waste_level)
        return context.total_calories * share, context.total_monthly_cost * share


@dataclass
class LeftoversWasteModel(WasteModel):
    """Waste from a count of discarded leftover portions.

    Each leftover is a sixth of an average person's daily calories, priced at
    twice the household's per-calorie rate.
    """

    portions_per_day: int = 6
    cost_markup: float = 2.0
    base_cost_per_calorie: float = BASE_COST_PER_CALORIE

    def estimate(self, context: WasteContext) -> tuple[float, float]:
        if context.people_count == 0:
            return 0.0, 0.0
        leftovers = context.leftovers_wasted
        if leftovers is None:
            leftovers = context.people_count * LEFTOVERS_PER_PERSON
        average_calories = context.total_calories / context.people_count
        wasted_calories = leftovers * (average_calories / self.portions_per_day)
        wasted_cost = (
            wasted_calories
            * self.base_cost_per_calorie
            * context.preference_factor
            * context.regional_multiplier
            * self.cost_markup
        )
        return wasted_calories, wasted_cost


def waste_model_for(name: str) -> WasteModel:
    """Return the waste model registered under a name."""
    if name == "leftovers":
        return LeftoversWasteModel()
    return PercentageWasteModel()


@dataclass
class HouseholdAggregator:
    """Sum per-person calorie needs and costs into household totals."""

    region_resolver: RegionResolver
    waste_model: WasteModel = field(default_factory=PercentageWasteModel)
    base_cost_per_calorie: float = BASE_COST_PER_CALORIE

    def aggregate(
        self,
        people: list[Person],
        unit_system: str,
        zip_code: str,
        prefs: ShoppingPreferences,
        leftovers_wasted: int | None = None,
    ) -> HouseholdResult:
        """Compute household calories, costs and waste."""
        if unit_system not in UNIT_SYSTEMS:
            raise ValidationError(
                f"Unknown unit system: {unit_system}", ["unit_system"]
            )
        validate_preferences(prefs)

        preference_factor = compose_factor(prefs)
        regional_multiplier = self.region_resolver.multiplier(zip_code)
        breakdown = []
        for person in people:
            calories = estimate_daily_calories(person, unit_system)
            daily_cost = (
                calories
                * self.base_cost_per_calorie
                * preference_factor
                * regional_multiplier
            )
            breakdown.append(
                BreakdownEntry(
                    label=person.label, calories=calories, daily_cost=daily_cost
                )
            )

        total_calories = sum(entry.calories for entry in breakdown)
        total_daily_cost = sum(entry.daily_cost for entry in breakdown)
        total_monthly_cost = total_daily_cost * DAYS_PER_MONTH
        wasted_calories, wasted_cost = self.waste_model.estimate(
            WasteContext(
                total_calories=total_calories,
                total_monthly_cost=total_monthly_cost,
                people_count=len(people),
                waste_level=prefs.waste_level,
                preference_factor=preference_factor,
                regional_multiplier=regional_multiplier,
                leftovers_wasted=leftovers_wasted,
            )
        )
        return HouseholdResult(
            total_calories=total_calories,
            total_daily_cost=total_daily_cost,
            total_monthly_cost=total_monthly_cost,
            wasted_calories=wasted_calories,
            wasted_cost=wasted_cost,
            breakdown=breakdown,
        )
