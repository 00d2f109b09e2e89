"""Tests for shopping preference factors."""

import itertools
import math

import pytest

from household_food_cost.domain.household import (
    COST_TIERS,
    PREP_STYLES,
    STORE_TYPES,
    ShoppingPreferences,
)
from household_food_cost.errors import ValidationError
from household_food_cost.services.preferences import (
    COST_TIER_FACTORS,
    PREP_STYLE_FACTORS,
    STORE_TYPE_FACTORS,
    compose_factor,
    validate_preferences,
    waste_percentage,
)


def test_default_preferences_are_neutral() -> None:
    assert compose_factor(ShoppingPreferences()) == 1.0


def test_factor_bounds() -> None:
    factors = [
        compose_factor(
            ShoppingPreferences(cost_tier=tier, prep_style=prep, store_type=store)
        )
        for tier, prep, store in itertools.product(
            COST_TIERS, PREP_STYLES, STORE_TYPES
        )
    ]

    assert min(factors) == pytest.approx(0.8 * 0.8 * 0.85)
    assert max(factors) == pytest.approx(1.3 * 1.4 * 1.25)


def test_factor_order_independent() -> None:
    prefs = ShoppingPreferences(
        cost_tier="premium", prep_style="mostly_home", store_type="discount"
    )
    reordered = (
        STORE_TYPE_FACTORS["discount"]
        * COST_TIER_FACTORS["premium"]
        * PREP_STYLE_FACTORS["mostly_home"]
    )

    assert math.isclose(compose_factor(prefs), reordered)


def test_waste_percentages_increase() -> None:
    assert waste_percentage("low") < waste_percentage("average") < waste_percentage(
        "high"
    )
    assert waste_percentage("average") == 0.20


def test_validate_preferences_names_bad_fields() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_preferences(
            ShoppingPreferences(cost_tier="lavish", waste_level="none")
        )

    assert excinfo.value.fields == ["cost_tier", "waste_level"]
