"""Shopping preference multipliers."""

from household_food_cost.domain.household import ShoppingPreferences
from household_food_cost.errors import ValidationError

COST_TIER_FACTORS = {
    "budget": 0.8,
    "moderate": 1.0,
    "premium": 1.3,
}

PREP_STYLE_FACTORS = {
    "mostly_home": 0.8,
    "mixed": 1.0,
    "mostly_prepared": 1.4,
}

STORE_TYPE_FACTORS = {
    "discount": 0.85,
    "standard": 1.0,
    "premium": 1.25,
}

WASTE_PERCENTAGES = {
    "low": 0.05,
    "average": 0.20,
    "high": 0.35,
}


def compose_factor(prefs: ShoppingPreferences) -> float:
    """Combine cost tier, prep style and store type into one multiplier."""
    return (
        COST_TIER_FACTORS[prefs.cost_tier]
        * PREP_STYLE_FACTORS[prefs.prep_style]
        * STORE_TYPE_FACTORS[prefs.store_type]
    )


def waste_percentage(waste_level: str) -> float:
    """Return the share of food assumed wasted for a waste level."""
    return WASTE_PERCENTAGES[waste_level]


def validate_preferences(prefs: ShoppingPreferences) -> None:
    """Raise ValidationError when a preference is not a known option."""
    invalid = [
        name
        for name, value, table in (
            ("cost_tier", prefs.cost_tier, COST_TIER_FACTORS),
            ("prep_style", prefs.prep_style, PREP_STYLE_FACTORS),
            ("store_type", prefs.store_type, STORE_TYPE_FACTORS),
            ("waste_level", prefs.waste_level, WASTE_PERCENTAGES),
        )
        if value not in table
    ]
    if invalid:
        raise ValidationError(
            f"Unknown shopping preference values: {', '.join(invalid)}",
            fields=invalid,
        )
