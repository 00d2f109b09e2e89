"""Daily calorie needs via the Mifflin-St Jeor equation."""

import logging
import math
import re

from household_food_cost.domain.profiles import Person

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "veryActive": 1.9,
}
DEFAULT_ACTIVITY_LEVEL = "moderate"

DEFAULT_AGE = 30
DEFAULT_METRIC_WEIGHT_KG = 70.0
DEFAULT_METRIC_HEIGHT_CM = 170.0
DEFAULT_IMPERIAL_WEIGHT_LB = 154.0

KG_PER_LB = 0.453592
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

_FEET_INCHES_RE = re.compile(r"^(\d+)(?:'|ft)(\d+)?(?:\"|in)?$", re.IGNORECASE)
_DECIMAL_FEET_RE = re.compile(r"^(\d+)\.(\d+)$")
_INCHES_RE = re.compile(r"^(\d+)(?:\"|in)?$", re.IGNORECASE)

_logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def parse_height_to_inches(text: str | None) -> int | None:
    """Parse a height string into whole inches.

    Accepts ``5'10"``, ``5ft 10in``, decimal feet such as ``5.5`` and bare
    inches (``70``, ``70"``, ``70in``). Whitespace is ignored. Returns ``None``
    when the text does not match any of these forms.
    """
    if not text:
        return None
    cleaned = re.sub(r"\s", "", text)

    match = _FEET_INCHES_RE.match(cleaned)
    if match:
        feet = int(match.group(1))
        inches = int(match.group(2) or 0)
        return feet * INCHES_PER_FOOT + inches

    match = _DECIMAL_FEET_RE.match(cleaned)
    if match:
        feet = int(match.group(1))
        fraction = float(f"0.{match.group(2)}")
        return feet * INCHES_PER_FOOT + round_half_up(fraction * INCHES_PER_FOOT)

    match = _INCHES_RE.match(cleaned)
    if match:
        return int(match.group(1))

    return None


def update_height(previous_inches: int, text: str) -> int:
    """Return the parsed height, keeping the previous value when unparseable."""
    parsed = parse_height_to_inches(text)
    if parsed is None:
        _logger.debug(
            "Ignoring unparseable height %r, keeping %s", text, previous_inches
        )
        return previous_inches
    return parsed


def calculate_bmr(weight_kg: float, height_cm: float, age: float, gender: str) -> float:
    """Calculate basal metabolic rate in kcal/day."""
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if gender == "male":
        return bmr + 5
    return bmr - 161


def activity_multiplier(activity_level: str | None) -> float:
    """Return the TDEE multiplier, falling back to moderate for unknown levels."""
    if not isinstance(activity_level, str):
        return ACTIVITY_MULTIPLIERS[DEFAULT_ACTIVITY_LEVEL]
    return ACTIVITY_MULTIPLIERS.get(
        activity_level, ACTIVITY_MULTIPLIERS[DEFAULT_ACTIVITY_LEVEL]
    )


def calculate_tdee(bmr: float, activity_level: str | None) -> float:
    """Scale BMR by the activity multiplier."""
    return bmr * activity_multiplier(activity_level)


def _number_or_default(person: Person, field_name: str, default: float) -> float:
    """Return a numeric field, or its default when missing, zero or malformed."""
    value = getattr(person, field_name)
    if value is None or value == "":
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        _logger.warning(
            "Invalid %s %r for %s, using default %s",
            field_name,
            value,
            person.label,
            default,
        )
        return default
    return number or default


def body_metrics(person: Person, unit_system: str) -> tuple[float, float]:
    """Resolve a person's weight in kg and height in cm.

    Each missing, zero or malformed value falls back to its own default so that
    one bad field never discards the rest of a household member's data.
    """
    metric_weight = _number_or_default(
        person, "metric_weight", DEFAULT_METRIC_WEIGHT_KG
    )
    metric_height = _number_or_default(
        person, "metric_height", DEFAULT_METRIC_HEIGHT_CM
    )
    if unit_system != "imperial":
        return metric_weight, metric_height

    imperial_weight = _number_or_default(
        person, "imperial_weight", DEFAULT_IMPERIAL_WEIGHT_LB
    )
    weight_kg = imperial_weight * KG_PER_LB
    imperial_height = person.imperial_height
    inches = (
        parse_height_to_inches(imperial_height)
        if isinstance(imperial_height, str)
        else None
    )
    if inches is None:
        if person.imperial_height:
            _logger.warning(
                "Unparseable height %r for %s, using metric height",
                person.imperial_height,
                person.label,
            )
        return weight_kg, metric_height
    return weight_kg, inches * CM_PER_INCH


def estimate_daily_calories(person: Person, unit_system: str) -> int:
    """Estimate a person's daily calorie need, rounded to whole kcal."""
    weight_kg, height_cm = body_metrics(person, unit_system)
    age = _number_or_default(person, "age", DEFAULT_AGE)
    bmr = calculate_bmr(weight_kg, height_cm, age, person.gender)
    return round_half_up(calculate_tdee(bmr, person.activity_level))
