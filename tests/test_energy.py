"""Tests for the calorie calculator."""

import pytest

from household_food_cost.domain.profiles import ACTIVITY_LEVELS, Person
from household_food_cost.services.energy import (
    calculate_bmr,
    estimate_daily_calories,
    parse_height_to_inches,
    update_height,
)
from household_food_cost.services.profiles import ProfileStore


def _person(**overrides: object) -> Person:
    values: dict[str, object] = {
        "id": "p-1",
        "label": "Person",
        "age": 53,
        "gender": "male",
        "imperial_height": "70",
        "imperial_weight": 170,
        "metric_height": 178,
        "metric_weight": 77,
        "activity_level": "active",
    }
    values.update(overrides)
    return Person(**values)  # type: ignore[arg-type]


def test_active_male_imperial_scenario() -> None:
    # 10 * 77.11 + 6.25 * 177.8 - 5 * 53 + 5 = 1622.36; * 1.725 = 2798.56
    person = _person()

    assert calculate_bmr(170 * 0.453592, 70 * 2.54, 53, "male") == pytest.approx(
        1622.3564
    )
    assert estimate_daily_calories(person, "imperial") == 2799


def test_feet_inches_height_matches_bare_inches() -> None:
    bare = _person(imperial_height="70")
    feet = _person(imperial_height="5'10\"")

    assert estimate_daily_calories(bare, "imperial") == estimate_daily_calories(
        feet, "imperial"
    )


def test_metric_uses_metric_fields() -> None:
    person = _person(imperial_weight=400, imperial_height="7'0\"")

    # 770 + 1112.5 - 265 + 5 = 1622.5; * 1.725 = 2798.81
    assert estimate_daily_calories(person, "metric") == 2799


def test_female_template_imperial(profile_store: ProfileStore) -> None:
    profile = profile_store.lookup("adult-female")
    person = Person.from_profile(profile, id="adult-1", label="Adult 1")

    assert estimate_daily_calories(person, "imperial") == 1985
    assert estimate_daily_calories(person, "metric") == 1984


def test_missing_fields_use_defaults() -> None:
    person = _person(
        age=None,
        imperial_height=None,
        imperial_weight=None,
        metric_height=None,
        metric_weight=None,
        activity_level=None,
    )

    assert estimate_daily_calories(person, "metric") == 2507
    assert estimate_daily_calories(person, "imperial") == 2505


def test_unknown_activity_falls_back_to_moderate() -> None:
    unknown = _person(activity_level="couch")
    moderate = _person(activity_level="moderate")

    assert estimate_daily_calories(unknown, "metric") == estimate_daily_calories(
        moderate, "metric"
    )


def test_unparseable_imperial_height_uses_metric_height() -> None:
    garbled = _person(imperial_height="tall")
    metric_height = _person(imperial_height=None)

    assert estimate_daily_calories(garbled, "imperial") == estimate_daily_calories(
        metric_height, "imperial"
    )


def test_calories_increase_with_weight() -> None:
    results = [
        estimate_daily_calories(_person(metric_weight=weight), "metric")
        for weight in (50, 60, 70, 80, 90, 100)
    ]

    assert results == sorted(results)
    assert len(set(results)) == len(results)


def test_calories_increase_with_activity() -> None:
    results = [
        estimate_daily_calories(_person(activity_level=level), "metric")
        for level in ACTIVITY_LEVELS
    ]

    assert results == sorted(results)
    assert len(set(results)) == len(results)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("5'10\"", 70),
        ("5'10", 70),
        ("6'", 72),
        ("5ft 10in", 70),
        ("5 ' 10 \"", 70),
        ("5.5", 66),
        ("5.25", 63),
        ("70", 70),
        ("70in", 70),
        ("70\"", 70),
    ],
)
def test_parse_height_to_inches(text: str, expected: int) -> None:
    assert parse_height_to_inches(text) == expected


@pytest.mark.parametrize("text", ["", None, "tall", "5'10'11", "-70", "five"])
def test_parse_height_rejects_garbage(text: str | None) -> None:
    assert parse_height_to_inches(text) is None


def test_update_height_keeps_previous_value() -> None:
    assert update_height(70, "5'") == 60
    assert update_height(70, "not a height") == 70


def test_malformed_age_defaults_without_touching_weight() -> None:
    garbled = _person(age="old", metric_weight=90)
    defaulted = _person(age=None, metric_weight=90)

    assert estimate_daily_calories(garbled, "metric") == estimate_daily_calories(
        defaulted, "metric"
    )
    # age 30, 90 kg, 178 cm, male, active
    assert estimate_daily_calories(garbled, "metric") == 3221
