"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from household_food_cost.api.app import create_app
from household_food_cost.containers import AppContainer

ADULT_MALE = {
    "id": "adult-1",
    "label": "You",
    "age": 53,
    "gender": "male",
    "imperial_height": "70",
    "imperial_weight": 170,
    "metric_height": 178,
    "metric_weight": 77,
    "activity_level": "active",
}


def _client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_health(container: AppContainer) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_profiles_listing(container: AppContainer) -> None:
    response = _client(container).get("/profiles")

    assert response.status_code == 200
    profiles = response.json()["profiles"]
    assert profiles[0] == {
        "id": "adult-male",
        "description": "Male, 53 years, 5'10\", 170 lbs",
    }
    assert len(profiles) >= 10
    groups = response.json()["groups"]
    assert [group["id"] for group in groups] == ["adults", "babies", "kids", "teens"]
    assert groups[0] == {
        "id": "adults",
        "label": "Adults",
        "profiles": ["adult-male", "adult-female"],
    }


def test_profile_detail_and_unknown(container: AppContainer) -> None:
    client = _client(container)

    assert client.get("/profiles/adult-female").json()["age"] == 45
    response = client.get("/profiles/adult-robot")
    assert response.status_code == 404
    assert "adult-robot" in response.json()["detail"]


def test_region_lookup(container: AppContainer) -> None:
    response = _client(container).get("/regions/10001")

    assert response.json() == {"multiplier": 1.45, "display_name": "Manhattan"}


def test_compose_household(container: AppContainer) -> None:
    response = _client(container).post(
        "/households/compose", json={"adults": 2, "children": 1}
    )

    assert response.status_code == 200
    body = response.json()
    assert [person["label"] for person in body["people"]] == [
        "Adult 1",
        "Adult 2",
        "Child 1",
    ]
    assert body["default_leftovers"] == 9


def test_compose_rejects_too_many_adults(container: AppContainer) -> None:
    response = _client(container).post(
        "/households/compose", json={"adults": 5, "children": 0}
    )

    assert response.status_code == 422


def test_household_estimate_from_counts(container: AppContainer) -> None:
    response = _client(container).post(
        "/estimates/household",
        json={"household": {"adults": 1, "children": 0}, "zip_code": "48104"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total_calories"] == 1985
    assert body["breakdown"][0]["label"] == "Adult 1"
    assert abs(body["wasted_cost"] - body["total_monthly_cost"] * 0.2) < 1e-9


def test_household_estimate_with_people(container: AppContainer) -> None:
    response = _client(container).post(
        "/estimates/household",
        json={
            "people": [ADULT_MALE],
            "unit_system": "metric",
            "zip_code": "85001",
            "preferences": {"waste_level": "low"},
        },
    )

    body = response.json()
    assert body["total_calories"] == 2799
    assert abs(body["wasted_calories"] - 2799 * 0.05) < 1e-9


def test_quick_estimate(container: AppContainer) -> None:
    response = _client(container).post(
        "/estimates/quick",
        json={"person": ADULT_MALE, "zip_code": "10001", "meals_out_per_week": 0},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["calories"] == 2799
    assert body["estimate"]["regional"] == "Manhattan"
    assert body["estimate"]["seasonal"] == "winter"


def test_quick_estimate_missing_field(container: AppContainer) -> None:
    person = {**ADULT_MALE, "age": None}

    response = _client(container).post(
        "/estimates/quick", json={"person": person, "zip_code": "10001"}
    )

    assert response.status_code == 422
    assert response.json()["fields"] == ["age"]


def test_adjustment_by_region_key(container: AppContainer) -> None:
    response = _client(container).post(
        "/adjustments", json={"region_key": "0", "monthly_budget": 300}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["base_multiplier"] == 1.15
    assert body["plan_comparison"]["plan_name"] == "lowCost"


def test_adjustment_by_zip_code(container: AppContainer) -> None:
    response = _client(container).post(
        "/adjustments", json={"zip_code": "94501", "monthly_budget": 400}
    )

    assert response.json()["base_multiplier"] == 1.25


def test_adjustment_errors(container: AppContainer) -> None:
    client = _client(container)

    unknown = client.post("/adjustments", json={"region_key": "x", "monthly_budget": 1})
    missing = client.post("/adjustments", json={"monthly_budget": 1})

    assert unknown.status_code == 404
    assert missing.status_code == 422
    assert missing.json()["fields"] == ["zip_code", "region_key"]
