"""Tests for HTTP endpoints."""

from fastapi.testclient import TestClient

from foodwise.api.app import create_app
from tests.conftest import SF_ORIGIN

PROFILE = {
    "weight": 70,
    "height": 175,
    "age": 25,
    "gender": "Male",
    "diet_type": "balanced",
    "fitness_goal": "weight-loss",
    "activity_level": "moderate",
    "budget": "medium",
    "allergies": [],
}


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_nutrition_goals_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/nutrition-goals", json=PROFILE)

    assert response.status_code == 200
    assert response.json() == {
        "calories": 2094,
        "protein": 131,
        "carbs": 236,
        "fat": 70,
        "fiber": 29,
        "water": 2450,
    }


def test_invalid_profile_returns_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/nutrition-goals", json={**PROFILE, "weight": 0})

    assert response.status_code == 422
    assert response.json()["field"] == "weight"


def test_unknown_activity_level_returns_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/recommendations",
        json={"profile": {**PROFILE, "activity_level": "couch"}},
    )

    assert response.status_code == 422
    assert response.json()["field"] == "activity_level"


def test_recommendations_with_static_locations(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/recommendations", json={"profile": {**PROFILE, "allergies": ["nuts"]}}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["live_locations"] is False
    assert data["nutrition_goals"]["calories"] == 2094
    assert len(data["foods"]) <= 8
    assert all(food["name"] != "Almonds" for food in data["foods"])
    top_food = data["foods"][0]
    assert top_food["name"] == "Lentil Soup"
    assert top_food["match_score"] == 100
    assert top_food["category"] == "high-protein"
    grouped = [name for names in data["food_groups"].values() for name in names]
    assert sorted(grouped) == sorted(food["name"] for food in data["foods"])
    first = data["locations"][0]
    assert first["name"] == "Green Garden Cafe"
    assert first["maps_url"].startswith("https://www.google.com/maps/search/")
    assert [dish["name"] for dish in first["top_dishes"]] == [
        "Lentil Power Soup",
        "Buddha Bowl Supreme",
    ]


def test_recommendations_with_live_locations(container) -> None:
    client = TestClient(create_app(container))
    lat, lng = SF_ORIGIN

    response = client.post(
        "/recommendations",
        json={
            "profile": {**PROFILE, "diet_type": "vegan"},
            "coordinates": {"lat": lat, "lng": lng},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["live_locations"] is True
    assert data["locations"][0]["name"] == "Green Leaf Vegan Kitchen"
    assert "origin=" in data["locations"][0]["directions_url"]
    suggestion = data["locations"][0]["suggested_dishes"][0]
    assert suggestion == {
        "name": "Acai Bowl",
        "description": "Antioxidant-rich acai with fresh fruits and nuts",
        "health_score": 0.6,
        "calorie_estimate": 450,
    }
