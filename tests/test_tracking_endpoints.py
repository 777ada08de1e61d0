"""Tests for the food log, goals and water intake endpoints."""

from datetime import date

from fastapi.testclient import TestClient

from diet_tracker.api.app import create_app
from diet_tracker.domain.food_log import MealType, NewFoodLogEntry

ENTRY = {
    "userId": 1,
    "date": "2024-03-01",
    "mealType": "lunch",
    "foodName": "Rajma",
    "quantity": 150,
    "unit": "g",
    "calories": 210,
    "protein": 12,
    "carbs": 30,
    "fat": 4,
}


def test_food_items_create_list_delete(container) -> None:
    client = TestClient(create_app(container))

    created = client.post("/api/food-items", json=ENTRY)
    day = client.get("/api/food-items", params={"userId": 1, "date": "2024-03-01"})
    meal = client.get(
        "/api/food-items/meal",
        params={"userId": 1, "date": "2024-03-01", "mealType": "dinner"},
    )
    deleted = client.delete(f"/api/food-items/{created.json()['id']}")
    missing = client.delete(f"/api/food-items/{created.json()['id']}")

    assert created.status_code == 201
    assert created.json()["mealType"] == "lunch"
    assert [item["foodName"] for item in day.json()] == ["Rajma"]
    assert meal.json() == []
    assert deleted.status_code == 204
    assert missing.status_code == 404
    assert missing.json() == {"message": "Food item not found"}


def test_food_item_rejects_missing_name(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/food-items", json={**ENTRY, "foodName": ""})

    assert response.status_code == 400
    assert "foodName" in response.json()["message"]


def test_food_item_from_search_result(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/food-items/from-result",
        json={
            "userId": 1,
            "date": "2024-03-01",
            "mealType": "snack",
            "quantity": 50,
            "food": {
                "fdcId": "custom-2",
                "description": "Trail mix",
                "sourceTag": "custom",
                "nutrients": [
                    {
                        "nutrientId": 1008,
                        "nutrientName": "Energy",
                        "nutrientNumber": "208",
                        "unitName": "kcal",
                        "value": 480,
                    }
                ],
            },
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["foodName"] == "Trail mix"
    assert body["fdcId"] == "custom-2"
    assert body["calories"] == 240
    assert body["unit"] == "g"


def test_goals_default_on_first_read_then_patch(container) -> None:
    client = TestClient(create_app(container))

    first = client.get("/api/user-goals/5")
    patched = client.patch("/api/user-goals/5", json={"calorieGoal": 1800})

    assert first.json()["calorieGoal"] == 2000
    assert first.json()["fatGoal"] == 65
    assert patched.json()["calorieGoal"] == 1800
    assert patched.json()["proteinGoal"] == 120


def test_goals_patch_unknown_user(container) -> None:
    client = TestClient(create_app(container))

    response = client.patch("/api/user-goals/404", json={"fatGoal": 50})

    assert response.status_code == 404
    assert response.json() == {"message": "User goals not found"}


def test_goals_create_with_partial_targets(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/user-goals", json={"userId": 3, "proteinGoal": 90})

    assert response.status_code == 201
    assert response.json()["proteinGoal"] == 90
    assert response.json()["carbsGoal"] == 250


def test_water_default_then_upsert_then_patch(container) -> None:
    client = TestClient(create_app(container))
    params = {"userId": 1, "date": "2024-05-10"}

    default = client.get("/api/water-intake", params=params)
    first = client.post(
        "/api/water-intake", json={"userId": 1, "date": "2024-05-10", "amount": 250}
    )
    second = client.post(
        "/api/water-intake", json={"userId": 1, "date": "2024-05-10", "amount": 500}
    )
    patched = client.patch(
        f"/api/water-intake/{second.json()['id']}", json={"goal": 2500}
    )

    assert default.json() == {
        "id": None,
        "userId": 1,
        "date": "2024-05-10",
        "amount": 0.0,
        "goal": 2000.0,
    }
    assert first.json()["id"] == second.json()["id"]
    assert patched.json()["amount"] == 500
    assert patched.json()["goal"] == 2500


def test_water_patch_unknown_record(container) -> None:
    client = TestClient(create_app(container))

    response = client.patch("/api/water-intake/77", json={"amount": 100})

    assert response.status_code == 404
    assert response.json() == {"message": "Water intake record not found"}


def test_unexpected_error_is_masked(container) -> None:
    container.curated_food_service.repository.fail_search = True
    client = TestClient(create_app(container), raise_server_exceptions=False)

    response = client.get("/api/indian-foods/search", params={"query": "dal"})

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_stored_food_items_are_returned_as_stored(container) -> None:
    container.food_log_service.repository.create_entry(
        NewFoodLogEntry(
            user_id=1,
            date=date(2024, 3, 1),
            meal_type=MealType.DINNER,
            food_name="",
            quantity=0,
            unit="",
            calories=-5,
            protein=0,
            carbs=0,
            fat=0,
        )
    )
    client = TestClient(create_app(container))

    response = client.get("/api/food-items", params={"userId": 1, "date": "2024-03-01"})

    assert response.status_code == 200
    assert response.json()[0]["calories"] == -5


def test_from_result_rejects_infinite_nutrients(container) -> None:
    client = TestClient(create_app(container))
    body = (
        '{"userId": 1, "date": "2024-03-01", "mealType": "snack", "quantity": 50,'
        ' "food": {"fdcId": "1", "description": "Broken", "sourceTag": "usda",'
        ' "nutrients": [{"nutrientId": 1008, "nutrientName": "Energy",'
        ' "nutrientNumber": "208", "unitName": "kcal", "value": Infinity}]}}'
    )

    response = client.post(
        "/api/food-items/from-result",
        content=body,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert container.food_log_service.repository.entries == {}
