from datetime import date, datetime, timezone

import pytest

from campuslife.models import Course, MealLog, WellnessProfile


@pytest.mark.asyncio
async def test_profile_defaults_and_update(client):
    default = await client.get("/profile")
    assert default.status_code == 200
    assert default.json()["daily_calorie_goal"] == 2000

    updated = await client.put(
        "/profile",
        json={"daily_calorie_goal": 2400, "dietary_restrictions": ["vegetarian", "Gluten"]},
    )
    assert updated.status_code == 200, updated.text
    payload = updated.json()
    assert payload["daily_calorie_goal"] == 2400
    assert payload["protein_goal"] == 80
    assert payload["dietary_restrictions"] == "vegetarian,Gluten"

    again = await client.get("/profile")
    assert again.json()["daily_calorie_goal"] == 2400


@pytest.mark.asyncio
async def test_meal_log_updates_remaining_budget(client):
    await client.put("/profile", json={"daily_calorie_goal": 1000, "budget_goal_cents": 500})
    created = await client.post(
        "/meals/log",
        json={"day": "2025-05-06", "dish_name": "Schnitzel", "calories": 1200, "protein_g": 35, "price_cents": 450},
    )
    assert created.status_code == 201, created.text
    log_id = created.json()["id"]

    day = await client.get("/meals/day", params={"day": "2025-05-06"})
    payload = day.json()
    assert len(payload["items"]) == 1
    assert payload["calories_remaining"] == -200
    assert payload["budget_remaining_cents"] == 50

    assert (await client.delete(f"/meals/log/{log_id}")).status_code == 204
    assert (await client.delete(f"/meals/log/{log_id}")).status_code == 404
    empty = await client.get("/meals/day", params={"day": "2025-05-06"})
    assert empty.json()["items"] == []


def test_new_rows_get_aware_utc_timestamps():
    log = MealLog(day=date(2025, 5, 6), dish_name="Linsencurry")
    assert log.created_at.tzinfo is timezone.utc
    assert WellnessProfile().updated_at.tzinfo is timezone.utc
    course = Course(course_name="Analysis", start_time=datetime(2025, 5, 6, 8), end_time=datetime(2025, 5, 6, 10))
    assert course.imported_at.tzinfo is timezone.utc
