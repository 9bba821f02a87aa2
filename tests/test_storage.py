from datetime import date

import pytest

from app_state import AppState
from models import init_db
from storage import SqlStorage

DAY = date(2025, 10, 15)


@pytest.fixture(autouse=True)
def tables():
    init_db()


def test_unknown_user_loads_empty_snapshot():
    state = AppState(SqlStorage("nobody"))
    assert state.user is None
    assert state.diet_records == []


def test_round_trip(profile, goal):
    profile = dict(profile, id="storage-user")
    goal = dict(goal, user_id="storage-user", id="storage-goal")

    state = AppState(SqlStorage())
    state.set_user(profile)
    state.set_goal(goal)
    record = state.add_diet_record(DAY, "lunch", [
        {"name": "비빔밥", "calories": 520},
        {"name": "미역국", "amount": 200, "unit": "ml", "calories": 80},
    ])
    state.add_exercise_log(DAY, "조깅", 30)
    state.add_water_log(DAY, 250)
    state.add_weight_log(DAY, 69.5)

    reloaded = AppState(SqlStorage("storage-user"))

    assert reloaded.user["name"] == "민수"
    assert reloaded.user["birth_date"] == date(1990, 5, 1)
    assert reloaded.goal["daily_calorie_goal"] == 1800
    assert reloaded.goal["target_date"] == date(2026, 3, 1)
    assert [f["name"] for f in reloaded.diet_records[0]["foods"]] == ["비빔밥", "미역국"]
    assert reloaded.diet_records[0]["id"] == record["id"]
    assert reloaded.diet_records[0]["total_calories"] == 600
    assert reloaded.exercise_logs[0]["calories_burned"] == 245
    assert reloaded.water_logs[0]["amount_ml"] == 250
    assert reloaded.weight_logs[0]["weight_kg"] == 69.5
    assert reloaded.daily_summary(DAY)["remaining_calories"] == 1800 - 600 + 245


def test_removed_rows_are_deleted(profile):
    profile = dict(profile, id="water-user")
    state = AppState(SqlStorage())
    state.set_user(profile)
    state.add_water_log(DAY, 250)
    state.add_water_log(DAY, 300)

    state.remove_water_log(DAY)

    reloaded = AppState(SqlStorage("water-user"))
    assert [w["amount_ml"] for w in reloaded.water_logs] == [250]


def test_save_without_user_is_noop():
    storage = SqlStorage()
    storage.save({"user": None, "goal": None})
    assert storage.user_id is None


def test_clear_removes_user_and_rows(profile, goal):
    profile = dict(profile, id="clear-user")
    goal = dict(goal, user_id="clear-user", id="clear-goal")
    state = AppState(SqlStorage())
    state.set_user(profile)
    state.set_goal(goal)
    state.add_diet_record(DAY, "dinner", [{"name": "김치찌개", "calories": 450}])
    state.add_water_log(DAY, 250)

    state.clear_all_data()

    reloaded = AppState(SqlStorage("clear-user"))
    assert reloaded.user is None
    assert reloaded.goal is None
    assert reloaded.diet_records == []
    assert reloaded.water_logs == []
