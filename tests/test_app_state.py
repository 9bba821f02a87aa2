from datetime import date, timedelta

import pytest

from app_state import AppState, MemoryStorage, empty_snapshot

DAY = date(2025, 10, 15)


@pytest.fixture
def user_state(state, profile):
    state.set_user(profile)
    return state


def test_empty_storage_gives_empty_state(state):
    assert state.user is None
    assert state.snapshot() == empty_snapshot()


def test_changes_are_written_through_storage(profile):
    storage = MemoryStorage()
    AppState(storage).set_user(profile)

    reloaded = AppState(storage)
    assert reloaded.user["name"] == "민수"


def test_set_user_keeps_id_on_update(user_state, profile):
    edited = {k: v for k, v in profile.items() if k != "id"}
    edited["weight_kg"] = 68

    updated = user_state.set_user(edited)
    assert updated["id"] == "user-1"
    assert updated["weight_kg"] == 68


def test_goal_initial_weight_defaults_to_current_weight(user_state):
    goal = user_state.set_goal(
        {"target_weight": 65, "target_date": DAY + timedelta(days=100), "daily_calorie_goal": 1800},
        today=DAY,
    )
    assert goal["initial_weight"] == 70
    assert goal["user_id"] == "user-1"
    assert goal["weekly_exercise_goal"] == 3
    assert goal["daily_water_goal"] == 2000


def test_goal_keeps_explicit_initial_weight(user_state):
    goal = user_state.set_goal(
        {"initial_weight": 80, "target_weight": 65, "target_date": DAY + timedelta(days=100),
         "daily_calorie_goal": 1800},
        today=DAY,
    )
    assert goal["initial_weight"] == 80


def test_goal_edit_keeps_stored_initial_weight(user_state, profile):
    user_state.set_goal({"target_weight": 65, "target_date": DAY + timedelta(days=100),
                         "daily_calorie_goal": 1800}, today=DAY)
    user_state.set_user(dict(profile, weight_kg=67))

    edited = user_state.set_goal({"target_weight": 63, "target_date": DAY + timedelta(days=120),
                                  "daily_calorie_goal": 1700, "initial_weight": None}, today=DAY)
    assert edited["initial_weight"] == 70
    assert edited["target_weight"] == 63


def test_goal_calorie_default_is_computed_target(user_state):
    # age 35: bmr 1624, tdee 2517; 5kg over 385 days is 100 kcal/day
    goal = user_state.set_goal({"target_weight": 65, "target_date": DAY + timedelta(days=385)}, today=DAY)
    assert goal["daily_calorie_goal"] == 2417


def test_single_goal_is_replaced(user_state):
    first = user_state.set_goal({"target_weight": 65, "target_date": DAY, "daily_calorie_goal": 1800})
    second = user_state.set_goal({"target_weight": 60, "target_date": DAY, "daily_calorie_goal": 1700})
    assert second["id"] == first["id"]
    assert user_state.goal["target_weight"] == 60


def test_diet_record_totals_foods(user_state):
    record = user_state.add_diet_record(DAY, "lunch", [
        {"name": "비빔밥", "calories": 520},
        {"name": "미역국", "amount": 200, "unit": "ml", "calories": 80.4},
    ])
    assert record["total_calories"] == 600
    assert record["foods"][0] == {"name": "비빔밥", "amount": 1, "unit": "count", "calories": 520}
    assert user_state.records_for(DAY) == [record]
    assert user_state.records_for(DAY - timedelta(days=1)) == []


def test_exercise_log_derives_calories_from_catalog(user_state):
    log = user_state.add_exercise_log(DAY, "조깅", 30)
    assert log["calories_burned"] == 245
    assert log["intensity"] == "medium"


def test_exercise_log_keeps_given_values(user_state):
    log = user_state.add_exercise_log(DAY, "스쿼시", 45, calories_burned=400.4, intensity="high")
    assert log["calories_burned"] == 400
    assert log["intensity"] == "high"
    assert log["exercise_name"] == "스쿼시"


def test_remove_water_log_drops_most_recent_of_that_day(user_state):
    user_state.add_water_log(DAY, 250)
    other_day = user_state.add_water_log(DAY - timedelta(days=1), 500)
    user_state.add_water_log(DAY, 300)
    last = user_state.add_water_log(DAY, 350)

    removed = user_state.remove_water_log(DAY)

    assert removed == last
    assert [w["amount_ml"] for w in user_state.water_logs if w["date"] == DAY] == [250, 300]
    assert other_day in user_state.water_logs


def test_remove_water_log_on_empty_day_is_noop(user_state):
    user_state.add_water_log(DAY, 250)
    assert user_state.remove_water_log(DAY + timedelta(days=1)) is None
    assert len(user_state.water_logs) == 1


def test_apply_action(user_state):
    meal = user_state.apply_action({
        "type": "add_meal",
        "data": {"meal_type": "dinner", "foods": [{"name": "김밥", "amount": 1, "unit": "count",
                                                   "calories": 480}], "total_calories": 480},
    }, day=DAY)
    exercise = user_state.apply_action({
        "type": "add_exercise",
        "data": {"exercise_name": "조깅", "duration_minutes": 30, "calories_burned": 245,
                 "intensity": "medium"},
    }, day=DAY)

    assert meal["total_calories"] == 480
    assert exercise["calories_burned"] == 245

    with pytest.raises(ValueError):
        user_state.apply_action({"type": "add_water", "data": {}})


def test_daily_summary_end_to_end(user_state):
    user_state.set_goal({"target_weight": 65, "target_date": DAY + timedelta(days=100),
                         "daily_calorie_goal": 1800}, today=DAY)
    user_state.add_diet_record(DAY, "lunch", [{"name": "비빔밥", "calories": 600}])
    user_state.add_exercise_log(DAY, "조깅", 30, calories_burned=200)
    user_state.add_water_log(DAY, 500)

    summary = user_state.daily_summary(DAY)

    assert summary["remaining_calories"] == 1400
    assert summary["total_calories_consumed"] == 600
    assert summary["total_calories_burned"] == 200
    assert summary["water_intake_ml"] == 500
    assert summary["target_water_ml"] == 2000
    assert summary["progress_percentage"] == 33


def test_weekly_counts(user_state):
    for offset in (0, 3, 6, 7):
        user_state.add_exercise_log(DAY - timedelta(days=offset), "요가", 20)
    user_state.add_diet_record(DAY, "lunch", [{"name": "a", "calories": 700}])
    user_state.add_diet_record(DAY - timedelta(days=7), "lunch", [{"name": "b", "calories": 700}])
    user_state.add_diet_record(DAY + timedelta(days=1), "lunch", [{"name": "c", "calories": 700}])

    assert user_state.weekly_exercise_count(DAY) == 3
    assert user_state.recent_average_calories(DAY) == 100


def test_context_shape(user_state):
    context = user_state.context(indoor=False)
    assert context["user"]["id"] == "user-1"
    assert context["indoor"] is False
    assert context["diet_records"] is user_state.diet_records


def test_clear_all_data(profile, goal):
    storage = MemoryStorage()
    state = AppState(storage)
    state.set_user(profile)
    state.set_goal(goal)
    state.add_water_log(DAY, 250)
    state.add_exercise_log(DAY, "요가", 20)

    state.clear_all_data()

    assert state.snapshot() == empty_snapshot()
    assert AppState(storage).user is None
    assert state.daily_summary(DAY)["water_intake_ml"] == 0
