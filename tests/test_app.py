from datetime import date, timedelta

import pytest

from chatbot import SETUP_REQUIRED_MESSAGE, WELCOME_MESSAGE

PROFILE = {
    "name": "지은",
    "gender": "female",
    "birth_date": "1992-03-14",
    "height_cm": 163,
    "weight_kg": 58,
    "activity_level": "light",
}


@pytest.fixture
def user_client(client):
    response = client.post("/profile", json=PROFILE)
    assert response.status_code == 201
    return client


@pytest.fixture
def goal_client(user_client):
    response = user_client.post("/goal", json={
        "target_weight": 54,
        "target_date": (date.today() + timedelta(days=120)).isoformat(),
        "daily_calorie_goal": 1800,
    })
    assert response.status_code == 201
    return user_client


# ---------------------------------------------------------------------------
# Profile & goal
# ---------------------------------------------------------------------------


def test_profile_empty_before_setup(client):
    assert client.get("/profile").get_json() == {"profile": None}


def test_create_profile(user_client):
    body = user_client.get("/profile").get_json()
    assert body["profile"]["name"] == "지은"
    assert body["profile"]["birth_date"] == "1992-03-14"
    assert body["bmi"] == 21.8
    assert body["bmi_status"] == "정상"
    assert body["bmr"] > 0


@pytest.mark.parametrize("field,value", [
    ("gender", "robot"),
    ("activity_level", "extreme"),
    ("birth_date", "14/03/1992"),
    ("height_cm", -1),
    ("weight_kg", "heavy"),
    ("name", ""),
])
def test_profile_validation(client, field, value):
    response = client.post("/profile", json=dict(PROFILE, **{field: value}))
    assert response.status_code == 400
    assert response.get_json()["error"]


def test_profile_requires_json_object(client):
    response = client.post("/profile", data="nope", content_type="text/plain")
    assert response.status_code == 400


def test_goal_requires_profile(client):
    response = client.get("/goal")
    assert response.status_code == 401
    assert "error" in response.get_json()


def test_goal_initial_weight_defaults_to_profile_weight(goal_client):
    goal = goal_client.get("/goal").get_json()["goal"]
    assert goal["initial_weight"] == 58
    assert goal["daily_calorie_goal"] == 1800
    assert goal["weekly_exercise_goal"] == 3


def test_goal_edit_keeps_initial_weight_after_weight_change(goal_client):
    goal_client.post("/profile", json=dict(PROFILE, weight_kg=56))

    response = goal_client.post("/goal", json={
        "target_weight": 53,
        "target_date": (date.today() + timedelta(days=150)).isoformat(),
    })
    assert response.status_code == 201
    goal = goal_client.get("/goal").get_json()["goal"]
    assert goal["initial_weight"] == 58
    assert goal["target_weight"] == 53


def test_delete_profile_clears_everything(goal_client):
    goal_client.post("/water", json={"amount_ml": 300})

    response = goal_client.delete("/profile")
    assert response.status_code == 200
    assert response.get_json() == {"profile": None}

    assert goal_client.get("/profile").get_json() == {"profile": None}
    assert goal_client.get("/goal").status_code == 401
    assert goal_client.delete("/profile").status_code == 401


def test_goal_date_must_be_in_future(user_client):
    response = user_client.post("/goal", json={"target_weight": 54, "target_date": "2000-01-01"})
    assert response.status_code == 400


# ---------------------------------------------------------------------------
# Logs & dashboard
# ---------------------------------------------------------------------------


def test_meal_and_exercise_update_dashboard(goal_client):
    meal = goal_client.post("/meals", json={
        "meal_type": "lunch",
        "foods": [{"name": "비빔밥", "calories": 400}, {"name": "미역국", "calories": 200}],
    })
    assert meal.status_code == 201
    assert meal.get_json()["record"]["total_calories"] == 600

    exercise = goal_client.post("/exercises", json={
        "exercise_name": "조깅", "duration_minutes": 30, "calories_burned": 200,
    })
    assert exercise.status_code == 201

    dashboard = goal_client.get("/dashboard").get_json()
    assert dashboard["summary"]["remaining_calories"] == 1400
    assert dashboard["analysis"]["remaining_calories"] == 1400
    assert dashboard["weekly_exercise_count"] == 1

    meals = goal_client.get("/meals").get_json()
    assert [r["meal_type"] for r in meals["records"]] == ["lunch"]


def test_meal_validation(user_client):
    assert user_client.post("/meals", json={"meal_type": "brunch", "foods": [{"name": "a"}]}).status_code == 400
    assert user_client.post("/meals", json={"meal_type": "lunch", "foods": []}).status_code == 400
    assert user_client.post("/meals", json={
        "meal_type": "lunch", "foods": [{"name": "a", "calories": -5}],
    }).status_code == 400


def test_exercise_derives_calories(user_client):
    log = user_client.post("/exercises", json={"exercise_name": "요가", "duration_minutes": 60}).get_json()["log"]
    # 2.5 MET * 58kg * 1h
    assert log["calories_burned"] == 145
    assert log["intensity"] == "low"


def test_water_add_and_remove(user_client):
    day = "2025-10-15"
    user_client.post("/water", json={"date": day, "amount_ml": 250})
    user_client.post("/water", json={"date": day, "amount_ml": 500})

    response = user_client.delete(f"/water?date={day}").get_json()
    assert response["removed"]["amount_ml"] == 500
    assert response["summary"]["water_intake_ml"] == 250

    empty = user_client.delete("/water?date=2025-10-16").get_json()
    assert empty["removed"] is None


def test_water_defaults_to_one_glass(user_client):
    log = user_client.post("/water").get_json()["log"]
    assert log["amount_ml"] == 250


def test_weight_log(user_client):
    response = user_client.post("/weights", json={"weight_kg": 57.2})
    assert response.status_code == 201
    weights = user_client.get("/dashboard").get_json()["weights"]
    assert weights[-1]["weight_kg"] == 57.2


# ---------------------------------------------------------------------------
# Recommendations & weather
# ---------------------------------------------------------------------------


def test_recommendations(goal_client):
    plan = goal_client.get("/recommendations?indoor=true").get_json()
    assert len(plan["diet"]) == 3
    assert len(plan["exercise"]) == 3
    assert plan["indoor"] is True
    assert plan["advice"]


def test_recommendations_pdf(goal_client):
    response = goal_client.get("/recommendations/download")
    assert response.status_code == 200
    assert response.mimetype == "application/pdf"
    assert response.data.startswith(b"%PDF")


def test_weather(client):
    body = client.get("/weather").get_json()
    assert body["city"]
    assert body["weather"]["condition"] in ("sunny", "cloudy", "rainy", "snowy")
    assert isinstance(body["outdoor"]["recommend"], bool)
    assert body["season"] in ("spring", "summer", "fall", "winter")
    assert body["season_name"]
    assert body["ingredients"]
    assert body["exercise_tips"]


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


def test_catalog_menus_filters(client):
    menus = client.get("/catalog/menus", query_string={"category": "한식", "max_calories": 300}).get_json()["menus"]
    assert menus
    assert all(m["category"] == "한식" and m["calories"] <= 300 for m in menus)

    found = client.get("/catalog/menus", query_string={"q": "비빔밥"}).get_json()["menus"]
    assert [m["name"] for m in found] == ["비빔밥"]


def test_catalog_menus_rejects_unknown_category(client):
    assert client.get("/catalog/menus?category=pizza").status_code == 400


def test_catalog_exercises(client):
    strength = client.get("/catalog/exercises?category=strength").get_json()["exercises"]
    assert strength and all(e["category"] == "strength" for e in strength)

    walking = client.get("/catalog/exercises", query_string={"q": "걷기"}).get_json()["exercises"]
    assert len(walking) == 2

    assert client.get("/catalog/exercises?id=3").get_json()["exercise"]["name"] == "조깅"
    assert client.get("/catalog/exercises?id=999").status_code == 404


# ---------------------------------------------------------------------------
# Chat
# ---------------------------------------------------------------------------


def test_chat_history_starts_with_welcome(client):
    messages = client.get("/chat").get_json()["messages"]
    assert messages[0]["content"] == WELCOME_MESSAGE


def test_chat_without_profile(client):
    body = client.post("/chat", json={"message": "오늘 현황 알려줘"}).get_json()
    assert body["message"]["content"] == SETUP_REQUIRED_MESSAGE


def test_chat_action_is_applied_once(goal_client):
    body = goal_client.post("/chat", json={"message": "조깅 30분 했어"}).get_json()
    assert body["intent"] == "add_exercise"
    action_message = body["message"]
    assert action_message["action"]["type"] == "add_exercise"

    applied = goal_client.post("/chat/actions", json={"message_id": action_message["id"]})
    assert applied.status_code == 201
    assert applied.get_json()["record"]["exercise_name"] == "조깅"

    again = goal_client.post("/chat/actions", json={"message_id": action_message["id"]})
    assert again.status_code == 400

    assert goal_client.get("/dashboard").get_json()["weekly_exercise_count"] == 1


def test_chat_reset(goal_client):
    goal_client.post("/chat", json={"message": "안녕하세요"})
    assert len(goal_client.get("/chat").get_json()["messages"]) == 3

    messages = goal_client.delete("/chat").get_json()["messages"]
    assert len(messages) == 1


def test_chat_requires_message(client):
    assert client.post("/chat", json={"message": "   "}).status_code == 400
