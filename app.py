# app.py
import logging
from datetime import date, datetime
from functools import wraps

from flask import Flask, jsonify, request, send_file, session
from flask.json.provider import DefaultJSONProvider
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import BadRequest, HTTPException

import config
from ai_engine import build_daily_plan
from app_state import FOOD_UNITS, INTENSITIES, MEAL_TYPES, AppState
from calorie_service import ACTIVITY_MULTIPLIERS, bmi_status, calculate_bmi, calculate_bmr, calculate_tdee
from catalog import (
    EXERCISE_CATEGORIES,
    EXERCISES,
    FOOD_CATEGORIES,
    FOOD_MENU,
    find_menu_by_name,
    get_exercise_by_id,
    get_exercises_by_category,
    get_menus_by_calories,
    get_menus_by_category,
    get_menus_by_season,
    search_exercises,
)
from chatbot import WELCOME_MESSAGE, analyze_user_data, make_chat_message, send_chat_message
from models import init_db
from report import render_plan_pdf
from seasons import (
    SEASONS,
    get_current_season,
    get_season_name,
    get_seasonal_diet_tips,
    get_seasonal_exercise_tips,
    get_seasonal_ingredients,
)
from storage import SqlStorage
from weather import get_mock_weather, should_recommend_outdoor

GENDERS = ("male", "female", "other")
CHAT_HISTORY_LIMIT = 10
DEFAULT_WATER_ML = 250


class IsoJSONProvider(DefaultJSONProvider):
    """Dates go out as ISO strings instead of HTTP dates."""

    @staticmethod
    def default(o):
        if isinstance(o, (date, datetime)):
            return o.isoformat()
        return DefaultJSONProvider.default(o)


app = Flask(__name__)
app.json = IsoJSONProvider(app)
app.secret_key = config.SECRET_KEY

logging.basicConfig(level=config.LOG_LEVEL)

# Initialize DB
init_db()


# ---------------------------------------------------------
# Helper functions: current profile and request parsing
# ---------------------------------------------------------
def get_state():
    return AppState(SqlStorage(session.get("user_id")))


def profile_required(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        state = get_state()
        if not state.user:
            return jsonify({"error": "Please set up your profile first."}), 401
        return f(state, *args, **kwargs)

    return wrapper


def _payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object.")
    return data


def _parse_date(value, field):
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise BadRequest(f"{field} must be an ISO date (YYYY-MM-DD).")


def _day(value=None):
    """Date from a payload/query value, today when missing."""
    if value in (None, ""):
        return date.today()
    return _parse_date(value, "date")


def _positive(data, field, cast=float, required=True):
    value = data.get(field)
    if value in (None, ""):
        if required:
            raise BadRequest(f"{field} is required.")
        return None
    try:
        value = cast(value)
    except (TypeError, ValueError):
        raise BadRequest(f"{field} must be a number.")
    if value <= 0:
        raise BadRequest(f"{field} must be positive.")
    return value


def _choice(data, field, choices, default=None):
    value = data.get(field, default)
    if value not in choices:
        raise BadRequest(f"{field} must be one of: {', '.join(choices)}.")
    return value


def _text(data, field):
    value = str(data.get(field) or "").strip()
    if not value:
        raise BadRequest(f"{field} is required.")
    return value


def _indoor_flag():
    value = request.args.get("indoor")
    if value is not None:
        return value.lower() in ("1", "true", "yes")
    return not should_recommend_outdoor(get_mock_weather())["recommend"]


def _chat_history():
    history = session.get("chat")
    if not history:
        history = [make_chat_message("assistant", WELCOME_MESSAGE)]
    return history


# ---------------------------------------------------------
# Errors
# ---------------------------------------------------------
@app.errorhandler(HTTPException)
def handle_http_error(e):
    return jsonify({"error": e.description}), e.code


@app.errorhandler(SQLAlchemyError)
def handle_db_error(e):
    app.logger.error("database error: %s", e)
    return jsonify({"error": "Database error."}), 500


# ---------------------------------------------------------
# Profile & goal
# ---------------------------------------------------------
@app.route("/profile", methods=["GET", "POST", "DELETE"])
def profile():
    state = get_state()

    if request.method == "DELETE":
        if not state.user:
            return jsonify({"error": "Please set up your profile first."}), 401
        user_id = state.user["id"]
        state.clear_all_data()
        session.pop("user_id", None)
        session.pop("chat", None)
        app.logger.info("profile %s and its records deleted", user_id)
        return jsonify({"profile": None})

    if request.method == "POST":
        data = _payload()
        profile = {
            "name": _text(data, "name"),
            "gender": _choice(data, "gender", GENDERS),
            "birth_date": _parse_date(data.get("birth_date"), "birth_date"),
            "height_cm": _positive(data, "height_cm"),
            "weight_kg": _positive(data, "weight_kg"),
            "activity_level": _choice(data, "activity_level", tuple(ACTIVITY_MULTIPLIERS)),
        }
        if profile["birth_date"] >= date.today():
            raise BadRequest("birth_date must be in the past.")

        user = state.set_user(profile)
        session["user_id"] = user["id"]
        app.logger.info("profile saved for %s", user["id"])
        return jsonify({"profile": user}), 201

    if not state.user:
        return jsonify({"profile": None})

    bmi = calculate_bmi(state.user["weight_kg"], state.user["height_cm"])
    return jsonify({
        "profile": state.user,
        "bmi": bmi,
        "bmi_status": bmi_status(bmi),
        "bmr": calculate_bmr(state.user),
        "tdee": calculate_tdee(state.user),
    })


@app.route("/goal", methods=["GET", "POST"])
@profile_required
def goal(state):
    if request.method == "POST":
        data = _payload()
        target_date = _parse_date(data.get("target_date"), "target_date")
        if target_date <= date.today():
            raise BadRequest("target_date must be in the future.")

        goal = {
            "target_weight": _positive(data, "target_weight"),
            "target_date": target_date,
            "initial_weight": _positive(data, "initial_weight", required=False),
            "daily_calorie_goal": _positive(data, "daily_calorie_goal", int, required=False),
            "weekly_exercise_goal": _positive(data, "weekly_exercise_goal", int, required=False),
            "daily_water_goal": _positive(data, "daily_water_goal", int, required=False),
        }
        if state.goal:
            goal["id"] = state.goal["id"]
            goal["created_at"] = state.goal["created_at"]
        return jsonify({"goal": state.set_goal(goal)}), 201

    return jsonify({"goal": state.goal})


# ---------------------------------------------------------
# Logs
# ---------------------------------------------------------
@app.route("/meals", methods=["GET", "POST"])
@profile_required
def meals(state):
    if request.method == "POST":
        data = _payload()
        foods = data.get("foods")
        if not isinstance(foods, list) or not foods:
            raise BadRequest("foods must be a non-empty list.")

        parsed = []
        for food in foods:
            if not isinstance(food, dict):
                raise BadRequest("each food must be an object.")
            calories = food.get("calories", 0)
            if not isinstance(calories, (int, float)) or calories < 0:
                raise BadRequest("calories must be a non-negative number.")
            parsed.append({
                "name": _text(food, "name"),
                "amount": _positive(food, "amount", required=False) or 1,
                "unit": _choice(food, "unit", FOOD_UNITS, default="count"),
                "calories": calories,
            })

        record = state.add_diet_record(
            _day(data.get("date")),
            _choice(data, "meal_type", MEAL_TYPES),
            parsed,
        )
        return jsonify({"record": record}), 201

    day = _day(request.args.get("date"))
    return jsonify({"date": day, "records": state.records_for(day)})


@app.route("/exercises", methods=["POST"])
@profile_required
def exercises(state):
    data = _payload()
    intensity = data.get("intensity")
    if intensity is not None:
        _choice(data, "intensity", INTENSITIES)

    log = state.add_exercise_log(
        _day(data.get("date")),
        _text(data, "exercise_name"),
        _positive(data, "duration_minutes", int),
        calories_burned=_positive(data, "calories_burned", int, required=False),
        intensity=intensity,
    )
    return jsonify({"log": log}), 201


@app.route("/water", methods=["POST", "DELETE"])
@profile_required
def water(state):
    if request.method == "DELETE":
        day = _day(request.args.get("date"))
        removed = state.remove_water_log(day)
        return jsonify({"removed": removed, "summary": state.daily_summary(day)})

    data = request.get_json(silent=True) or {}
    amount = _positive(data, "amount_ml", int, required=False) or DEFAULT_WATER_ML
    day = _day(data.get("date"))
    log = state.add_water_log(day, amount)
    return jsonify({"log": log, "summary": state.daily_summary(day)}), 201


@app.route("/weights", methods=["POST"])
@profile_required
def weights(state):
    data = _payload()
    log = state.add_weight_log(_day(data.get("date")), _positive(data, "weight_kg"))
    return jsonify({"log": log}), 201


# ---------------------------------------------------------
# Dashboard & recommendations
# ---------------------------------------------------------
@app.route("/dashboard")
@profile_required
def dashboard(state):
    day = _day(request.args.get("date"))
    analysis = analyze_user_data(state.context(), day)
    bmi = calculate_bmi(state.user["weight_kg"], state.user["height_cm"])

    goal = state.goal or {}
    return jsonify({
        "summary": state.daily_summary(day),
        "analysis": analysis.to_dict(),
        "weekly_exercise_count": state.weekly_exercise_count(day),
        "weekly_exercise_goal": goal.get("weekly_exercise_goal"),
        "bmi": bmi,
        "bmi_status": bmi_status(bmi),
        "weights": [
            {"date": w["date"], "weight_kg": w["weight_kg"]} for w in state.weight_logs
        ],
    })


def _plan_for(state):
    today = date.today()
    return build_daily_plan(
        state.user,
        state.goal,
        indoor=_indoor_flag(),
        recent_calories=state.recent_average_calories(today),
        recent_exercise_count=state.weekly_exercise_count(today),
        today=today,
    )


@app.route("/recommendations")
@profile_required
def recommendations(state):
    return jsonify(_plan_for(state))


@app.route("/recommendations/download")
@profile_required
def download_recommendations(state):
    plan = _plan_for(state)
    buffer = render_plan_pdf(state.user, plan, today=date.today())
    return send_file(
        buffer,
        as_attachment=True,
        download_name="healthy_diary_plan.pdf",
        mimetype="application/pdf",
    )


@app.route("/weather")
def weather():
    season = get_current_season()
    current = get_mock_weather(season)
    return jsonify({
        "city": config.CITY,
        "season": season,
        "season_name": get_season_name(season),
        "weather": current,
        "outdoor": should_recommend_outdoor(current),
        "ingredients": get_seasonal_ingredients(season),
        "diet_tips": get_seasonal_diet_tips(season),
        "exercise_tips": get_seasonal_exercise_tips(season),
    })


# ---------------------------------------------------------
# Catalog
# ---------------------------------------------------------
@app.route("/catalog/menus")
def catalog_menus():
    menus = FOOD_MENU
    args = request.args

    if args.get("q"):
        menu = find_menu_by_name(args["q"])
        menus = [menu] if menu else []
    if args.get("category"):
        menus = get_menus_by_category(_choice(args, "category", FOOD_CATEGORIES), menus)
    if args.get("season"):
        menus = get_menus_by_season(_choice(args, "season", SEASONS), menus)
    if args.get("min_calories") or args.get("max_calories"):
        low = _positive(args, "min_calories", int, required=False) or 0
        high = _positive(args, "max_calories", int, required=False) or float("inf")
        menus = get_menus_by_calories(low, high, menus)
    return jsonify({"menus": menus})


@app.route("/catalog/exercises")
def catalog_exercises():
    args = request.args
    if args.get("id"):
        exercise = get_exercise_by_id(args["id"])
        if exercise is None:
            return jsonify({"error": "No such exercise."}), 404
        return jsonify({"exercise": exercise})

    exercises = search_exercises(args["q"]) if args.get("q") else EXERCISES
    if args.get("category"):
        exercises = get_exercises_by_category(_choice(args, "category", EXERCISE_CATEGORIES), exercises)
    return jsonify({"exercises": exercises})


# ---------------------------------------------------------
# Chat
# ---------------------------------------------------------
@app.route("/chat", methods=["GET", "POST", "DELETE"])
def chat():
    if request.method == "DELETE":
        session.pop("chat", None)
        return jsonify({"messages": _chat_history()})

    if request.method == "GET":
        return jsonify({"messages": _chat_history()})

    text = _text(_payload(), "message")
    state = get_state()
    reply = send_chat_message(text, state.context(indoor=_indoor_flag()))

    user_message = make_chat_message("user", text)
    assistant_message = make_chat_message("assistant", reply["message"], action=reply["action"])
    history = _chat_history() + [user_message, assistant_message]
    session["chat"] = history[-CHAT_HISTORY_LIMIT:]

    return jsonify({
        "message": assistant_message,
        "intent": reply["intent"],
        "confidence": reply["confidence"],
        "entities": reply["entities"],
    })


@app.route("/chat/actions", methods=["POST"])
@profile_required
def apply_chat_action(state):
    message_id = _text(_payload(), "message_id")
    history = _chat_history()

    message = next((m for m in history if m["id"] == message_id), None)
    if not message or not message.get("action"):
        raise BadRequest("No pending action for that message.")
    if message.get("applied"):
        raise BadRequest("That action was already applied.")

    record = state.apply_action(message["action"])
    message["applied"] = True
    session["chat"] = history
    app.logger.info("chat action %s applied", message["action"]["type"])
    return jsonify({"type": message["action"]["type"], "record": record}), 201


if __name__ == "__main__":
    app.run(debug=True)
