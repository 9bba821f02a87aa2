# app_state.py
"""
In-process application state.

AppState owns the user's profile, goal and logs and writes every change
through an injected storage object exposing ``load() -> dict`` and
``save(snapshot)``. MemoryStorage keeps the snapshot in a dict; SqlStorage
(storage.py) keeps it in the database.
"""
import copy
import logging
import uuid
from datetime import date, datetime

from ai_engine import DEFAULT_WEIGHT_KG, FALLBACK_MET, INTENSITY_BY_DIFFICULTY
from calorie_service import (
    calculate_daily_progress,
    calculate_exercise_calories,
    calculate_target_calories,
    calculate_tdee,
    calculate_total_calories,
    in_last_week,
    round_kcal,
    weekly_average_calories,
)
from catalog import find_exercise_by_name

logger = logging.getLogger(__name__)

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")
INTENSITIES = ("low", "medium", "high")
FOOD_UNITS = ("g", "ml", "count")

DEFAULT_WEEKLY_EXERCISE_GOAL = 3
DEFAULT_DAILY_WATER_GOAL = 2000

COLLECTIONS = ("diet_records", "exercise_logs", "water_logs", "weight_logs")


def empty_snapshot():
    snapshot = {"user": None, "goal": None}
    for name in COLLECTIONS:
        snapshot[name] = []
    return snapshot


class MemoryStorage:
    def __init__(self, snapshot=None):
        self._snapshot = copy.deepcopy(snapshot) if snapshot else empty_snapshot()

    def load(self):
        return copy.deepcopy(self._snapshot)

    def save(self, snapshot):
        self._snapshot = copy.deepcopy(snapshot)

    def clear(self):
        self._snapshot = empty_snapshot()


def _new_id():
    return uuid.uuid4().hex


class AppState:
    def __init__(self, storage):
        self.storage = storage
        data = storage.load() or {}
        self.user = data.get("user")
        self.goal = data.get("goal")
        self.diet_records = list(data.get("diet_records") or [])
        self.exercise_logs = list(data.get("exercise_logs") or [])
        self.water_logs = list(data.get("water_logs") or [])
        self.weight_logs = list(data.get("weight_logs") or [])

    # -----------------------------------------------------
    # persistence
    # -----------------------------------------------------
    def snapshot(self):
        return {
            "user": self.user,
            "goal": self.goal,
            "diet_records": self.diet_records,
            "exercise_logs": self.exercise_logs,
            "water_logs": self.water_logs,
            "weight_logs": self.weight_logs,
        }

    def _save(self):
        self.storage.save(self.snapshot())

    def _user_id(self):
        return self.user["id"] if self.user else None

    def clear_all_data(self):
        """Forget the user, the goal and every log, here and in storage."""
        self.storage.clear()
        data = empty_snapshot()
        self.user = data["user"]
        self.goal = data["goal"]
        self.diet_records = data["diet_records"]
        self.exercise_logs = data["exercise_logs"]
        self.water_logs = data["water_logs"]
        self.weight_logs = data["weight_logs"]
        logger.info("all data cleared")

    # -----------------------------------------------------
    # profile & goal
    # -----------------------------------------------------
    def set_user(self, profile):
        user = dict(profile)
        if self.user:
            user.setdefault("id", self.user["id"])
            user.setdefault("created_at", self.user.get("created_at"))
        user.setdefault("id", _new_id())
        if not user.get("created_at"):
            user["created_at"] = datetime.now()
        self.user = user
        self._save()
        return user

    def set_goal(self, goal, today=None):
        """
        Store the single active goal. ``initial_weight`` is kept from the
        goal being replaced, or else taken from the user's current weight.
        ``daily_calorie_goal`` falls back to the computed target for the
        goal date.
        """
        goal = dict(goal)
        goal.setdefault("id", self.goal["id"] if self.goal else _new_id())
        goal["user_id"] = self._user_id()
        if goal.get("initial_weight") is None and self.goal:
            goal["initial_weight"] = self.goal.get("initial_weight")
        if goal.get("initial_weight") is None and self.user:
            goal["initial_weight"] = self.user["weight_kg"]
        if not goal.get("daily_calorie_goal") and self.user:
            tdee = calculate_tdee(self.user, today)
            goal["daily_calorie_goal"] = calculate_target_calories(
                self.user["weight_kg"], goal["target_weight"], goal["target_date"], tdee, today
            )
        if not goal.get("weekly_exercise_goal"):
            goal["weekly_exercise_goal"] = DEFAULT_WEEKLY_EXERCISE_GOAL
        if not goal.get("daily_water_goal"):
            goal["daily_water_goal"] = DEFAULT_DAILY_WATER_GOAL
        if not goal.get("created_at"):
            goal["created_at"] = datetime.now()
        self.goal = goal
        self._save()
        return goal

    # -----------------------------------------------------
    # logs
    # -----------------------------------------------------
    def add_diet_record(self, day, meal_type, foods):
        foods = [
            {
                "name": f["name"],
                "amount": f.get("amount", 1),
                "unit": f.get("unit", "count"),
                "calories": f.get("calories") or 0,
            }
            for f in foods
        ]
        record = {
            "id": _new_id(),
            "user_id": self._user_id(),
            "date": day,
            "meal_type": meal_type,
            "foods": foods,
            "total_calories": calculate_total_calories(foods),
            "created_at": datetime.now(),
        }
        self.diet_records.append(record)
        self._save()
        logger.info("diet record %s: %s kcal (%s)", record["id"], record["total_calories"], meal_type)
        return record

    def add_exercise_log(self, day, exercise_name, duration_minutes,
                         calories_burned=None, intensity=None):
        exercise = find_exercise_by_name(exercise_name)
        if calories_burned is None:
            met = exercise["met"] if exercise else FALLBACK_MET
            weight = self.user["weight_kg"] if self.user else DEFAULT_WEIGHT_KG
            calories_burned = calculate_exercise_calories(met, weight, duration_minutes)
        if intensity is None:
            difficulty = exercise["difficulty"] if exercise else "medium"
            intensity = INTENSITY_BY_DIFFICULTY[difficulty]

        log = {
            "id": _new_id(),
            "user_id": self._user_id(),
            "date": day,
            "exercise_name": exercise["name"] if exercise else exercise_name,
            "duration_minutes": duration_minutes,
            "calories_burned": round_kcal(calories_burned),
            "intensity": intensity,
            "created_at": datetime.now(),
        }
        self.exercise_logs.append(log)
        self._save()
        logger.info("exercise log %s: %s %s min", log["id"], log["exercise_name"], duration_minutes)
        return log

    def add_water_log(self, day, amount_ml):
        log = {
            "id": _new_id(),
            "user_id": self._user_id(),
            "date": day,
            "amount_ml": amount_ml,
            "created_at": datetime.now(),
        }
        self.water_logs.append(log)
        self._save()
        return log

    def remove_water_log(self, day):
        """Drop the most recently added water log of ``day``; None if there is none."""
        indices = [i for i, log in enumerate(self.water_logs) if log["date"] == day]
        if not indices:
            return None
        removed = self.water_logs.pop(indices[-1])
        self._save()
        return removed

    def add_weight_log(self, day, weight_kg):
        log = {
            "id": _new_id(),
            "user_id": self._user_id(),
            "date": day,
            "weight_kg": weight_kg,
            "created_at": datetime.now(),
        }
        self.weight_logs.append(log)
        self._save()
        return log

    def apply_action(self, action, day=None):
        """Store the record proposed by a chat reply."""
        day = day or date.today()
        data = action["data"]
        if action["type"] == "add_meal":
            return self.add_diet_record(day, data["meal_type"], data["foods"])
        if action["type"] == "add_exercise":
            return self.add_exercise_log(
                day,
                data["exercise_name"],
                data["duration_minutes"],
                calories_burned=data.get("calories_burned"),
                intensity=data.get("intensity"),
            )
        raise ValueError(f"unknown action type: {action['type']}")

    # -----------------------------------------------------
    # read models
    # -----------------------------------------------------
    def context(self, indoor=True):
        return {
            "user": self.user,
            "goal": self.goal,
            "diet_records": self.diet_records,
            "exercise_logs": self.exercise_logs,
            "indoor": indoor,
        }

    def records_for(self, day):
        return [r for r in self.diet_records if r["date"] == day]

    def weekly_exercise_count(self, day=None):
        return sum(1 for log in self.exercise_logs if in_last_week(log["date"], day))

    def recent_average_calories(self, day=None):
        return weekly_average_calories(self.diet_records, day)

    def daily_summary(self, day=None):
        day = day or date.today()
        consumed = sum(r["total_calories"] for r in self.diet_records if r["date"] == day)
        burned = sum(l["calories_burned"] for l in self.exercise_logs if l["date"] == day)
        water = sum(w["amount_ml"] for w in self.water_logs if w["date"] == day)

        goal = self.goal or {}
        target = goal.get("daily_calorie_goal") or 0
        return {
            "date": day,
            "total_calories_consumed": consumed,
            "total_calories_burned": burned,
            "remaining_calories": target - consumed + burned,
            "water_intake_ml": water,
            "target_calories": target,
            "target_water_ml": goal.get("daily_water_goal") or DEFAULT_DAILY_WATER_GOAL,
            "progress_percentage": calculate_daily_progress(consumed, target),
        }
