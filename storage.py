# storage.py
"""
SQLAlchemy-backed storage for AppState: one user's snapshot in, one out.
Diet/exercise/water/weight rows are append-only; rows that disappeared from
the snapshot are deleted, new ones inserted.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from app_state import empty_snapshot
from database import SessionLocal
from models import DietRecord, ExerciseLog, FoodItem, Goal, User, WaterLog, WeightLog

logger = logging.getLogger(__name__)

USER_FIELDS = ("id", "name", "gender", "birth_date", "height_cm", "weight_kg",
               "activity_level", "created_at")
GOAL_FIELDS = ("id", "user_id", "initial_weight", "target_weight", "target_date",
               "daily_calorie_goal", "weekly_exercise_goal", "daily_water_goal", "created_at")


def _pick(data, fields):
    return {f: data.get(f) for f in fields}


def _diet_row(record):
    row = DietRecord(
        id=record["id"],
        user_id=record["user_id"],
        date=record["date"],
        meal_type=record["meal_type"],
        total_calories=record["total_calories"],
        created_at=record["created_at"],
    )
    row.foods = [
        FoodItem(position=i, name=f["name"], amount=f.get("amount", 1),
                 unit=f.get("unit", "count"), calories=f.get("calories") or 0)
        for i, f in enumerate(record["foods"])
    ]
    return row


def _exercise_row(log):
    return ExerciseLog(**_pick(log, ("id", "user_id", "date", "exercise_name", "duration_minutes",
                                     "calories_burned", "intensity", "created_at")))


def _water_row(log):
    return WaterLog(**_pick(log, ("id", "user_id", "date", "amount_ml", "created_at")))


def _weight_row(log):
    return WeightLog(**_pick(log, ("id", "user_id", "date", "weight_kg", "created_at")))


_TABLES = (
    ("diet_records", DietRecord, _diet_row),
    ("exercise_logs", ExerciseLog, _exercise_row),
    ("water_logs", WaterLog, _water_row),
    ("weight_logs", WeightLog, _weight_row),
)


class SqlStorage:
    def __init__(self, user_id=None, session_factory=SessionLocal):
        self.user_id = user_id
        self.session_factory = session_factory

    def load(self):
        snapshot = empty_snapshot()
        if not self.user_id:
            return snapshot

        db = self.session_factory()
        try:
            user = db.query(User).filter_by(id=self.user_id).first()
            if user is None:
                return snapshot
            snapshot["user"] = user.to_dict()
            goal = db.query(Goal).filter_by(user_id=self.user_id).first()
            snapshot["goal"] = goal.to_dict() if goal else None

            for key, model, _ in _TABLES:
                rows = (
                    db.query(model)
                    .filter_by(user_id=self.user_id)
                    .order_by(model.created_at)
                    .all()
                )
                snapshot[key] = [row.to_dict() for row in rows]
        finally:
            db.close()
        return snapshot

    def save(self, snapshot):
        user = snapshot.get("user")
        if not user:
            return
        self.user_id = user["id"]

        db = self.session_factory()
        try:
            db.merge(User(**_pick(user, USER_FIELDS)))
            if snapshot.get("goal"):
                db.merge(Goal(**_pick(snapshot["goal"], GOAL_FIELDS)))

            for key, model, to_row in _TABLES:
                self._sync(db, model, snapshot.get(key) or [], to_row)

            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("saving snapshot for user %s failed", self.user_id)
            raise
        finally:
            db.close()

    def _sync(self, db, model, records, to_row):
        existing = {
            row.id: row
            for row in db.query(model).filter_by(user_id=self.user_id).all()
        }
        wanted = {r["id"] for r in records}

        for row_id, row in existing.items():
            if row_id not in wanted:
                db.delete(row)
        for record in records:
            if record["id"] not in existing:
                db.add(to_row(record))

    def clear(self):
        if not self.user_id:
            return

        db = self.session_factory()
        try:
            for _, model, _ in _TABLES:
                for row in db.query(model).filter_by(user_id=self.user_id).all():
                    db.delete(row)
            user = db.query(User).filter_by(id=self.user_id).first()
            if user is not None:
                db.delete(user)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("clearing data for user %s failed", self.user_id)
            raise
        finally:
            db.close()
        self.user_id = None
