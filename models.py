# models.py
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from database import Base, engine


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    gender = Column(String, nullable=False)            # male / female / other
    birth_date = Column(Date, nullable=False)
    height_cm = Column(Float, nullable=False)
    weight_kg = Column(Float, nullable=False)
    activity_level = Column(String, nullable=False)    # sedentary / light / ...
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    goal = relationship("Goal", back_populates="user", uselist=False, cascade="all, delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "gender": self.gender,
            "birth_date": self.birth_date,
            "height_cm": self.height_cm,
            "weight_kg": self.weight_kg,
            "activity_level": self.activity_level,
            "created_at": self.created_at,
        }


class Goal(Base):
    __tablename__ = "goals"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, unique=True)

    initial_weight = Column(Float, nullable=False)
    target_weight = Column(Float, nullable=False)
    target_date = Column(Date, nullable=False)
    daily_calorie_goal = Column(Integer, nullable=False)
    weekly_exercise_goal = Column(Integer, nullable=False, default=3)
    daily_water_goal = Column(Integer, nullable=False, default=2000)   # ml
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    user = relationship("User", back_populates="goal")

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "initial_weight": self.initial_weight,
            "target_weight": self.target_weight,
            "target_date": self.target_date,
            "daily_calorie_goal": self.daily_calorie_goal,
            "weekly_exercise_goal": self.weekly_exercise_goal,
            "daily_water_goal": self.daily_water_goal,
            "created_at": self.created_at,
        }


class DietRecord(Base):
    __tablename__ = "diet_records"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    date = Column(Date, nullable=False)
    meal_type = Column(String, nullable=False)         # breakfast / lunch / dinner / snack
    total_calories = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    foods = relationship(
        "FoodItem",
        back_populates="record",
        order_by="FoodItem.position",
        cascade="all, delete-orphan",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date,
            "meal_type": self.meal_type,
            "foods": [f.to_dict() for f in self.foods],
            "total_calories": self.total_calories,
            "created_at": self.created_at,
        }


class FoodItem(Base):
    __tablename__ = "food_items"

    id = Column(Integer, primary_key=True)
    record_id = Column(String, ForeignKey("diet_records.id"), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    name = Column(String, nullable=False)
    amount = Column(Float, nullable=False, default=1)
    unit = Column(String, nullable=False, default="count")   # g / ml / count
    calories = Column(Float, nullable=False, default=0)

    record = relationship("DietRecord", back_populates="foods")

    def to_dict(self):
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "calories": self.calories,
        }


class ExerciseLog(Base):
    __tablename__ = "exercise_logs"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    date = Column(Date, nullable=False)
    exercise_name = Column(String, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    calories_burned = Column(Integer, nullable=False)
    intensity = Column(String, nullable=False)         # low / medium / high
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date,
            "exercise_name": self.exercise_name,
            "duration_minutes": self.duration_minutes,
            "calories_burned": self.calories_burned,
            "intensity": self.intensity,
            "created_at": self.created_at,
        }


class WaterLog(Base):
    __tablename__ = "water_logs"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    date = Column(Date, nullable=False)
    amount_ml = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date,
            "amount_ml": self.amount_ml,
            "created_at": self.created_at,
        }


class WeightLog(Base):
    __tablename__ = "weight_logs"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    date = Column(Date, nullable=False)
    weight_kg = Column(Float, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date,
            "weight_kg": self.weight_kg,
            "created_at": self.created_at,
        }


def init_db():
    """Create all tables."""
    Base.metadata.create_all(bind=engine)
