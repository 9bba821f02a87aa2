import os
import tempfile
from datetime import date, datetime

import pytest

# must be set before config.py is imported anywhere
_DB_DIR = tempfile.mkdtemp(prefix="healthy_diary_")
os.environ["HEALTHY_DIARY_DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["HEALTHY_DIARY_SECRET_KEY"] = "test-secret"

from app_state import AppState, MemoryStorage  # noqa: E402


@pytest.fixture
def profile():
    return {
        "id": "user-1",
        "name": "민수",
        "gender": "male",
        "birth_date": date(1990, 5, 1),
        "height_cm": 175,
        "weight_kg": 70,
        "activity_level": "moderate",
        "created_at": datetime(2025, 1, 1, 9, 0),
    }


@pytest.fixture
def goal():
    return {
        "id": "goal-1",
        "user_id": "user-1",
        "initial_weight": 75,
        "target_weight": 65,
        "target_date": date(2026, 3, 1),
        "daily_calorie_goal": 1800,
        "weekly_exercise_goal": 3,
        "daily_water_goal": 2000,
        "created_at": datetime(2025, 1, 1, 9, 0),
    }


@pytest.fixture
def state():
    return AppState(MemoryStorage())


@pytest.fixture
def client():
    from app import app

    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
