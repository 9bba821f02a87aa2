# calorie_service.py
"""
Calorie arithmetic for Healthy Diary.

Every figure returned here is a whole number of kcal produced by
``round_kcal`` (half-up, like a calculator would do it). Inputs are assumed
to be validated by the caller; nothing here raises on odd values.
"""
import math
from datetime import date, datetime, timedelta

KCAL_PER_KG_FAT = 7700
MIN_TARGET_CALORIES = 1200

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,      # little or no exercise
    "light": 1.375,        # 1-3 sessions a week
    "moderate": 1.55,      # 3-5 sessions a week
    "active": 1.725,       # 6-7 sessions a week
    "very_active": 1.9,    # twice a day
}

# mean of +5 and -161
_GENDER_OFFSETS = {"male": 5, "female": -161}
_OTHER_GENDER_OFFSET = -78


def round_kcal(value):
    """Round half up to an int (2.5 -> 3), never truncate."""
    return int(math.floor(value + 0.5))


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def calculate_age(birth_date, today=None):
    # Calendar-year difference; birthdays later in the year are not counted.
    today = today or date.today()
    return today.year - _as_date(birth_date).year


def calculate_bmr(profile, today=None):
    """
    Mifflin-St Jeor:
      10 x weight(kg) + 6.25 x height(cm) - 5 x age + sex offset
    """
    age = calculate_age(profile["birth_date"], today)
    bmr = 10 * profile["weight_kg"] + 6.25 * profile["height_cm"] - 5 * age
    bmr += _GENDER_OFFSETS.get(profile.get("gender"), _OTHER_GENDER_OFFSET)
    return round_kcal(bmr)


def calculate_tdee(profile, today=None):
    multiplier = ACTIVITY_MULTIPLIERS.get(profile.get("activity_level"), 1.2)
    return round_kcal(calculate_bmr(profile, today) * multiplier)


def calculate_target_calories(current_weight, target_weight, target_date, tdee, today=None):
    today = today or date.today()
    days_to_goal = max(1, (_as_date(target_date) - today).days)

    total_deficit = (current_weight - target_weight) * KCAL_PER_KG_FAT
    daily_deficit = total_deficit / days_to_goal

    return round_kcal(max(MIN_TARGET_CALORIES, tdee - daily_deficit))


def calculate_total_calories(food_items):
    return round_kcal(sum((item.get("calories") or 0) for item in food_items))


def calculate_exercise_calories(met, weight_kg, duration_minutes):
    return round_kcal(met * weight_kg * (duration_minutes / 60.0))


def in_last_week(day, today=None):
    """True for the seven days ending on ``today``, both ends included."""
    today = today or date.today()
    return today - timedelta(days=6) <= _as_date(day) <= today


def weekly_average_calories(diet_records, today=None):
    total = sum(r["total_calories"] for r in diet_records if in_last_week(r["date"], today))
    return round_kcal(total / 7)


def calculate_daily_progress(consumed_calories, target_calories):
    if not target_calories:
        return 0
    return round_kcal(consumed_calories / target_calories * 100)


def calculate_bmi(weight, height_cm):
    h_m = height_cm / 100.0
    if h_m <= 0:
        return 0
    return round(weight / (h_m * h_m), 1)


def bmi_status(bmi):
    # Korean (Asia-Pacific) bands
    if bmi < 18.5:
        return "저체중"
    if bmi < 23:
        return "정상"
    if bmi < 25:
        return "과체중"
    if bmi < 30:
        return "비만"
    return "고도비만"
