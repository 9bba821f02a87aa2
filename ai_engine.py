# ai_engine.py
"""
Rule-based recommendation engine for Healthy Diary.

Diet:     3 menus around a third of the daily calorie goal, seasonal first.
Exercise: 3 exercises matched to the user's activity level and to an
          indoor/outdoor choice, with duration and burned kcal filled in.
Advice:   short text insights (calorie adherence, exercise frequency,
          one seasonal tip).

Randomness comes in through a ``shuffle`` callable (default
``random.shuffle``) that reorders a list in place.
"""
import logging
import random

from calorie_service import (
    calculate_bmi,
    calculate_bmr,
    calculate_exercise_calories,
    calculate_target_calories,
    calculate_tdee,
    round_kcal,
)
from catalog import EXERCISES, FOOD_MENU
from seasons import get_current_season

logger = logging.getLogger(__name__)

DEFAULT_DAILY_CALORIES = 2000
DEFAULT_WEIGHT_KG = 70
MEAL_CALORIE_WINDOW = 200
RECOMMENDATION_COUNT = 3

# ordered: easy < medium < hard
DIFFICULTY_TIERS = ("easy", "medium", "hard")
DURATION_BY_TIER = {"easy": 40, "medium": 30, "hard": 20}
INTENSITY_BY_DIFFICULTY = {"easy": "low", "medium": "medium", "hard": "high"}

# for exercises missing from the catalog
FALLBACK_MET = 5.0

INDOOR_AEROBIC = ("줄넘기", "에어로빅")
WINTER_OUTDOOR = ("걷기 (느린 속도)", "걷기 (빠른 속도)", "등산", "조깅")

SEASON_ADVICE = {
    "spring": "봄나물로 비타민을 보충하고, 야외 활동을 늘려보세요.",
    "summer": "더운 여름, 수분 섭취를 충분히 하세요. 하루 2L 이상 물을 마시세요.",
    "fall": "가을은 운동하기 좋은 계절입니다. 등산이나 트레킹을 추천합니다.",
    "winter": "겨울철에는 따뜻한 국물 요리와 뿌리채소로 체온을 유지하고, "
              "추운 날에는 홈트레이닝으로 꾸준히 운동하세요.",
}


def _tier(value):
    return value if value in DIFFICULTY_TIERS else "medium"


def _tier_distance(a, b):
    return abs(DIFFICULTY_TIERS.index(_tier(a)) - DIFFICULTY_TIERS.index(_tier(b)))


def _pick(pool, count, shuffle):
    pool = list(pool)
    shuffle(pool)
    return pool[:count]


# ---------------------------------------------------------
# Diet
# ---------------------------------------------------------
def _menu_to_recommendation(menu):
    return {
        "id": menu["id"],
        "type": "diet",
        "title": menu["name"],
        "description": menu.get("description")
        or f"{menu['category']} 메뉴로 {menu['calories']}kcal",
        "calories": menu["calories"],
        "ingredients": list(menu.get("ingredients") or []),
        "difficulty": _tier(menu.get("difficulty")),
        "cooking_steps": list(menu.get("cooking_steps") or []),
        "cooking_time": menu.get("cooking_time"),
        "nutrients": {
            "protein": menu.get("protein", 0),
            "carbs": menu.get("carbs", 0),
            "fat": menu.get("fat", 0),
        },
    }


def meal_calorie_target(goal):
    daily = (goal or {}).get("daily_calorie_goal") or DEFAULT_DAILY_CALORIES
    return round_kcal(daily / 3)


def recommend_diet(goal, season, shuffle=random.shuffle, catalog=None):
    catalog = FOOD_MENU if catalog is None else catalog
    meal_calories = meal_calorie_target(goal)
    low = meal_calories - MEAL_CALORIE_WINDOW
    high = meal_calories + MEAL_CALORIE_WINDOW

    seasonal = [m for m in catalog if m["season"] in (season, "all")]
    candidates = [m for m in seasonal if low <= m["calories"] <= high]

    if len(candidates) >= RECOMMENDATION_COUNT:
        selected = _pick(candidates, RECOMMENDATION_COUNT, shuffle)
    else:
        selected = [m for m in catalog if low <= m["calories"] <= high][:RECOMMENDATION_COUNT]

    if len(selected) < RECOMMENDATION_COUNT:
        rest = [m for m in catalog if m not in selected]
        selected += _pick(rest, RECOMMENDATION_COUNT - len(selected), shuffle)
    while catalog and len(selected) < RECOMMENDATION_COUNT:
        # catalog smaller than three entries; repeats are allowed
        selected += _pick(catalog, 1, shuffle)

    logger.debug(
        "diet recommendation season=%s target=%s picked=%s",
        season, meal_calories, [m["id"] for m in selected],
    )
    return [_menu_to_recommendation(m) for m in selected]


# ---------------------------------------------------------
# Exercise
# ---------------------------------------------------------
def target_difficulty(profile):
    level = (profile or {}).get("activity_level")
    if level in ("sedentary", "light"):
        return "easy"
    if level == "very_active":
        return "hard"
    return "medium"


def _exercise_pool(season, indoor, catalog):
    if indoor:
        return [
            e for e in catalog
            if e["category"] in ("strength", "other")
            or (e["category"] == "aerobic" and e["name"] in INDOOR_AEROBIC)
        ]
    if season == "winter":
        return [e for e in catalog if e["name"] in WINTER_OUTDOOR]
    return [e for e in catalog if e["category"] in ("aerobic", "sport")]


def _exercise_to_recommendation(exercise, weight_kg):
    difficulty = _tier(exercise.get("difficulty"))
    duration = DURATION_BY_TIER[difficulty]
    return {
        "id": exercise["id"],
        "type": "exercise",
        "title": exercise["name"],
        "description": exercise.get("description", ""),
        "calories": calculate_exercise_calories(exercise["met"], weight_kg, duration),
        "duration": duration,
        "difficulty": difficulty,
        "met": exercise["met"],
        "category": exercise["category"],
    }


def recommend_exercise(profile, season, indoor=True, shuffle=random.shuffle, catalog=None):
    catalog = EXERCISES if catalog is None else catalog
    difficulty = target_difficulty(profile)
    weight_kg = (profile or {}).get("weight_kg") or DEFAULT_WEIGHT_KG

    pool = _exercise_pool(season, indoor, catalog)
    if len(pool) < RECOMMENDATION_COUNT:
        pool = list(catalog)

    matched = [e for e in pool if _tier_distance(e.get("difficulty"), difficulty) <= 1]
    if len(matched) < RECOMMENDATION_COUNT:
        matched = pool

    selected = _pick(matched, RECOMMENDATION_COUNT, shuffle)
    logger.debug(
        "exercise recommendation season=%s indoor=%s tier=%s picked=%s",
        season, indoor, difficulty, [e["id"] for e in selected],
    )
    return [_exercise_to_recommendation(e, weight_kg) for e in selected]


# ---------------------------------------------------------
# Advice
# ---------------------------------------------------------
def generate_advice(goal, recent_calories=None, recent_exercise_count=None, season=None):
    advice = []
    season = season or get_current_season()

    if goal and recent_calories:
        diff = recent_calories - goal["daily_calorie_goal"]
        if diff > 300:
            advice.append(
                f"최근 목표보다 {round_kcal(diff)}kcal 더 섭취했습니다. 저녁 식사량을 조금 줄여보세요."
            )
        elif diff < -300:
            advice.append(
                f"목표보다 {abs(round_kcal(diff))}kcal 적게 섭취하고 있습니다. "
                "너무 무리한 다이어트는 건강에 해로울 수 있어요."
            )
        else:
            advice.append("목표 칼로리를 잘 지키고 있습니다. 계속 이 페이스를 유지하세요!")

    if goal and recent_exercise_count is not None:
        weekly_goal = goal.get("weekly_exercise_goal") or 0
        if recent_exercise_count < weekly_goal:
            advice.append(
                f"이번 주 운동 {recent_exercise_count}회로 목표에 조금 부족합니다. "
                f"{weekly_goal - recent_exercise_count}회 더 운동하면 목표 달성!"
            )
        else:
            advice.append("주간 운동 목표를 달성했습니다! 훌륭해요! 💪")

    advice.append(SEASON_ADVICE.get(season, SEASON_ADVICE["fall"]))
    return advice


def build_daily_plan(profile, goal, season=None, indoor=True,
                     recent_calories=None, recent_exercise_count=None,
                     shuffle=random.shuffle, today=None) -> dict:
    season = season or get_current_season(today)

    bmi = bmr = tdee = target = None
    if profile:
        bmi = calculate_bmi(profile["weight_kg"], profile["height_cm"])
        bmr = calculate_bmr(profile, today)
        tdee = calculate_tdee(profile, today)
        if goal:
            target = calculate_target_calories(
                profile["weight_kg"], goal["target_weight"], goal["target_date"], tdee, today
            )

    return {
        "season": season,
        "indoor": indoor,
        "bmi": bmi,
        "bmr": bmr,
        "tdee": tdee,
        "calories_target": target,
        "diet": recommend_diet(goal, season, shuffle=shuffle),
        "exercise": recommend_exercise(profile, season, indoor, shuffle=shuffle),
        "advice": generate_advice(goal, recent_calories, recent_exercise_count, season),
    }
