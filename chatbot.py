# chatbot.py
"""
Scripted chat assistant.

send_chat_message() classifies the message, takes a UserAnalysisSnapshot of
the user's data and asks respond() for {"message", "action"}. An action
({"type": "add_meal" | "add_exercise", "data": {...}}) is only a proposal;
the caller decides whether to store it.
"""
import logging
import random
import uuid
from dataclasses import asdict, dataclass
from datetime import date, datetime

from ai_engine import (
    DEFAULT_WEIGHT_KG,
    FALLBACK_MET,
    INTENSITY_BY_DIFFICULTY,
    recommend_diet,
    recommend_exercise,
)
from calorie_service import (
    calculate_bmr,
    calculate_daily_progress,
    calculate_exercise_calories,
    calculate_tdee,
    round_kcal,
    weekly_average_calories,
)
from catalog import find_exercise_by_name, find_menu_by_name, get_menus_by_season
from intent_classifier import GENERAL_QUESTION, analyze_message
from seasons import get_current_season, get_season_name, get_seasonal_diet_tips

logger = logging.getLogger(__name__)

SETUP_REQUIRED_MESSAGE = (
    '아직 개인 정보가 설정되지 않았습니다. 먼저 "목표" 탭에서 개인 정보와 목표를 설정해주세요!'
)
WELCOME_MESSAGE = (
    "안녕하세요! 건강 관리 AI 어시스턴트입니다. 식단, 운동, 목표 등에 대해 무엇이든 물어보세요! 🤖"
)

MEAL_TYPE_NAMES = {
    "breakfast": "아침",
    "lunch": "점심",
    "dinner": "저녁",
    "snack": "간식",
}


@dataclass
class UserAnalysisSnapshot:
    has_user_data: bool = False
    today_calories: int = 0
    today_exercise_calories: int = 0
    weekly_average: int = 0
    bmr: int = 0
    tdee: int = 0
    target_calories: int = 0
    target_weight: float = 0
    current_weight: float = 0
    remaining_calories: int = 0

    def to_dict(self):
        return asdict(self)


def _day(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def analyze_user_data(context, today=None):
    user = context.get("user")
    goal = context.get("goal")
    if not user or not goal:
        return UserAnalysisSnapshot()

    today = today or date.today()
    diet_records = context.get("diet_records") or []
    exercise_logs = context.get("exercise_logs") or []

    today_calories = sum(r["total_calories"] for r in diet_records if _day(r["date"]) == today)
    today_burned = sum(l["calories_burned"] for l in exercise_logs if _day(l["date"]) == today)

    return UserAnalysisSnapshot(
        has_user_data=True,
        today_calories=today_calories,
        today_exercise_calories=today_burned,
        weekly_average=weekly_average_calories(diet_records, today),
        bmr=calculate_bmr(user, today),
        tdee=calculate_tdee(user, today),
        target_calories=goal["daily_calorie_goal"],
        target_weight=goal["target_weight"],
        current_weight=user["weight_kg"],
        remaining_calories=goal["daily_calorie_goal"] - today_calories + today_burned,
    )


def make_chat_message(role, content, action=None, timestamp=None):
    message = {
        "id": uuid.uuid4().hex,
        "role": role,
        "content": content,
        "timestamp": (timestamp or datetime.now()).isoformat(),
    }
    if action:
        message["action"] = action
    return message


def _meal_type_for_hour(hour):
    if hour < 10:
        return "breakfast"
    if hour < 15:
        return "lunch"
    if hour < 21:
        return "dinner"
    return "snack"


# ---------------------------------------------------------
# Intent handlers: (entities, analysis, context, env) -> reply
# ---------------------------------------------------------
def _greeting(entities, analysis, context, env):
    user = context.get("user")
    if user and user.get("name"):
        return {"message": f"안녕하세요, {user['name']}님! 오늘도 건강한 하루 보내고 계신가요? 😊\n"
                           "식단이나 운동 기록, 추천이 필요하면 말씀해주세요."}
    return {"message": WELCOME_MESSAGE}


def _help(entities, analysis, context, env):
    return {"message": "💡 이렇게 말씀해보세요:\n\n"
                       "• \"점심으로 비빔밥 먹었어\" - 식사 기록\n"
                       "• \"조깅 30분 했어\" - 운동 기록\n"
                       "• \"저녁 메뉴 추천해줘\" - 식단 추천\n"
                       "• \"어떤 운동 할까?\" - 운동 추천\n"
                       "• \"오늘 현황 알려줘\" - 오늘 요약\n"
                       "• \"목표까지 얼마나 남았어?\" - 목표 진행률\n"
                       "• \"칼로리 분석해줘\" - 칼로리/대사량 분석"}


def _add_meal(entities, analysis, context, env):
    food_name = entities.get("food_name")
    calories = entities.get("calories")
    meal_type = entities.get("meal_type") or _meal_type_for_hour(env["now"].hour)

    if not food_name:
        return {"message": "어떤 음식을 드셨나요? \"점심으로 김치찌개 먹었어\"처럼 알려주세요."}

    menu = find_menu_by_name(food_name)
    if menu is None and not calories:
        return {"message": f"'{food_name}'의 칼로리 정보를 찾지 못했어요. "
                           f"\"{food_name} 300kcal 먹었어\"처럼 칼로리를 함께 알려주세요."}

    name = menu["name"] if menu and not calories else food_name
    kcal = round_kcal(calories if calories else menu["calories"])
    foods = [{"name": name, "amount": 1, "unit": "count", "calories": kcal}]
    remaining = analysis.remaining_calories - kcal

    message = f"🍽 {MEAL_TYPE_NAMES[meal_type]} 식사로 {name} ({kcal}kcal)을(를) 기록할게요.\n"
    if remaining >= 0:
        message += f"오늘 남은 칼로리는 약 {remaining}kcal입니다."
    else:
        message += f"오늘 목표보다 {abs(remaining)}kcal 초과했어요. 가벼운 운동을 추천합니다."

    return {
        "message": message,
        "action": {
            "type": "add_meal",
            "data": {"meal_type": meal_type, "foods": foods, "total_calories": kcal},
        },
    }


def _add_exercise(entities, analysis, context, env):
    name = entities.get("exercise_name")
    duration = entities.get("duration")
    exercise = find_exercise_by_name(name) if name else None

    if exercise is None and not duration:
        if name:
            return {"message": f"'{name}' 운동을 찾지 못했어요. "
                               f"\"{name} 30분 했어\"처럼 운동 시간을 함께 알려주세요."}
        return {"message": "어떤 운동을 하셨나요? \"조깅 30분 했어\"처럼 알려주세요."}
    if not duration:
        return {"message": f"{exercise['name']}을(를) 몇 분 하셨나요? "
                           f"\"{exercise['name']} 30분 했어\"처럼 알려주세요."}

    user = context.get("user") or {}
    weight = user.get("weight_kg") or DEFAULT_WEIGHT_KG
    if exercise:
        exercise_name = exercise["name"]
        met = exercise["met"]
        intensity = INTENSITY_BY_DIFFICULTY.get(exercise["difficulty"], "medium")
    else:
        exercise_name = name or "운동"
        met = FALLBACK_MET
        intensity = "medium"

    burned = calculate_exercise_calories(met, weight, duration)
    remaining = analysis.remaining_calories + burned
    return {
        "message": f"💪 {exercise_name} {duration}분, 약 {burned}kcal 소모로 기록할게요.\n"
                   f"오늘 남은 칼로리는 약 {remaining}kcal입니다.",
        "action": {
            "type": "add_exercise",
            "data": {
                "exercise_name": exercise_name,
                "duration_minutes": duration,
                "calories_burned": burned,
                "intensity": intensity,
            },
        },
    }


def _recommend_meal(entities, analysis, context, env):
    season = env["season"]
    max_calories = entities.get("max_calories")
    meal_type = entities.get("meal_type")

    if max_calories:
        pool = [m for m in get_menus_by_season(season) if m["calories"] <= max_calories]
        env["shuffle"](pool)
        menus = [{"title": m["name"], "calories": m["calories"],
                  "description": m.get("description") or f"{m['category']} 메뉴"} for m in pool[:3]]
    else:
        menus = recommend_diet(context.get("goal"), season, shuffle=env["shuffle"])

    label = MEAL_TYPE_NAMES.get(meal_type, "다음 식사")
    if not menus:
        return {"message": f"{max_calories}kcal 이하의 메뉴를 찾지 못했어요. 조건을 조금 넓혀보세요."}

    message = f"🥗 {label} 추천 메뉴 ({get_season_name(season)} 제철 기준):\n"
    for menu in menus:
        message += f"• {menu['title']} ({menu['calories']}kcal) - {menu['description']}\n"
    message += f"\n오늘 남은 칼로리는 약 {analysis.remaining_calories}kcal입니다."
    return {"message": message}


def _calorie_query(entities, analysis, context, env):
    return {"message": _calorie_advice(analysis)}


def _recommend_exercise(entities, analysis, context, env):
    picks = recommend_exercise(
        context.get("user"), env["season"], context.get("indoor", True), shuffle=env["shuffle"]
    )
    place = "실내" if context.get("indoor", True) else "야외"
    message = f"🏃 오늘의 {place} 운동 추천:\n"
    for pick in picks:
        message += f"• {pick['title']} {pick['duration']}분 (약 {pick['calories']}kcal)\n"
    if analysis.remaining_calories < 0:
        message += f"\n오늘 목표보다 {abs(analysis.remaining_calories)}kcal 초과했어요. 운동으로 균형을 맞춰보세요!"
    return {"message": message}


def _check_progress(entities, analysis, context, env):
    return {"message": _goal_advice(analysis, context, env["now"].date())}


def _today_summary(entities, analysis, context, env):
    progress = calculate_daily_progress(analysis.today_calories, analysis.target_calories)
    message = "📊 오늘의 현황:\n\n"
    message += f"• 섭취 칼로리: {analysis.today_calories}/{analysis.target_calories}kcal ({progress}%)\n"
    message += f"• 운동으로 소모: {analysis.today_exercise_calories}kcal\n"
    message += f"• 남은 칼로리: {analysis.remaining_calories}kcal\n"
    message += f"• 주간 평균 섭취: {analysis.weekly_average}kcal\n\n"
    if analysis.remaining_calories < 0:
        message += "⚠️ 목표 칼로리를 초과했습니다. 가벼운 산책을 추천해요."
    else:
        message += "✅ 좋은 페이스입니다. 계속 기록해주세요!"
    return {"message": message}


def _water_reminder(entities, analysis, context, env):
    goal = context.get("goal") or {}
    water_goal = goal.get("daily_water_goal") or 2000
    return {"message": f"💧 오늘의 수분 목표는 {water_goal}ml ({water_goal // 250}잔)입니다.\n\n"
                       + _water_advice()}


MOTIVATION_MESSAGES = [
    "지금까지 잘 해오셨어요! 작은 실천이 모여 큰 변화를 만듭니다. 💪",
    "완벽하지 않아도 괜찮아요. 오늘 한 끼, 한 걸음이면 충분합니다. 🌱",
    "힘든 날엔 쉬어가도 괜찮아요. 포기하지만 않으면 목표는 가까워집니다. 🙌",
    "어제보다 조금 나은 오늘이면 충분해요. 당신을 응원합니다! 🔥",
]


def _motivation(entities, analysis, context, env):
    messages = list(MOTIVATION_MESSAGES)
    env["shuffle"](messages)
    message = messages[0]
    if analysis.current_weight and analysis.target_weight:
        left = analysis.current_weight - analysis.target_weight
        if left > 0:
            message += f"\n\n목표 체중까지 {left:.1f}kg 남았어요. 충분히 해낼 수 있습니다!"
    return {"message": message}


def _general_question(entities, analysis, context, env):
    topic = classify_question(env["text"])
    if topic == "diet":
        return {"message": _diet_advice(analysis, env["season"])}
    if topic == "exercise":
        return {"message": _exercise_advice(analysis)}
    if topic == "goal":
        return {"message": _goal_advice(analysis, context, env["now"].date())}
    if topic == "nutrition":
        return {"message": _nutrition_advice()}
    return {"message": _general_advice(analysis)}


HANDLERS = {
    "greeting": _greeting,
    "add_meal": _add_meal,
    "recommend_meal": _recommend_meal,
    "calorie_query": _calorie_query,
    "add_exercise": _add_exercise,
    "recommend_exercise": _recommend_exercise,
    "check_progress": _check_progress,
    "today_summary": _today_summary,
    "help": _help,
    "water_reminder": _water_reminder,
    "motivation": _motivation,
    GENERAL_QUESTION: _general_question,
}


# ---------------------------------------------------------
# Text banks
# ---------------------------------------------------------
def classify_question(message):
    text = (message or "").lower()
    if any(k in text for k in ("식단", "음식", "먹", "점심", "저녁", "아침")):
        return "diet"
    if any(k in text for k in ("운동", "달리", "헬스", "트레이닝")):
        return "exercise"
    if any(k in text for k in ("목표", "체중", "감량", "달성")):
        return "goal"
    if any(k in text for k in ("단백질", "탄수화물", "지방")):
        return "nutrition"
    return "general"


SEASONAL_MEALS = {
    "spring": ["나물 비빔밥 (약 450kcal)", "쌈밥 (약 420kcal)", "닭가슴살 샐러드 (약 280kcal)"],
    "summer": ["냉국수와 채소 (약 400kcal)", "샐러드 볼 with 연어 (약 350kcal)",
               "수박 + 그릭요거트 (약 200kcal)"],
    "fall": ["버섯 된장찌개와 현미밥 (약 450kcal)", "고구마 1개 + 닭가슴살 (약 350kcal)",
             "토마토 계란 볶음밥 (약 400kcal)"],
    "winter": ["따뜻한 된장찌개와 현미밥 (약 400kcal)", "닭가슴살 샐러드 (약 300kcal)",
               "고구마 1개 + 삶은 계란 (약 250kcal)"],
}


def _diet_advice(analysis, season):
    remaining = analysis.remaining_calories
    advice = (f"오늘 현재까지 {analysis.today_calories}kcal를 섭취하셨네요. "
              f"목표는 {analysis.target_calories}kcal이므로, ")

    if remaining > 500:
        advice += f"앞으로 약 {remaining}kcal를 더 섭취하실 수 있습니다.\n\n"
        advice += f"🥗 추천 식단 ({get_season_name(season)} 계절 메뉴):\n"
        advice += "\n".join(f"• {meal}" for meal in SEASONAL_MEALS.get(season, SEASONAL_MEALS["spring"]))
        advice += f"\n\n💡 {get_seasonal_diet_tips(season)[0]}"
    elif remaining > 0:
        advice += f"앞으로 약 {remaining}kcal만 섭취하시면 됩니다.\n\n"
        advice += "💡 가벼운 간식 추천:\n"
        advice += "• 바나나 1개 (약 100kcal)\n"
        advice += "• 아몬드 한 줌 (약 150kcal)\n"
        advice += "• 저지방 우유 1컵 (약 80kcal)"
    else:
        advice += "이미 목표 칼로리를 초과하셨습니다.\n\n"
        advice += "💪 추천 대응:\n"
        advice += "• 가벼운 운동으로 칼로리 소모 (산책 30분)\n"
        advice += "• 내일은 조금 더 조절해보세요\n"
        advice += "• 물을 충분히 마시세요"
    return advice


def _exercise_advice(analysis):
    remaining = analysis.remaining_calories
    advice = f"오늘 {analysis.today_exercise_calories}kcal를 소모하셨습니다.\n\n"

    if remaining < 0:
        need = abs(remaining)
        advice += f"목표 칼로리를 {need}kcal 초과했습니다.\n\n"
        advice += f"💪 추천 운동 ({need}kcal 소모):\n"
        if need > 300:
            advice += f"• 조깅 40분 (약 {round_kcal(need * 0.7)}kcal)\n"
            advice += f"• 자전거 50분 (약 {round_kcal(need * 0.8)}kcal)\n"
            advice += f"• 수영 30분 (약 {round_kcal(need * 0.9)}kcal)"
        else:
            advice += f"• 빠르게 걷기 30분 (약 {round_kcal(need * 0.8)}kcal)\n"
            advice += f"• 계단 오르기 20분 (약 {round_kcal(need * 0.9)}kcal)\n"
            advice += f"• 줄넘기 15분 (약 {need}kcal)"
    else:
        advice += "✅ 현재 칼로리 균형이 좋습니다!\n\n"
        advice += "💡 건강 유지 운동 추천:\n"
        advice += "• 스트레칭 15분 (유연성 향상)\n"
        advice += "• 플랭크 + 스쿼트 (근력 강화)\n"
        advice += "• 요가 20분 (스트레스 해소)"
    return advice


def _calorie_advice(analysis):
    diff = analysis.today_calories - analysis.target_calories
    percent = calculate_daily_progress(analysis.today_calories, analysis.target_calories)

    advice = "📊 칼로리 분석:\n\n"
    advice += f"• 오늘 섭취: {analysis.today_calories}kcal\n"
    advice += f"• 목표: {analysis.target_calories}kcal\n"
    advice += f"• 달성률: {percent}%\n"
    advice += f"• 주간 평균: {analysis.weekly_average}kcal\n\n"
    advice += "🔬 대사량 정보:\n"
    advice += f"• 기초대사량(BMR): {analysis.bmr}kcal\n"
    advice += f"• 일일소비량(TDEE): {analysis.tdee}kcal\n\n"

    if abs(diff) < 100:
        advice += "✅ 완벽합니다! 목표 칼로리를 잘 지키고 계십니다."
    elif diff > 0:
        advice += f"⚠️ 목표보다 {diff}kcal 초과했습니다.\n운동으로 추가 소모하거나 내일 조절하세요."
    else:
        advice += f"💡 목표보다 {abs(diff)}kcal 부족합니다.\n건강한 간식으로 보충하는 것을 추천합니다."
    return advice


def _goal_advice(analysis, context, today):
    goal = context.get("goal")
    current, target = analysis.current_weight, analysis.target_weight
    weight_diff = current - target
    days_left = (_day(goal["target_date"]) - today).days

    advice = "🎯 목표 분석:\n\n"
    advice += f"• 현재 체중: {current}kg\n"
    advice += f"• 목표 체중: {target}kg\n"
    advice += f"• 감량 필요: {weight_diff:.1f}kg\n"
    advice += f"• 남은 기간: {days_left}일\n"

    initial = goal.get("initial_weight")
    if initial and initial != target:
        progress = max(0, min(100, round_kcal((initial - current) / (initial - target) * 100)))
        advice += f"• 진행률: {progress}%\n"
    advice += "\n"

    if days_left > 0:
        weekly_rate = weight_diff / days_left * 7
        advice += f"📈 권장 진행 속도:\n• 주당 {weekly_rate:.2f}kg 감량\n\n"
        if weekly_rate > 1:
            advice += ("⚠️ 목표가 다소 빠릅니다. 건강을 위해 주당 0.5~1kg 감량을 권장합니다.\n"
                       "목표 날짜를 조정하거나, 운동을 병행하세요.")
        elif weekly_rate < 0.3:
            advice += "💡 여유롭게 진행하고 계십니다. 꾸준히 실천하면 충분히 달성 가능합니다!"
        else:
            advice += "✅ 적절한 속도입니다! 이대로 꾸준히 실천하세요."
    else:
        advice += "⏰ 목표 날짜가 지났습니다. 새로운 목표를 설정해보세요!"
    return advice


def _nutrition_advice():
    return ("🥗 영양소 균형 팁:\n\n"
            "• 단백질: 체중 1kg당 1.2~1.6g 권장\n"
            "  (닭가슴살, 계란, 두부, 생선)\n\n"
            "• 탄수화물: 전체 칼로리의 45~60%\n"
            "  (현미, 고구마, 귀리, 통곡물)\n\n"
            "• 지방: 전체 칼로리의 20~30%\n"
            "  (견과류, 아보카도, 올리브유)\n\n"
            "💡 다양한 색깔의 채소를 섭취하면 비타민과 미네랄을 골고루 얻을 수 있습니다!")


def _water_advice():
    return ("💧 수분 섭취 가이드:\n\n"
            "• 하루 2~2.5리터 (8잔) 권장\n"
            "• 운동 전후에는 추가로 1~2잔\n"
            "• 카페인 음료는 이뇨 작용이 있으니 물로 보충하세요\n"
            "• 갈증을 느끼기 전에 미리미리 마시세요\n\n"
            "💡 물을 자주 마시면 포만감이 생겨 과식을 방지할 수 있습니다!")


def _general_advice(analysis):
    advice = "안녕하세요! 오늘 하루는 어떠셨나요?\n\n"
    advice += "📊 오늘의 현황:\n"
    advice += f"• 섭취 칼로리: {analysis.today_calories}/{analysis.target_calories}kcal\n"
    advice += f"• 운동으로 소모: {analysis.today_exercise_calories}kcal\n\n"
    advice += "💡 제가 도와드릴 수 있는 것들:\n"
    advice += "• 식단 추천 및 칼로리 조언\n"
    advice += "• 운동 프로그램 추천\n"
    advice += "• 목표 달성 전략\n"
    advice += "• 영양소 균형 관리\n\n"
    advice += "무엇이든 물어보세요! 😊"
    return advice


# ---------------------------------------------------------
# Entry points
# ---------------------------------------------------------
def respond(intent, entities, analysis, context, season=None, now=None,
            shuffle=random.shuffle, text="") -> dict:
    if not analysis.has_user_data and intent not in ("greeting", "help"):
        return {"message": SETUP_REQUIRED_MESSAGE}

    now = now or datetime.now()
    env = {
        "season": season or get_current_season(now.date()),
        "now": now,
        "shuffle": shuffle,
        "text": text,
    }
    handler = HANDLERS.get(intent, _general_question)
    return handler(entities or {}, analysis, context, env)


def send_chat_message(message, context, season=None, now=None, shuffle=random.shuffle) -> dict:
    now = now or datetime.now()
    analysis = analyze_user_data(context, now.date())
    classified = analyze_message(message)

    reply = respond(
        classified["intent"], classified["entities"], analysis, context,
        season=season, now=now, shuffle=shuffle, text=message,
    )
    logger.info(
        "chat intent=%s confidence=%s action=%s",
        classified["intent"], classified["confidence"],
        (reply.get("action") or {}).get("type"),
    )
    return {
        "message": reply["message"],
        "action": reply.get("action"),
        "intent": classified["intent"],
        "confidence": classified["confidence"],
        "entities": classified["entities"],
    }
