# intent_classifier.py
"""
Keyword intent classifier and entity extractor for the chat assistant.

INTENT_RULES is scanned in order and the first intent whose keyword appears
in the lower-cased message wins; nothing matching means "general_question".
Reordering the rules changes how ambiguous messages are classified.
"""
import re

GENERAL_QUESTION = "general_question"

_MEAL_TYPES = (
    ("아침", "breakfast"),
    ("점심", "lunch"),
    ("저녁", "dinner"),
    ("간식", "snack"),
)

_FOOD_PATTERNS = (
    # (pattern, group holding the food name), tried in order
    (re.compile(r"([가-힣a-zA-Z]+)\s*\d+\s*kcal"), 1),
    (re.compile(r"([가-힣a-zA-Z]+)\s*(먹었|먹음|섭취)"), 1),
    (re.compile(r"(아침|점심|저녁|간식)으로\s*([가-힣a-zA-Z]+)"), 2),
)

_NAME_THEN_MINUTES = re.compile(r"([가-힣a-zA-Z]+)\s*(\d+)\s*분")
_MINUTES_THEN_NAME = re.compile(r"(\d+)\s*분\s*([가-힣a-zA-Z]+)")
_NAME_THEN_DID = re.compile(r"([가-힣a-zA-Z]+)\s*(했어|함)")
_MINUTES = re.compile(r"(\d+)\s*분")
_KCAL = re.compile(r"(\d+)\s*kcal")


def _meal_type(message):
    for keyword, meal_type in _MEAL_TYPES:
        if keyword in message:
            return meal_type
    return None


def _extract_meal(message):
    entities = {}
    for pattern, group in _FOOD_PATTERNS:
        match = pattern.search(message)
        if match:
            entities["food_name"] = match.group(group)
            break

    meal_type = _meal_type(message)
    if meal_type:
        entities["meal_type"] = meal_type

    kcal = _KCAL.search(message)
    if kcal:
        entities["calories"] = int(kcal.group(1))
    return entities


def _extract_exercise(message):
    entities = {}

    match = _NAME_THEN_MINUTES.search(message)
    if match:
        entities["exercise_name"] = match.group(1)
        entities["duration"] = int(match.group(2))
    else:
        match = _MINUTES_THEN_NAME.search(message)
        if match:
            entities["duration"] = int(match.group(1))
            entities["exercise_name"] = match.group(2)
        else:
            match = _NAME_THEN_DID.search(message)
            if match:
                entities["exercise_name"] = match.group(1)

    if "duration" not in entities:
        minutes = _MINUTES.search(message)
        if minutes:
            entities["duration"] = int(minutes.group(1))
    return entities


def _extract_meal_request(message):
    entities = {}
    meal_type = _meal_type(message)
    if meal_type:
        entities["meal_type"] = meal_type

    kcal = _KCAL.search(message)
    if kcal:
        entities["max_calories"] = int(kcal.group(1))
    return entities


def _no_entities(message):
    return {}


# (intent, keywords, entity extractor) in priority order
INTENT_RULES = [
    ("greeting", ("안녕", "하이", "hi", "hello", "안녕하세요", "반가"), _no_entities),
    ("add_meal", ("먹었", "먹음", "섭취", "식사", "아침먹", "점심먹", "저녁먹", "간식먹"), _extract_meal),
    ("recommend_meal", ("뭐 먹", "추천", "메뉴", "식단", "먹을까", "점심으로", "저녁으로"),
     _extract_meal_request),
    ("calorie_query", ("칼로리", "영양", "영양소", "kcal"), _no_entities),
    ("add_exercise", ("운동했", "운동함", "달렸", "걸었", "했어"), _extract_exercise),
    ("recommend_exercise", ("운동 추천", "어떤 운동", "운동 뭐", "운동할까"), _no_entities),
    ("check_progress", ("진행률", "얼마나", "목표", "진척", "달성"), _no_entities),
    ("today_summary", ("오늘", "현황", "요약", "상태"), _no_entities),
    ("help", ("도움", "help", "뭐 할", "기능", "사용법"), _no_entities),
    ("water_reminder", ("물", "수분", "마시"), _no_entities),
    ("motivation", ("힘들", "포기", "어려", "지쳐"), _no_entities),
]

INTENTS = [intent for intent, _, _ in INTENT_RULES] + [GENERAL_QUESTION]

_RULES_BY_INTENT = {intent: (keywords, extractor) for intent, keywords, extractor in INTENT_RULES}


def classify_intent(message):
    text = (message or "").lower().strip()
    for intent, keywords, _ in INTENT_RULES:
        if any(keyword in text for keyword in keywords):
            return intent
    return GENERAL_QUESTION


def extract_entities(message, intent):
    rule = _RULES_BY_INTENT.get(intent)
    if rule is None:
        return {}
    return rule[1](message or "")


def analyze_message(message):
    """
    Classify ``message`` and pull out its entities.

    Returns {"intent", "confidence", "entities"}; confidence is informational
    only (0.5 base, +0.2 per matched keyword, +0.2 with entities, max 1.0).
    """
    intent = classify_intent(message)
    entities = extract_entities(message, intent)

    text = (message or "").lower()
    keywords = _RULES_BY_INTENT.get(intent, ((), None))[0]
    matched = sum(1 for k in keywords if k in text)

    confidence = min(0.5 + matched * 0.2, 1.0)
    if entities:
        confidence = min(confidence + 0.2, 1.0)

    return {
        "intent": intent,
        "confidence": round(confidence, 2),
        "entities": entities,
    }
