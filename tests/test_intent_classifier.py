import pytest

from intent_classifier import (
    GENERAL_QUESTION,
    INTENT_RULES,
    INTENTS,
    analyze_message,
    classify_intent,
    extract_entities,
)


@pytest.mark.parametrize("message,intent", [
    ("안녕하세요", "greeting"),
    ("Hello!", "greeting"),
    ("점심으로 비빔밥 먹었어", "add_meal"),
    ("오늘 점심 뭐 먹을까?", "recommend_meal"),
    ("칼로리 분석해줘", "calorie_query"),
    ("조깅 30분 했어", "add_exercise"),
    ("어떤 운동 할까?", "recommend_exercise"),
    ("목표까지 얼마나 남았어?", "check_progress"),
    ("오늘 현황 알려줘", "today_summary"),
    ("사용법 알려줘", "help"),
    ("물 마시는 거 깜빡했다", "water_reminder"),
    ("요즘 너무 힘들어", "motivation"),
    ("단백질은 어디에 많아?", GENERAL_QUESTION),
    ("", GENERAL_QUESTION),
])
def test_classify_intent(message, intent):
    assert classify_intent(message) == intent


def test_first_matching_rule_wins():
    # "추천" belongs to recommend_meal, which is checked before recommend_exercise
    assert classify_intent("운동 추천해줘") == "recommend_meal"
    # "먹었" (add_meal) outranks "오늘" (today_summary)
    assert classify_intent("오늘 김밥 먹었어") == "add_meal"


def test_rules_are_ordered_and_listed():
    assert [rule[0] for rule in INTENT_RULES][:2] == ["greeting", "add_meal"]
    assert INTENTS[-1] == GENERAL_QUESTION


def test_exercise_entities_name_then_minutes():
    assert extract_entities("조깅 30분 했어", "add_exercise") == {"exercise_name": "조깅", "duration": 30}


def test_exercise_entities_minutes_then_name():
    assert extract_entities("30분 수영 했어", "add_exercise") == {"exercise_name": "수영", "duration": 30}


def test_exercise_entities_name_only():
    assert extract_entities("요가 했어", "add_exercise") == {"exercise_name": "요가"}


def test_meal_entities():
    assert extract_entities("점심으로 비빔밥 먹었어", "add_meal") == {
        "food_name": "비빔밥",
        "meal_type": "lunch",
    }


def test_meal_entities_with_calories():
    assert extract_entities("저녁 라면 500kcal 먹었어", "add_meal") == {
        "food_name": "라면",
        "meal_type": "dinner",
        "calories": 500,
    }


def test_meal_request_entities():
    assert extract_entities("저녁 메뉴 500kcal 이하로 추천해줘", "recommend_meal") == {
        "meal_type": "dinner",
        "max_calories": 500,
    }


def test_intents_without_extractors_have_no_entities():
    assert extract_entities("안녕", "greeting") == {}
    assert extract_entities("아무 말", GENERAL_QUESTION) == {}


def test_analyze_message():
    result = analyze_message("조깅 30분 했어")
    assert result["intent"] == "add_exercise"
    assert result["entities"] == {"exercise_name": "조깅", "duration": 30}
    # one keyword + entities
    assert result["confidence"] == 0.9


def test_analyze_message_confidence_capped():
    result = analyze_message("안녕 안녕하세요 반가워요 hi")
    assert result["intent"] == "greeting"
    assert result["confidence"] == 1.0
