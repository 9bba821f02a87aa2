from datetime import date

import pytest

from catalog import (
    EXERCISE_CATEGORIES,
    EXERCISES,
    FOOD_CATEGORIES,
    FOOD_MENU,
    find_exercise_by_name,
    find_menu_by_name,
    get_exercise_by_id,
    get_exercises_by_category,
    get_menus_by_calories,
    get_menus_by_category,
    get_menus_by_season,
    search_exercises,
)
from seasons import (
    get_current_season,
    get_season_name,
    get_seasonal_diet_tips,
    get_seasonal_exercise_tips,
    get_seasonal_ingredients,
)


def test_catalog_entries_are_well_formed():
    assert len({m["id"] for m in FOOD_MENU}) == len(FOOD_MENU)
    for menu in FOOD_MENU:
        assert menu["category"] in FOOD_CATEGORIES
        assert menu["season"] in ("spring", "summer", "fall", "winter", "all")
        assert menu["difficulty"] in ("easy", "medium", "hard")
        assert menu["calories"] > 0

    assert len({e["id"] for e in EXERCISES}) == len(EXERCISES)
    for exercise in EXERCISES:
        assert exercise["category"] in EXERCISE_CATEGORIES
        assert exercise["met"] > 0


def test_menus_by_season_include_all_season_menus():
    menus = get_menus_by_season("winter")
    assert menus
    assert all(m["season"] in ("winter", "all") for m in menus)


def test_menus_by_category_and_calories():
    assert all(m["category"] == "일식" for m in get_menus_by_category("일식"))
    assert all(300 <= m["calories"] <= 400 for m in get_menus_by_calories(300, 400))


def test_find_menu_by_name():
    assert find_menu_by_name("비빔밥")["id"] == "2"
    assert find_menu_by_name("  김치찌개 ")["name"] == "김치찌개"
    assert find_menu_by_name("피자") is None
    assert find_menu_by_name("") is None


def test_find_exercise_by_name():
    assert find_exercise_by_name("조깅")["met"] == 7.0
    # partial text matches a longer catalog name
    assert find_exercise_by_name("수영")["name"] == "수영 (천천히)"
    # catalog name inside free text
    assert find_exercise_by_name("아침조깅")["name"] == "조깅"
    assert find_exercise_by_name("클라이밍") is None


def test_exercise_lookups():
    assert get_exercise_by_id("26")["name"] == "요가"
    assert get_exercise_by_id("999") is None
    assert {e["category"] for e in get_exercises_by_category("sport")} == {"sport"}
    assert [e["name"] for e in search_exercises("하체")] == ["스쿼트", "런지"]


def test_lookups_accept_a_custom_catalog():
    catalog = [{"id": "x", "name": "맨손체조", "met": 3.0, "category": "other",
                "difficulty": "easy", "description": ""}]
    assert find_exercise_by_name("맨손체조", catalog=catalog)["id"] == "x"
    assert find_exercise_by_name("조깅", catalog=catalog) is None


@pytest.mark.parametrize("month,season", [
    (1, "winter"), (2, "winter"), (3, "spring"), (5, "spring"), (6, "summer"),
    (8, "summer"), (9, "fall"), (11, "fall"), (12, "winter"),
])
def test_current_season(month, season):
    assert get_current_season(date(2025, month, 10)) == season


def test_season_texts():
    assert get_season_name("fall") == "가을"
    assert get_season_name("unknown") == "사계절"
    for season in ("spring", "summer", "fall", "winter"):
        assert get_seasonal_ingredients(season)
        assert get_seasonal_diet_tips(season)
        assert get_seasonal_exercise_tips(season)
