# seasons.py
"""
Season helpers. Korean calendar split:
Mar-May spring, Jun-Aug summer, Sep-Nov fall, Dec-Feb winter.
"""
from datetime import date

SEASONS = ("spring", "summer", "fall", "winter")

SEASON_NAMES = {
    "spring": "봄",
    "summer": "여름",
    "fall": "가을",
    "winter": "겨울",
    "all": "사계절",
}


def get_current_season(today=None):
    month = (today or date.today()).month
    if 3 <= month <= 5:
        return "spring"
    if 6 <= month <= 8:
        return "summer"
    if 9 <= month <= 11:
        return "fall"
    return "winter"


def get_season_name(season):
    return SEASON_NAMES.get(season, SEASON_NAMES["all"])


def get_seasonal_ingredients(season):
    ingredients = {
        "spring": ["냉이", "달래", "쑥", "두릅", "죽순", "아스파라거스",
                   "딸기", "봄동", "씀바귀", "미나리", "취나물"],
        "summer": ["토마토", "오이", "가지", "호박", "옥수수", "수박",
                   "참외", "복숭아", "자두", "열무", "상추", "깻잎"],
        "fall": ["고구마", "밤", "대추", "배", "사과", "감",
                 "버섯", "우엉", "연근", "무", "배추", "시금치"],
        "winter": ["배추", "무", "시금치", "콩나물", "굴", "과메기",
                   "귤", "한라봉", "유자", "딸기", "브로콜리", "뿌리채소"],
        "all": ["계란", "두부", "닭고기", "쇠고기", "돼지고기", "현미", "귀리"],
    }
    return ingredients.get(season, ingredients["all"])


def get_seasonal_diet_tips(season):
    tips = {
        "spring": [
            "봄나물로 비타민과 미네랄을 보충하세요",
            "따뜻한 차와 함께 가볍게 식사하세요",
            "제철 딸기로 비타민 C 섭취를 늘리세요",
        ],
        "summer": [
            "수분 섭취를 충분히 하세요",
            "시원한 샐러드와 냉국으로 더위를 이겨내세요",
            "수박, 참외 등 수분 많은 과일을 섭취하세요",
        ],
        "fall": [
            "면역력을 높이는 버섯 요리를 추천합니다",
            "고구마, 밤 등 식이섬유가 풍부한 음식을 섭취하세요",
            "환절기 건강을 위해 영양가 높은 제철 과일을 드세요",
        ],
        "winter": [
            "따뜻한 국물 요리로 체온을 유지하세요",
            "뿌리채소로 몸을 따뜻하게 하세요",
            "비타민 C가 풍부한 귤, 한라봉을 섭취하세요",
            "굴, 과메기 등 겨울 제철 음식으로 영양을 보충하세요",
        ],
        "all": [
            "균형 잡힌 식단을 유지하세요",
            "하루 2L의 물을 마시세요",
        ],
    }
    return tips.get(season, tips["all"])


def get_seasonal_exercise_tips(season):
    tips = {
        "spring": [
            "날씨가 좋은 날은 야외 활동을 늘리세요",
            "황사가 심한 날은 실내 운동을 추천합니다",
            "꽃가루 알레르기가 있다면 마스크를 착용하세요",
        ],
        "summer": [
            "햇볕이 강한 시간대(11-15시)는 피하세요",
            "충분한 수분 섭취와 함께 운동하세요",
            "실내 운동을 적극 활용하세요",
        ],
        "fall": [
            "등산, 트레킹에 최적의 계절입니다",
            "일교차가 크니 준비운동을 충분히 하세요",
            "야외 활동을 즐기기 좋은 시기입니다",
        ],
        "winter": [
            "추운 날씨에는 홈트레이닝을 추천합니다",
            "외출 시 따뜻하게 옷을 입으세요",
            "준비운동을 더 길게 하여 부상을 예방하세요",
            "날씨가 좋은 날에만 야외 운동을 하세요",
        ],
        "all": [
            "규칙적인 운동 습관을 유지하세요",
            "자신의 체력에 맞는 강도로 운동하세요",
        ],
    }
    return tips.get(season, tips["all"])
