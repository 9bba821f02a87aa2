# weather.py
"""
Seasonal mock weather and the outdoor-exercise rule built on it.
"""
from seasons import get_current_season

MOCK_WEATHER = {
    "spring": {"temperature": 15, "condition": "sunny", "description": "맑음"},
    "summer": {"temperature": 28, "condition": "cloudy", "description": "흐림"},
    "fall": {"temperature": 18, "condition": "sunny", "description": "맑음"},
    "winter": {"temperature": 3, "condition": "cloudy", "description": "흐림"},
}

WEATHER_EMOJI = {
    "sunny": "☀️",
    "cloudy": "☁️",
    "rainy": "🌧️",
    "snowy": "❄️",
}


def get_mock_weather(season=None, today=None):
    season = season or get_current_season(today)
    weather = dict(MOCK_WEATHER.get(season, MOCK_WEATHER["fall"]))
    weather["emoji"] = get_weather_emoji(weather["condition"])
    return weather


def should_recommend_outdoor(weather):
    temperature = weather["temperature"]
    condition = weather["condition"]

    if condition in ("rainy", "snowy"):
        what = "비" if condition == "rainy" else "눈"
        return {"recommend": False, "reason": f"{what}가 오고 있습니다. 실내 운동을 추천합니다."}

    if temperature < 0:
        return {
            "recommend": False,
            "reason": f"날씨가 너무 춥습니다 ({temperature}°C). 실내 운동을 추천합니다.",
        }
    if temperature > 32:
        return {
            "recommend": False,
            "reason": f"날씨가 너무 덥습니다 ({temperature}°C). 실내 운동을 추천합니다.",
        }

    if temperature < 5:
        return {
            "recommend": True,
            "reason": f"약간 쌀쌀합니다 ({temperature}°C). 따뜻하게 입고 가벼운 산책을 추천합니다.",
        }
    if temperature > 28:
        return {
            "recommend": True,
            "reason": f"날씨가 덥습니다 ({temperature}°C). 아침이나 저녁에 운동하세요.",
        }
    return {
        "recommend": True,
        "reason": f"날씨가 좋습니다 ({temperature}°C). 실외 운동하기 좋은 날씨입니다!",
    }


def get_weather_emoji(condition):
    return WEATHER_EMOJI.get(condition, "🌤️")
