from datetime import date

import pytest

from weather import get_mock_weather, get_weather_emoji, should_recommend_outdoor


@pytest.mark.parametrize("season,temperature,condition", [
    ("spring", 15, "sunny"),
    ("summer", 28, "cloudy"),
    ("fall", 18, "sunny"),
    ("winter", 3, "cloudy"),
])
def test_mock_weather_per_season(season, temperature, condition):
    weather = get_mock_weather(season)
    assert weather["temperature"] == temperature
    assert weather["condition"] == condition
    assert weather["emoji"] == get_weather_emoji(condition)


def test_mock_weather_follows_date():
    assert get_mock_weather(today=date(2025, 1, 5))["temperature"] == 3


@pytest.mark.parametrize("weather,recommend", [
    ({"temperature": 20, "condition": "rainy"}, False),
    ({"temperature": 20, "condition": "snowy"}, False),
    ({"temperature": -3, "condition": "sunny"}, False),
    ({"temperature": 35, "condition": "sunny"}, False),
    ({"temperature": 3, "condition": "cloudy"}, True),
    ({"temperature": 30, "condition": "sunny"}, True),
    ({"temperature": 18, "condition": "sunny"}, True),
    ({"temperature": 0, "condition": "cloudy"}, True),
    ({"temperature": 32, "condition": "cloudy"}, True),
])
def test_should_recommend_outdoor(weather, recommend):
    result = should_recommend_outdoor(weather)
    assert result["recommend"] is recommend
    assert result["reason"]


def test_rain_reason():
    assert should_recommend_outdoor({"temperature": 20, "condition": "rainy"})["reason"].startswith("비가")


def test_weather_emoji_fallback():
    assert get_weather_emoji("foggy") == "🌤️"
