# -*- coding: utf-8 -*-
"""
Классификация кода погоды WMO (Open-Meteo) в состояние неба и иконку.
"""

from skycast.core.models.weather_response import SkyCondition

# Диапазоны включительно: (нижняя граница, верхняя граница, состояние)
WEATHER_CODE_BANDS = (
    (0, 0, SkyCondition.CLEAR_SKY),
    (1, 3, SkyCondition.PARTLY_CLOUDY),
    (45, 48, SkyCondition.FOGGY),
    (51, 57, SkyCondition.DRIZZLE),
    (61, 67, SkyCondition.RAINY),
    (71, 77, SkyCondition.SNOWY),
    (80, 82, SkyCondition.RAIN_SHOWERS),
    (85, 86, SkyCondition.SNOW_SHOWERS),
    (95, 99, SkyCondition.THUNDERSTORM),
)

DEFAULT_CONDITION = SkyCondition.OVERCAST

ICONS = {
    SkyCondition.CLEAR_SKY: "☀️",
    SkyCondition.PARTLY_CLOUDY: "⛅",
    SkyCondition.FOGGY: "🌫️",
    SkyCondition.DRIZZLE: "🌧️",
    SkyCondition.RAINY: "🌧️",
    SkyCondition.RAIN_SHOWERS: "🌦️",
    SkyCondition.SNOWY: "❄️",
    SkyCondition.SNOW_SHOWERS: "❄️",
    SkyCondition.THUNDERSTORM: "⚡",
}
DEFAULT_ICON = "☁️"


def classify(code: int) -> SkyCondition:
    """
    Возвращает состояние неба для кода погоды.

    Неизвестные коды (в том числе отрицательные) дают Overcast.
    """
    for low, high, condition in WEATHER_CODE_BANDS:
        if low <= code <= high:
            return condition
    return DEFAULT_CONDITION


def icon_for(condition: SkyCondition) -> str:
    """Иконка для отображения состояния неба."""
    return ICONS.get(condition, DEFAULT_ICON)
