# skycast/core/models/weather_response.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SkyCondition(str, Enum):
    CLEAR_SKY = "Clear Sky"
    PARTLY_CLOUDY = "Partly Cloudy"
    FOGGY = "Foggy"
    DRIZZLE = "Drizzle"
    RAINY = "Rainy"
    SNOWY = "Snowy"
    RAIN_SHOWERS = "Rain Showers"
    SNOW_SHOWERS = "Snow Showers"
    THUNDERSTORM = "Thunderstorm"
    OVERCAST = "Overcast"

    def __str__(self):
        return self.value


class DisplayMode(str, Enum):
    CURRENT = "current"
    HISTORICAL = "historical"
    FORECAST = "forecast"


@dataclass(frozen=True)
class Place:
    latitude: float
    longitude: float
    name: Optional[str] = None
    country: Optional[str] = None


@dataclass(frozen=True)
class CurrentWeather:
    temperature: float          # °C
    windspeed: float            # км/ч
    humidity: Optional[int]     # %, первый часовой отсчёт
    precipitation: Optional[int]  # % вероятности, первый часовой отсчёт
    weather_code: int
    sky_condition: SkyCondition


@dataclass(frozen=True)
class DayRecord:
    date: str  # ISO, "2024-05-01"
    max_temp: Optional[float]
    min_temp: Optional[float]
    windspeed: Optional[float]
    precipitation: Optional[float]  # мм
