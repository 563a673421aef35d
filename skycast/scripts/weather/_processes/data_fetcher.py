# -*- coding: utf-8 -*-
"""
Получение данных погоды через api_client и приведение к моделям.

Три независимые операции над одним Place:
- fetch_current: снимок текущей погоды
- fetch_historical: прошедшие дни
- fetch_forecast: прогноз по дням
"""

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional

from skycast.core.models.weather_response import CurrentWeather, DayRecord, Place
from skycast.core.utils.api_client import OpenMeteoClient
from skycast.core.utils.error_handler import MalformedResponseError
from skycast.core.utils.sky_condition import classify

logger = logging.getLogger("data_fetcher")

DEFAULT_HISTORY_DAYS = 7


def _optional_int(value) -> Optional[int]:
    return int(round(value)) if value is not None else None


def parse_current_weather(data: Dict) -> CurrentWeather:
    """
    Разбирает ответ с current_weather и hourly.

    Влажность и вероятность осадков в блоке current_weather нет,
    поэтому берётся первый часовой отсчёт (приближение).
    """
    try:
        current = data["current_weather"]
        hourly = data["hourly"]
        humidity_series = hourly["relativehumidity_2m"]
        precipitation_series = hourly["precipitation_probability"]
        temperature = float(current["temperature"])
        windspeed = float(current["windspeed"])
        weather_code = int(current["weathercode"])
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponseError(f"Неполный ответ текущей погоды: {e!r}") from e

    if not humidity_series or not precipitation_series:
        raise MalformedResponseError("Пустые почасовые ряды влажности или осадков")

    return CurrentWeather(
        temperature=temperature,
        windspeed=windspeed,
        humidity=_optional_int(humidity_series[0]),
        precipitation=_optional_int(precipitation_series[0]),
        weather_code=weather_code,
        sky_condition=classify(weather_code),
    )


def parse_daily_records(data: Dict) -> List[DayRecord]:
    """
    Разбирает параллельные массивы daily в список DayRecord.

    Длина результата равна длине daily.time, i-я запись собрана
    из i-х элементов всех массивов.
    """
    try:
        daily = data["daily"]
        times = daily["time"]
        max_temps = daily["temperature_2m_max"]
        min_temps = daily["temperature_2m_min"]
        winds = daily["windspeed_10m_max"]
        precipitation = daily["precipitation_sum"]
        lengths = {len(times), len(max_temps), len(min_temps), len(winds), len(precipitation)}
    except (KeyError, TypeError) as e:
        raise MalformedResponseError(f"Нет дневных массивов в ответе: {e!r}") from e

    if len(lengths) != 1:
        raise MalformedResponseError(f"Дневные массивы разной длины: {sorted(lengths)}")

    return [
        DayRecord(
            date=times[i],
            max_temp=max_temps[i],
            min_temp=min_temps[i],
            windspeed=winds[i],
            precipitation=precipitation[i],
        )
        for i in range(len(times))
    ]


def fetch_current(place: Place, client: OpenMeteoClient) -> CurrentWeather:
    """
    Получает текущую погоду.

    Args:
        place (Place): Координаты
        client (OpenMeteoClient): HTTP-клиент

    Returns:
        CurrentWeather
    """
    data = client.get_current_weather(place.latitude, place.longitude)
    weather = parse_current_weather(data)
    logger.info(f"✅ Текущая погода: {weather.temperature}°C, {weather.sky_condition}")
    return weather


def fetch_historical(
    place: Place,
    client: OpenMeteoClient,
    days: int = DEFAULT_HISTORY_DAYS,
    today: Optional[date] = None
) -> List[DayRecord]:
    """
    Получает прошедшие дни: с (today - days) по вчера включительно.

    Args:
        place (Place): Координаты
        client (OpenMeteoClient): HTTP-клиент
        days (int): Глубина архива в днях
        today (date): Точка отсчёта; по умолчанию сегодня
    """
    if days < 1:
        raise ValueError(f"Глубина архива должна быть положительной: days={days}")
    today = today or date.today()
    start = today - timedelta(days=days)
    end = today - timedelta(days=1)

    data = client.get_daily_weather(
        place.latitude, place.longitude,
        timezone="auto",
        start_date=start.isoformat(),
        end_date=end.isoformat()
    )
    records = parse_daily_records(data)
    logger.info(f"📜 Архив: {len(records)} дн. ({start} .. {end})")
    return records


def fetch_forecast(place: Place, client: OpenMeteoClient) -> List[DayRecord]:
    """Получает прогноз по дням с автоматическим часовым поясом."""
    data = client.get_daily_weather(place.latitude, place.longitude, timezone="auto")
    records = parse_daily_records(data)
    logger.info(f"🔮 Прогноз: {len(records)} дн.")
    return records
