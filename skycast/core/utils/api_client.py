# -*- coding: utf-8 -*-
"""
Обёртка для Open-Meteo (геокодинг и прогноз).
Поддерживает:
- Геокодинг: search_place(name)
- Текущая погода с почасовыми рядами: get_current_weather(lat, lon)
- Дневные агрегаты: get_daily_weather(lat, lon, ...)

Клиент возвращает сырой JSON. Разбор в модели: в data_fetcher
и coordinate_manager. Без кэширования и повторов:
каждое действие пользователя делает новый запрос.
"""

import logging
from typing import Dict, Optional

import requests

from skycast.core.utils.error_handler import (
    MalformedResponseError,
    NetworkError,
    log_and_raise,
)

logger = logging.getLogger("api_client")

HOURLY_VARIABLES = [
    "temperature_2m", "relativehumidity_2m",
    "precipitation_probability", "windspeed_10m"
]
DAILY_VARIABLES = [
    "temperature_2m_max", "temperature_2m_min",
    "precipitation_sum", "windspeed_10m_max"
]


class OpenMeteoClient:
    """Клиент для Open-Meteo API."""
    GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
    FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        # None: ждём столько, сколько позволяет транспорт
        self.timeout = timeout

    def get_json(self, url: str, params: Dict) -> Dict:
        """
        Выполняет GET и возвращает разобранный JSON.

        Raises:
            NetworkError: ошибка соединения, таймаут или HTTP-статус ошибки
            MalformedResponseError: тело ответа не JSON-объект
        """
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            log_and_raise("❌ Open-Meteo: ошибка запроса", NetworkError(str(e)), context={"url": url})

        try:
            data = response.json()
        except ValueError as e:
            log_and_raise("❌ Open-Meteo: ответ не JSON", MalformedResponseError(str(e)), context={"url": url})

        if not isinstance(data, dict):
            log_and_raise(
                "❌ Open-Meteo: неожиданный тип ответа",
                MalformedResponseError(f"ожидался объект, получено {type(data).__name__}"),
                context={"url": url}
            )
        return data

    def search_place(self, name: str) -> Dict:
        """Ищет место по названию, возвращает не больше одного результата."""
        params = {
            "name": name,
            "count": 1,
            "language": "en",
            "format": "json"
        }
        data = self.get_json(self.GEOCODING_URL, params)
        logger.info(f"🌍 Геокодинг: ответ получен для «{name}»")
        return data

    def get_current_weather(self, lat: float, lon: float) -> Dict:
        """Текущая погода плюс почасовые ряды (влажность и осадки берутся из них)."""
        params = {
            "latitude": lat,
            "longitude": lon,
            "current_weather": "true",
            "hourly": ",".join(HOURLY_VARIABLES)
        }
        data = self.get_json(self.FORECAST_URL, params)
        logger.info(f"✅ Open-Meteo: текущая погода получена для ({lat}, {lon})")
        return data

    def get_daily_weather(
        self,
        lat: float,
        lon: float,
        timezone: Optional[str] = "auto",
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> Dict:
        """
        Дневные агрегаты: максимум/минимум температуры, осадки, ветер.

        Args:
            lat: Широта
            lon: Долгота
            timezone: "auto" означает часовой пояс по координатам
            start_date: Начало периода (ISO), для архива прошедших дней
            end_date: Конец периода (ISO)
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "daily": ",".join(DAILY_VARIABLES)
        }
        if timezone:
            params["timezone"] = timezone
        if start_date and end_date:
            params["start_date"] = start_date
            params["end_date"] = end_date

        data = self.get_json(self.FORECAST_URL, params)
        logger.info(f"✅ Open-Meteo: дневные данные получены для ({lat}, {lon})")
        return data
