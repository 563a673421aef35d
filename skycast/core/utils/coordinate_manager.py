# -*- coding: utf-8 -*-
"""
Менеджер координат и геокодирования.

Функции:
- Разрешение названия города в координаты (Open-Meteo geocoding)
- Валидация координат

Использование:
>>> from skycast.core.utils.coordinate_manager import resolve_place
>>> place = resolve_place("Paris", client)
>>> place.latitude, place.longitude
(48.85341, 2.3488)
"""

import logging
from typing import Optional

from skycast.core.models.weather_response import Place
from skycast.core.utils.api_client import OpenMeteoClient
from skycast.core.utils.error_handler import MalformedResponseError, NotFoundError

logger = logging.getLogger("coordinate_manager")


def validate_coordinates(lat: float, lon: float) -> bool:
    """
    Проверяет, что координаты в допустимом диапазоне.

    Args:
        lat (float): Широта (-90 .. 90)
        lon (float): Долгота (-180 .. 180)

    Returns:
        bool: True, если координаты корректны
    """
    try:
        return -90 <= float(lat) <= 90 and -180 <= float(lon) <= 180
    except (TypeError, ValueError):
        return False


def resolve_place(name: str, client: Optional[OpenMeteoClient] = None) -> Place:
    """
    Возвращает координаты первого результата геокодера.

    Неоднозначные названия молча разрешаются в лучший вариант провайдера.

    Args:
        name (str): Название места в свободной форме
        client (OpenMeteoClient): HTTP-клиент; по умолчанию создаётся новый

    Returns:
        Place: Координаты (и название, если провайдер его вернул)

    Raises:
        NotFoundError: пустое название или ноль результатов
        NetworkError: сбой транспорта
        MalformedResponseError: результат без числовых координат
    """
    if not name or not name.strip():
        raise NotFoundError("Пустое название города")

    client = client or OpenMeteoClient()
    data = client.search_place(name)

    results = data.get("results") or []
    if not results:
        logger.warning(f"🌍 Город не найден: «{name}»")
        raise NotFoundError(f"Город не найден: {name}")

    top = results[0]
    try:
        lat = float(top["latitude"])
        lon = float(top["longitude"])
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponseError(f"Нет координат в ответе геокодера: {e!r}") from e

    if not validate_coordinates(lat, lon):
        raise MalformedResponseError(f"Неверные координаты: lat={lat}, lon={lon}")

    place = Place(latitude=lat, longitude=lon, name=top.get("name"), country=top.get("country"))
    logger.info(f"📍 «{name}» → ({lat}, {lon})")
    return place
