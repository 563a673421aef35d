# -*- coding: utf-8 -*-
"""
Ошибки конвейера погоды и централизованная обработка.

Иерархия:
- WeatherError: базовый класс, его ловит контроллер представления
  - NotFoundError: город не найден геокодером
  - NetworkError: сбой транспорта или HTTP-статус ошибки
  - MalformedResponseError: ответ API неожиданной формы
  - SuggestionError: генерация подсказок не удалась или пуста
  - InvalidTransitionError: недопустимый переход контроллера
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")


class WeatherError(Exception):
    """Базовая ошибка конвейера погоды."""


class NotFoundError(WeatherError):
    """Название места не удалось разрешить в координаты."""


class NetworkError(WeatherError):
    """Сбой сети: соединение, таймаут, HTTP-статус ошибки."""


class MalformedResponseError(WeatherError):
    """В ответе нет ожидаемых полей или массивы разной длины."""


class SuggestionError(WeatherError):
    """Сервис подсказок вернул ошибку или пустой ответ."""


class InvalidTransitionError(WeatherError, ValueError):
    """Действие недопустимо в текущем состоянии представления."""


# Сообщения для пользователя
USER_MESSAGES = {
    NotFoundError: "Город не найден",
    NetworkError: "Не удалось получить данные о погоде",
    MalformedResponseError: "Сервис погоды вернул некорректные данные",
    SuggestionError: "Не удалось получить подсказки занятий",
    InvalidTransitionError: "Это действие сейчас недоступно",
}


def user_message(exception: Exception) -> str:
    """
    Превращает исключение в одну строку для показа пользователю.

    Неизвестные ошибки получают общее сообщение.
    """
    for exc_type in type(exception).__mro__:
        if exc_type in USER_MESSAGES:
            return USER_MESSAGES[exc_type]
    return "Не удалось получить данные о погоде"


def log_and_raise(message: str, exception: Exception, context: Optional[dict] = None):
    """
    Логирует ошибку и выбрасывает её дальше.

    Args:
        message (str): Описание для лога
        exception (Exception): Исключение, которое нужно выбросить
        context (dict): Дополнительный контекст (например, url, city)
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"{message}{log_context} | Ошибка: {exception!r}")
    raise exception


def log_exception(exception: Exception, message: str = "Необработанное исключение", context: Optional[dict] = None):
    """
    Просто логирует исключение без выбрасывания.

    Args:
        exception (Exception): Исключение
        message (str): Описание
        context (dict): Контекст (chat_id, city и т.п.)
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"{message}{log_context} | Ошибка: {exception!r}", exc_info=exception)
