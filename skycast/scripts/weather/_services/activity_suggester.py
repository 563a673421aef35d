# -*- coding: utf-8 -*-
"""
Подсказки занятий по погоде через Gemini.

Промпт содержит город, состояние неба и температуру как есть.
Ответ: один блок текста, который режется на строки.
"""

import logging
from typing import List, Optional

from skycast.core.models.weather_response import SkyCondition
from skycast.core.utils.error_handler import SuggestionError

logger = logging.getLogger("activity_suggester")

DEFAULT_MODEL = "gemini-1.5-flash"

# Строки, в которых модель пересказывает инструкцию, а не предлагает занятие
ECHO_MARKERS = ("Remember", "suggestions")


def _format_temperature(temperature: float) -> str:
    # 15.0 -> "15", 15.3 -> "15.3"
    return f"{temperature:g}"


def build_prompt(city: str, sky_condition: SkyCondition, temperature: float) -> str:
    return (
        f"Suggest activities to do in {city} when the weather is {sky_condition} "
        f"and the temperature is {_format_temperature(temperature)}°C. "
        "List only concise activity suggestions, without explanations."
    )


def parse_suggestions(text: str) -> List[str]:
    """
    Режет ответ модели на отдельные подсказки.

    Пустые строки и строки с "Remember"/"suggestions" отбрасываются.
    Фильтр эвристический, смысл строк не проверяется.
    """
    lines = (line.strip() for line in text.splitlines())
    return [
        line for line in lines
        if line and not any(marker in line for marker in ECHO_MARKERS)
    ]


class ActivitySuggester:
    """Генератор подсказок поверх google-generativeai."""

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL, model=None):
        self.api_key = api_key
        self.model_name = model_name
        self._model = model

    def _get_model(self):
        if self._model is None:
            if not self.api_key:
                raise SuggestionError("GEMINI_API_KEY не задан")
            import google.generativeai as genai
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(self.model_name)
        return self._model

    def suggest(self, city: str, sky_condition: SkyCondition, temperature: float) -> List[str]:
        """
        Запрашивает подсказки занятий.

        Raises:
            SuggestionError: нет ключа, ошибка сервиса или пустой ответ
        """
        prompt = build_prompt(city, sky_condition, temperature)
        model = self._get_model()
        logger.debug(f"🧠 Промпт: {prompt}")

        try:
            response = model.generate_content(prompt)
            text = response.text
        except Exception as e:
            # SDK бросает собственные типы (в т.ч. ValueError на заблокированный ответ)
            raise SuggestionError(f"Ошибка Gemini: {e}") from e

        if not text or not text.strip():
            raise SuggestionError("Пустой ответ модели")

        suggestions = parse_suggestions(text)
        if not suggestions:
            raise SuggestionError("В ответе модели нет подсказок")

        logger.info(f"💡 Подсказки для {city}: {len(suggestions)} шт.")
        return suggestions
