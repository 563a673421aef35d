# -*- coding: utf-8 -*-
"""
Форматирование погодного отчёта (HTML-текст для Telegram).
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from skycast.core.models.view_state import CurrentView, ForecastView, HistoricalView, ViewState
from skycast.core.models.weather_response import SkyCondition
from skycast.core.utils.sky_condition import icon_for

logger = logging.getLogger("formatter")

TEMPLATES_DIR = Path(__file__).parent.parent / "_io" / "templates"

WEEKDAYS_SHORT = ["Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс"]
WEEKDAYS_FULL = ["Понедельник", "Вторник", "Среда", "Четверг", "Пятница", "Суббота", "Воскресенье"]
MONTHS_GENITIVE = [
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря"
]


def format_weekday(date_string: str) -> str:
    """'2024-05-06' → 'Пн'"""
    return WEEKDAYS_SHORT[date.fromisoformat(date_string).weekday()]


def format_full_date(date_string: str) -> str:
    """'2024-05-06' → 'Понедельник, 6 мая 2024'"""
    d = date.fromisoformat(date_string)
    return f"{WEEKDAYS_FULL[d.weekday()]}, {d.day} {MONTHS_GENITIVE[d.month - 1]} {d.year}"


def format_temperature(value: Optional[float]) -> str:
    if value is None:
        return "н/д"
    return f"{round(value)}°C"


def _format_value(value, unit: str) -> str:
    return "н/д" if value is None else f"{value}{unit}"


_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["weekday"] = format_weekday
_env.filters["full_date"] = format_full_date
_env.filters["temp"] = format_temperature
_env.filters["value"] = _format_value
_env.globals["icon_for"] = icon_for

MODE_TITLES = {
    HistoricalView: "📜 Последние дни",
    ForecastView: "🔮 Прогноз по дням",
}


def render_view(state: ViewState, city: Optional[str], error: str = "") -> str:
    """
    Формирует текст сообщения для текущего состояния.

    Args:
        state (ViewState): Состояние представления
        city (str): Последний найденный город
        error (str): Сообщение об ошибке, если есть

    Returns:
        str: HTML для ParseMode.HTML
    """
    if isinstance(state, CurrentView):
        template = _env.get_template("current_weather.html.j2")
        text = template.render(city=city, view=state, error=error)
    elif state.selected is not None:
        template = _env.get_template("day_detail.html.j2")
        # Для дня отдельного кода погоды нет, иконка фиксированная
        text = template.render(
            city=city, day=state.selected, error=error,
            icon=icon_for(SkyCondition.PARTLY_CLOUDY)
        )
    else:
        template = _env.get_template("daily_overview.html.j2")
        text = template.render(city=city, view=state, title=MODE_TITLES[type(state)], error=error)

    logger.debug(f"🖨️ Отрисован режим {state.mode.value}")
    return text.strip()
