# -*- coding: utf-8 -*-
"""
Состояние представления как размеченное объединение.

ViewState = CurrentView | HistoricalView | ForecastView

Каждый вариант несёт только свои данные, поэтому одновременно
может существовать набор данных лишь одного режима.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from skycast.core.models.weather_response import CurrentWeather, DayRecord, DisplayMode


@dataclass(frozen=True)
class CurrentView:
    weather: Optional[CurrentWeather] = None
    suggestions: Tuple[str, ...] = ()

    mode = DisplayMode.CURRENT

    def __post_init__(self):
        if self.suggestions and self.weather is None:
            raise ValueError("Подсказки без текущей погоды недопустимы")

    @property
    def selected(self) -> None:
        return None


@dataclass(frozen=True)
class _DailyView:
    days: Tuple[DayRecord, ...] = ()
    selected: Optional[DayRecord] = None

    def __post_init__(self):
        if self.selected is not None and self.selected not in self.days:
            raise ValueError(f"День {self.selected.date} отсутствует в наборе")

    @property
    def is_detail(self) -> bool:
        return self.selected is not None

    def with_selected(self, day: Optional[DayRecord]):
        return replace(self, selected=day)

    def find_day(self, date: str) -> Optional[DayRecord]:
        return next((d for d in self.days if d.date == date), None)


@dataclass(frozen=True)
class HistoricalView(_DailyView):
    mode = DisplayMode.HISTORICAL


@dataclass(frozen=True)
class ForecastView(_DailyView):
    mode = DisplayMode.FORECAST


DailyView = Union[HistoricalView, ForecastView]
ViewState = Union[CurrentView, HistoricalView, ForecastView]
