# -*- coding: utf-8 -*-
"""
Контроллер представления погоды.

Состояния: {current, historical, forecast} × {обзор, день}.
Всё состояние: один ViewState, меняется только здесь.

Каждое действие пользователя получает номер поколения. Если пока
шли сетевые запросы началось более новое действие, результат
старого отбрасывается.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from skycast.core.models.view_state import CurrentView, ForecastView, HistoricalView, ViewState
from skycast.core.models.weather_response import DayRecord, DisplayMode
from skycast.core.utils.api_client import OpenMeteoClient
from skycast.core.utils.coordinate_manager import resolve_place
from skycast.core.utils.error_handler import (
    InvalidTransitionError,
    SuggestionError,
    WeatherError,
    log_exception,
    user_message,
)
from skycast.scripts.weather._processes.data_fetcher import (
    DEFAULT_HISTORY_DAYS,
    fetch_current,
    fetch_forecast,
    fetch_historical,
)
from skycast.scripts.weather._services.activity_suggester import ActivitySuggester

logger = logging.getLogger("view_controller")


class ViewController:
    """Оркестрирует геокодинг, загрузку погоды и подсказки."""

    def __init__(
        self,
        client: Optional[OpenMeteoClient] = None,
        suggester: Optional[ActivitySuggester] = None,
        history_days: int = DEFAULT_HISTORY_DAYS
    ):
        if history_days < 1:
            raise ValueError(f"Глубина архива должна быть положительной: days={history_days}")
        self.client = client or OpenMeteoClient()
        self.suggester = suggester
        self.history_days = history_days

        self.state: ViewState = CurrentView()
        self.city: Optional[str] = None
        self.error: str = ""
        self.loading: bool = False
        self._generation = 0

    # === СВОЙСТВА ===
    @property
    def mode(self) -> DisplayMode:
        return self.state.mode

    @property
    def selected_day(self) -> Optional[DayRecord]:
        return self.state.selected

    # === ВНУТРЕННЕЕ ===
    def _begin(self) -> int:
        self._generation += 1
        self.loading = True
        self.error = ""
        return self._generation

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.info(f"⏭️ Результат устаревшего действия #{generation} отброшен")
            return True
        return False

    def _finish(self, generation: int):
        if generation == self._generation:
            self.loading = False

    async def _run(self, func: Callable, *args):
        # Блокирующие HTTP-вызовы уходят в executor, event loop свободен
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func, *args)

    def _fail(self, generation: int, exception: WeatherError, action: str):
        if self._is_stale(generation):
            return
        log_exception(exception, f"❌ Ошибка действия «{action}»", context={"city": self.city})
        self.error = user_message(exception)

    # === ДЕЙСТВИЯ ===
    async def search(self, city: str) -> ViewState:
        """
        Геокодинг → текущая погода → классификация → подсказки.

        Ошибка до получения погоды очищает текущую погоду и подсказки;
        архив или прогноз на экране остаются.
        Ошибка подсказок не отменяет показ погоды.
        """
        generation = self._begin()
        try:
            try:
                place = await self._run(resolve_place, city, self.client)
                if self._is_stale(generation):
                    return self.state
                weather = await self._run(fetch_current, place, self.client)
                if self._is_stale(generation):
                    return self.state
            except WeatherError as e:
                self._fail(generation, e, "search")
                # Старые погода и подсказки не показываются под ошибкой
                if generation == self._generation and isinstance(self.state, CurrentView):
                    self.state = CurrentView()
                return self.state

            self.city = city
            self.state = CurrentView(weather=weather)

            try:
                suggestions = await self._suggest(city, weather)
            except SuggestionError as e:
                self._fail(generation, e, "suggest")
                return self.state

            if suggestions and not self._is_stale(generation):
                self.state = CurrentView(weather=weather, suggestions=tuple(suggestions))
            return self.state
        finally:
            self._finish(generation)

    async def _suggest(self, city: str, weather) -> List[str]:
        if self.suggester is None:
            logger.debug("💤 Генератор подсказок не настроен")
            return []
        return await self._run(
            self.suggester.suggest, city, weather.sky_condition, weather.temperature
        )

    async def select_current(self) -> ViewState:
        """Повторно загружает текущую погоду для последнего города."""
        return await self.search(self.city or "")

    async def select_historical(self) -> ViewState:
        return await self._select_daily(DisplayMode.HISTORICAL)

    async def select_forecast(self) -> ViewState:
        return await self._select_daily(DisplayMode.FORECAST)

    async def _select_daily(self, mode: DisplayMode) -> ViewState:
        generation = self._begin()
        try:
            place = await self._run(resolve_place, self.city or "", self.client)
            if self._is_stale(generation):
                return self.state
            if mode is DisplayMode.HISTORICAL:
                days = await self._run(fetch_historical, place, self.client, self.history_days)
            else:
                days = await self._run(fetch_forecast, place, self.client)
            if self._is_stale(generation):
                return self.state
        except WeatherError as e:
            self._fail(generation, e, mode.value)
            return self.state
        finally:
            self._finish(generation)

        # Новый вариант состояния: данные других режимов уходят вместе со старым
        view_cls = HistoricalView if mode is DisplayMode.HISTORICAL else ForecastView
        self.state = view_cls(days=tuple(days))
        return self.state

    def select_day(self, day: DayRecord) -> ViewState:
        """Переход к подробностям дня; только из обзора архива или прогноза."""
        if isinstance(self.state, CurrentView):
            raise InvalidTransitionError("Выбор дня недоступен в режиме текущей погоды")
        if self.state.is_detail:
            raise InvalidTransitionError("День уже выбран, сначала вернитесь к обзору")
        if day not in self.state.days:
            raise InvalidTransitionError(f"День {day.date} отсутствует в наборе")
        self.state = self.state.with_selected(day)
        self.error = ""
        return self.state

    def select_day_by_date(self, date: str) -> ViewState:
        day = None
        if not isinstance(self.state, CurrentView):
            day = self.state.find_day(date)
        if day is None:
            raise InvalidTransitionError(f"День {date} отсутствует в наборе")
        return self.select_day(day)

    def back_to_overview(self) -> ViewState:
        """Сбрасывает выбранный день; режим не меняется."""
        if not isinstance(self.state, CurrentView):
            self.state = self.state.with_selected(None)
        self.error = ""
        return self.state
