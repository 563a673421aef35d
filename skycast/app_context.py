# skycast/app_context.py
# -*- coding: utf-8 -*-
"""
Глобальный координатор зависимостей.
Инициализирует сервисы один раз и предоставляет к ним доступ.
"""

import logging
from typing import Optional

from skycast.config.bot_config import BotConfig
from skycast.config.logging_config import setup_logging
from skycast.core.utils.api_client import OpenMeteoClient
from skycast.scripts.weather._services.activity_suggester import ActivitySuggester
from skycast.scripts.weather.view_controller import ViewController

logger = logging.getLogger("app_context")


class AppContext:
    """
    Единый контекст приложения. Все зависимости инициализируются здесь.
    """

    def __init__(self):
        self._initialized = False
        self.config: Optional[BotConfig] = None
        self.client: Optional[OpenMeteoClient] = None
        # Подсказки: необязательная возможность: без ключа их нет
        self.suggester: Optional[ActivitySuggester] = None

    def initialize_sync(self, config: Optional[BotConfig] = None, configure_logging: bool = True):
        """Синхронная инициализация всех компонентов."""
        if self._initialized:
            return

        # 1. Конфигурация и логирование
        self.config = config or BotConfig.load()
        if configure_logging:
            setup_logging(self.config.log_level)

        # 2. HTTP-клиент Open-Meteo
        self.client = OpenMeteoClient(timeout=self.config.http_timeout)

        # 3. Генератор подсказок
        if self.config.gemini_api_key:
            self.suggester = ActivitySuggester(self.config.gemini_api_key, self.config.gemini_model)
        else:
            logger.warning("⚠️ GEMINI_API_KEY не задан, подсказки занятий отключены")

        self._initialized = True
        logger.info("✅ AppContext: initialized")

    def create_view_controller(self) -> ViewController:
        """Новый контроллер представления с общими клиентом и генератором."""
        if not self._initialized:
            self.initialize_sync()
        return ViewController(
            client=self.client,
            suggester=self.suggester,
            history_days=self.config.history_days
        )

    def shutdown_sync(self):
        """Синхронное завершение (закрытие HTTP-сессии)."""
        if not self._initialized:
            return
        self.client.session.close()
        self._initialized = False
        logger.info("🛑 AppContext: shut down")


# Глобальный экземпляр: точка доступа для всех модулей
app_context = AppContext()
