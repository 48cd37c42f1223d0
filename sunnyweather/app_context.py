# sunnyweather/app_context.py
# -*- coding: utf-8 -*-
"""
Единый контекст приложения.
Создаётся один раз при старте и передаётся явно тем, кому нужны зависимости.
"""

import logging
from pathlib import Path
from typing import Optional

from sunnyweather.config.app_config import AppConfig
from sunnyweather.config.db_config import PLACE_DB_PATH
from sunnyweather.config.logging_config import setup_logging
from sunnyweather.core.db.place_db import PlaceDao
from sunnyweather.core.repository import Repository
from sunnyweather.core.utils.api_client import APIClient

logger = logging.getLogger("app_context")


class AppContext:
    """
    Все зависимости инициализируются здесь: конфигурация, хранилище, API-клиент, репозиторий.
    """

    def __init__(self, config: Optional[AppConfig] = None, db_path: Optional[Path] = None):
        self._initialized = False
        self.config: Optional[AppConfig] = config
        self.db_path = db_path or PLACE_DB_PATH
        self.place_dao: Optional[PlaceDao] = None
        self.api_client: Optional[APIClient] = None
        self.repository: Optional[Repository] = None

    def initialize_sync(self, configure_logging: bool = True) -> "AppContext":
        """Синхронная инициализация всех компонентов."""
        if self._initialized:
            return self

        # 1. Конфигурация
        if self.config is None:
            self.config = AppConfig.load()
        if configure_logging:
            setup_logging(self.config.log_level)
        if not self.config.caiyun_token:
            logger.warning("⚠️ CAIYUN_TOKEN не задан: запросы к API будут отклонены")

        # 2. Хранилище и сеть
        self.place_dao = PlaceDao(db_path=self.db_path)
        self.api_client = APIClient(self.config)
        self.repository = Repository(
            self.api_client,
            self.place_dao,
            io_workers=self.config.io_workers
        )

        self._initialized = True
        logger.info("✅ AppContext: initialized")
        return self

    def shutdown_sync(self) -> None:
        """Закрытие ресурсов: пул потоков и HTTP-сессия."""
        if not self._initialized:
            return
        self.repository.close()
        self.api_client.close()
        self._initialized = False
        logger.info("🛑 AppContext: shut down")
