# -*- coding: utf-8 -*-
"""
Исключения слоя данных и утилиты для централизованной обработки ошибок.

Иерархия:
- TransportError   — запрос не выполнен (сеть, таймаут, код не 2xx)
- EmptyBodyError   — ответ пришёл, но тело пустое или не разбирается
- StatusError      — ответ разобран, но status != "ok"
- NotFoundError    — в локальном хранилище нет сохранённого места
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger("error_handler")


class SunnyWeatherError(Exception):
    """Базовое исключение слоя данных."""


class TransportError(SunnyWeatherError):
    """Сетевой вызов завершился ошибкой."""


class EmptyBodyError(TransportError):
    """Тело ответа пустое или не разбирается. Обрабатывается как TransportError."""


class StatusError(SunnyWeatherError):
    """
    Ответ получен, но поле status не равно "ok".

    Args:
        message (str): Диагностическое сообщение с литеральными статусами
        statuses (dict): {"realtime": "ok", "daily": "failed", ...};
            None — запрос этой стороны не выполнен вовсе
    """

    def __init__(self, message: str, statuses: Optional[Dict[str, Optional[str]]] = None):
        super().__init__(message)
        self.statuses = dict(statuses or {})


class NotFoundError(SunnyWeatherError):
    """Сохранённое место не найдено."""


def log_exception(exception: Exception, message: str = "Необработанное исключение", context: Optional[dict] = None):
    """
    Логирует исключение без выбрасывания.

    Args:
        exception (Exception): Исключение
        message (str): Описание
        context (dict): Контекст (lng, lat, query и т.п.)
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"{message}{log_context} | Ошибка: {exception!r}", exc_info=exception)
