# -*- coding: utf-8 -*-
"""
Репозиторий — единая точка входа слоя данных.

- search_places(query)      → LiveResult[Result[List[Place]]]
- refresh_weather(lng, lat) → LiveResult[Result[Weather]]
- save_place / get_saved_place / is_place_saved — локальное хранилище

Сетевые и дисковые вызовы блокирующие, поэтому выполняются в собственном
пуле потоков: event loop вызывающего никогда не блокируется.
Любая ошибка превращается в Result.failure — подписчик всегда получает
ровно одно значение.

Использование:

repository = Repository(api_client, place_dao)
weather = await repository.refresh_weather("116.4", "39.9")
if weather.is_success:
    ...
"""

import asyncio
import inspect
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Awaitable, Callable, List, Optional, TypeVar, Union

from sunnyweather.core.db.place_db import PlaceDao
from sunnyweather.core.live_data import LiveResult
from sunnyweather.core.models.place import Place
from sunnyweather.core.models.result import Result
from sunnyweather.core.models.weather import DailyResponse, RealtimeResponse, Weather
from sunnyweather.core.utils.api_client import APIClient
from sunnyweather.core.utils.error_handler import StatusError, log_exception

logger = logging.getLogger("repository")

T = TypeVar("T")

Work = Callable[[], Union[Result[T], Awaitable[Result[T]]]]

STATUS_OK = "ok"


class Repository:

    def __init__(self, api_client: APIClient, place_dao: PlaceDao,
                 executor: Optional[ThreadPoolExecutor] = None, io_workers: int = 4):
        self.api_client = api_client
        self.place_dao = place_dao
        self._own_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(
            max_workers=max(2, io_workers),
            thread_name_prefix="sunnyweather-io"
        )

    # === СЕТЬ ===
    def search_places(self, query: str) -> LiveResult[Result[List[Place]]]:
        """Поиск мест. status != "ok" → Failure(StatusError) с литеральным статусом."""
        async def work() -> Result[List[Place]]:
            response = await self._run_io(self.api_client.search_places, query)
            if response.status == STATUS_OK:
                return Result.success(response.places)
            return Result.failure(StatusError(
                f"response status is {response.status}",
                {"place": response.status}
            ))

        return self.fire(work)

    def refresh_weather(self, lng: str, lat: str) -> LiveResult[Result[Weather]]:
        """Текущая погода + прогноз по дням одним результатом."""
        async def work() -> Result[Weather]:
            return await self.fetch_weather(lng, lat)

        return self.fire(work)

    async def fetch_weather(self, lng: str, lat: str) -> Result[Weather]:
        """
        Параллельно запрашивает realtime и daily и объединяет их в Weather.

        Ждёт оба запроса (время ≈ самый медленный из двух). Частичного Weather
        не бывает: если хотя бы одна сторона не "ok" или упала — Failure,
        в сообщении которого описаны обе стороны.
        """
        realtime, daily = await asyncio.gather(
            self._run_io(self.api_client.get_realtime_weather, lng, lat),
            self._run_io(self.api_client.get_daily_weather, lng, lat),
            return_exceptions=True
        )
        # CancelledError — не Exception: отмену пробрасываем как есть
        for outcome in (realtime, daily):
            if isinstance(outcome, BaseException) and not isinstance(outcome, Exception):
                raise outcome

        if (isinstance(realtime, RealtimeResponse) and realtime.status == STATUS_OK
                and isinstance(daily, DailyResponse) and daily.status == STATUS_OK):
            logger.info(f"🌤️ Погода получена для ({lng}, {lat})")
            return Result.success(Weather(realtime.realtime, daily.daily))

        error = StatusError(
            f"{_describe('realtime', realtime)}; {_describe('daily', daily)}",
            {"realtime": _status_of(realtime), "daily": _status_of(daily)}
        )
        cause = next((o for o in (realtime, daily) if isinstance(o, Exception)), None)
        if cause is not None:
            error.__cause__ = cause
        logger.warning(f"⚠️ Погода для ({lng}, {lat}) не получена: {error}")
        return Result.failure(error)

    # === ЛОКАЛЬНОЕ ХРАНИЛИЩЕ ===
    def save_place(self, place: Place) -> None:
        self.place_dao.save_place(place)

    def get_saved_place(self) -> Place:
        return self.place_dao.get_saved_place()

    def is_place_saved(self) -> bool:
        return self.place_dao.is_place_saved()

    def clear_saved_place(self) -> None:
        self.place_dao.clear()

    # === ОБЁРТКА ДЛЯ АСИНХРОННЫХ ОПЕРАЦИЙ ===
    def fire(self, work: Work) -> LiveResult[Result[T]]:
        """
        Запускает work в фоне и возвращает LiveResult, который получит ровно одно значение.

        Args:
            work: корутинная функция или обычная функция без аргументов,
                возвращающая Result (или awaitable с Result). Обычная функция
                выполняется в пуле потоков.

        Исключение из work не доходит до подписчиков: оно логируется
        и публикуется как Result.failure(исключение).
        Требует запущенного event loop.
        """
        live: LiveResult[Result[T]] = LiveResult()

        async def runner() -> None:
            try:
                if inspect.iscoroutinefunction(work):
                    result = await work()
                else:
                    result = await self._run_io(work)
                    # lambda: coroutine(...) возвращает awaitable из пула потоков
                    if inspect.isawaitable(result):
                        result = await result
            except Exception as e:
                log_exception(e, "Ошибка асинхронной операции")
                result = Result.failure(e)
            live.set_value(result)

        live.attach(asyncio.get_running_loop().create_task(runner()))
        return live

    async def _run_io(self, func: Callable, *args):
        """Выполняет блокирующий вызов в пуле потоков репозитория."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, func, *args)

    def close(self) -> None:
        """Останавливает собственный пул потоков (чужой не трогаем)."""
        if self._own_executor:
            self.executor.shutdown(wait=False)


def _status_of(outcome) -> Optional[str]:
    return None if isinstance(outcome, BaseException) else outcome.status


def _describe(side: str, outcome) -> str:
    if isinstance(outcome, BaseException):
        return f"{side} request failed ({type(outcome).__name__}: {outcome})"
    return f"{side} response status is {outcome.status}"
