# -*- coding: utf-8 -*-
"""
Наблюдаемые значения для передачи результатов от Repository к слою представления.

- LiveData   — хранит последнее значение и уведомляет подписчиков о каждом новом
- LiveResult — одноразовый LiveData: ровно одно значение, можно ждать через await
- switch_map — пересылает значения только последнего «внутреннего» источника

Все уведомления идут в потоке event loop: синхронные подписчики вызываются сразу,
асинхронные запускаются задачами. Ошибки в подписчиках логируются,
но не прерывают рассылку.

Использование:

live = repository.search_places("北京")
live.observe(lambda result: print(result))
result = await live
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Generic, List, Optional, Set, TypeVar, Union

logger = logging.getLogger("live_data")

T = TypeVar("T")
X = TypeVar("X")
Y = TypeVar("Y")

SyncObserver = Callable[[Any], None]
AsyncObserver = Callable[[Any], Awaitable[None]]
Observer = Union[SyncObserver, AsyncObserver]

_NOT_SET = object()


class LiveData(Generic[T]):
    """Наблюдаемое значение: хранит последнее и рассылает каждое новое подписчикам."""

    def __init__(self):
        self._value: Any = _NOT_SET
        self._sync_observers: List[SyncObserver] = []
        self._async_observers: List[AsyncObserver] = []
        self._tasks: Set[asyncio.Task] = set()

    @property
    def value(self) -> Optional[T]:
        return None if self._value is _NOT_SET else self._value

    @property
    def has_value(self) -> bool:
        return self._value is not _NOT_SET

    def has_observers(self) -> bool:
        return bool(self._sync_observers or self._async_observers)

    # === ПОДПИСКА ===
    def observe(self, observer: SyncObserver) -> None:
        """
        Подписка синхронным обработчиком.
        Если значение уже есть — обработчик сразу получает его.
        """
        self._sync_observers.append(observer)
        logger.debug("Зарегистрирован синхронный подписчик: %r", observer)
        if self.has_value:
            self._dispatch_sync(observer, self._value)

    def observe_async(self, observer: AsyncObserver) -> None:
        """Подписка асинхронным обработчиком (нужен запущенный event loop)."""
        if observer is None:
            logger.warning("⚠️ Попытка подписаться с observer=None. Игнорируем.")
            return
        self._async_observers.append(observer)
        logger.debug("Зарегистрирован асинхронный подписчик: %r", observer)
        if self.has_value:
            self._dispatch_async(observer, self._value)

    def remove_observer(self, observer: Observer) -> None:
        for registry in (self._sync_observers, self._async_observers):
            if observer in registry:
                registry.remove(observer)
                break
        else:
            logger.warning("Подписчик не найден: %r", observer)
            return
        if not self.has_observers():
            self._on_inactive()

    # === ПУБЛИКАЦИЯ ===
    def set_value(self, value: T) -> None:
        """Сохраняет значение и уведомляет всех подписчиков (даже если значение не изменилось)."""
        self._value = value
        for observer in list(self._sync_observers):
            self._dispatch_sync(observer, value)
        for observer in list(self._async_observers):
            self._dispatch_async(observer, value)

    def _dispatch_sync(self, observer: SyncObserver, value: Any) -> None:
        try:
            observer(value)
        except Exception as e:
            logger.error("Ошибка в синхронном подписчике %r: %s", observer, e, exc_info=True)

    def _dispatch_async(self, observer: AsyncObserver, value: Any) -> None:
        task = asyncio.get_running_loop().create_task(observer(value))
        self._tasks.add(task)
        task.add_done_callback(self._on_observer_done)

    def _on_observer_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Ошибка в асинхронном подписчике: %s", error, exc_info=error)

    def _on_inactive(self) -> None:
        """Вызывается, когда ушёл последний подписчик."""


class LiveResult(LiveData[T]):
    """
    Одноразовый LiveData: значение публикуется ровно один раз.

    Можно подписаться (observe / observe_async) или дождаться через await.
    Если последний подписчик отписался до появления значения и никто не ждёт
    через await — связанная работа отменяется.
    """

    def __init__(self):
        super().__init__()
        self._task: Optional[asyncio.Future] = None
        self._waiters: List[asyncio.Future] = []

    def attach(self, task: asyncio.Future) -> None:
        """Привязывает задачу, которая опубликует значение."""
        self._task = task
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Future) -> None:
        if not self.has_value:
            self.abandon()

    def set_value(self, value: T) -> None:
        if self.has_value:
            logger.warning("⚠️ LiveResult уже получил значение, повторная публикация проигнорирована")
            return
        super().set_value(value)
        waiters, self._waiters = self._waiters, []
        for waiter in waiters:
            if not waiter.done():
                waiter.set_result(value)

    def cancel(self) -> bool:
        """Отменяет работу, если значение ещё не получено."""
        if self.has_value or self._task is None or self._task.done():
            return False
        logger.info("🛑 Отмена незавершённой операции")
        return self._task.cancel()

    @property
    def cancelled(self) -> bool:
        return self._task is not None and self._task.cancelled()

    def abandon(self) -> None:
        """Работа отменена: ожидающие через await получают CancelledError."""
        waiters, self._waiters = self._waiters, []
        for waiter in waiters:
            waiter.cancel()

    def _on_inactive(self) -> None:
        if not self._waiters:
            self.cancel()

    async def _wait(self) -> T:
        if self.has_value:
            return self._value
        if self._task is not None and self._task.done():
            raise asyncio.CancelledError()
        waiter = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        return await waiter

    def __await__(self):
        return self._wait().__await__()


def switch_map(source: LiveData[X], transform: Callable[[X], Optional[LiveData[Y]]]) -> LiveData[Y]:
    """
    На каждое значение source вызывает transform и пересылает значения
    только последнего полученного LiveData. Предыдущий отписывается
    (LiveResult при этом отменяет незавершённую работу).
    """
    result: LiveData[Y] = LiveData()
    current: List[Optional[LiveData[Y]]] = [None]

    def on_inner(value: Y) -> None:
        result.set_value(value)

    def on_source(value: X) -> None:
        inner = transform(value)
        previous = current[0]
        if previous is inner:
            return
        current[0] = inner
        if previous is not None:
            previous.remove_observer(on_inner)
        if inner is not None:
            inner.observe(on_inner)

    source.observe(on_source)
    return result
