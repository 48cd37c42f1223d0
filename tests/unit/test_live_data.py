# -*- coding: utf-8 -*-
"""
Тесты для core/live_data.py
"""
import asyncio

from sunnyweather.core.live_data import LiveData, LiveResult, switch_map


def test_observer_receives_every_value_even_repeated():
    live = LiveData()
    received = []
    live.observe(received.append)

    live.set_value("a")
    live.set_value("a")
    live.set_value("b")

    assert received == ["a", "a", "b"]
    assert live.value == "b"


def test_late_observer_gets_latest_value():
    live = LiveData()
    live.set_value(1)
    live.set_value(2)
    received = []
    live.observe(received.append)
    assert received == [2]


def test_failing_observer_does_not_break_others():
    live = LiveData()
    received = []

    def broken(value):
        raise RuntimeError("observer bug")

    live.observe(broken)
    live.observe(received.append)
    live.set_value("ok")

    assert received == ["ok"]


def test_remove_observer():
    live = LiveData()
    received = []
    live.observe(received.append)
    live.remove_observer(received.append)
    live.set_value(1)
    assert received == []
    assert not live.has_observers()


async def test_async_observer_runs_as_task():
    live = LiveData()
    received = []

    async def handler(value):
        received.append(value)

    live.observe_async(handler)
    live.set_value("x")
    await asyncio.sleep(0.01)

    assert received == ["x"]


async def test_live_result_is_single_shot():
    live = LiveResult()
    received = []
    live.observe(received.append)

    live.set_value("first")
    live.set_value("second")

    assert received == ["first"]
    assert await live == "first"


async def test_live_result_await_before_value():
    live = LiveResult()

    async def publish():
        await asyncio.sleep(0.01)
        live.set_value(42)

    live.attach(asyncio.get_running_loop().create_task(publish()))
    assert await live == 42


async def test_live_result_cancelled_when_last_observer_leaves():
    live = LiveResult()
    task = asyncio.get_running_loop().create_task(asyncio.sleep(10))
    live.attach(task)

    def handler(value):
        pass

    live.observe(handler)
    live.remove_observer(handler)
    await asyncio.sleep(0.01)

    assert task.cancelled()
    assert live.cancelled
    assert not live.has_value


def test_switch_map_forwards_only_latest_inner():
    trigger = LiveData()
    inners = {}

    def transform(key):
        inners[key] = LiveData()
        return inners[key]

    output = switch_map(trigger, transform)
    received = []
    output.observe(received.append)

    trigger.set_value("first")
    trigger.set_value("second")
    inners["first"].set_value("stale")
    inners["second"].set_value("fresh")

    assert received == ["fresh"]
    assert not inners["first"].has_observers()
