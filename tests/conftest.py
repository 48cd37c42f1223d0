# -*- coding: utf-8 -*-
"""
Общие фикстуры: конфигурация, временная БД, ответы API, фейковый клиент.
"""
import copy
import time

import pytest

from sunnyweather.config.app_config import AppConfig
from sunnyweather.core.db.place_db import PlaceDao
from sunnyweather.core.repository import Repository

BASE_URL = "https://api.test/"
TOKEN = "test-token"

PLACE_JSON = {
    "status": "ok",
    "query": "beijing",
    "places": [
        {
            "id": "B000A83AJN",
            "name": "北京市",
            "location": {"lat": 39.904989, "lng": 116.405285},
            "formatted_address": "中国北京市"
        },
        {
            "id": "B000A7BD6C",
            "name": "北京西站",
            "location": {"lat": 39.894914, "lng": 116.322062},
            "formatted_address": "中国北京市丰台区莲花池东路118号"
        }
    ]
}

REALTIME_JSON = {
    "status": "ok",
    "result": {
        "realtime": {
            "temperature": 21.5,
            "skycon": "PARTLY_CLOUDY_DAY",
            "air_quality": {"aqi": {"chn": 42, "usa": 35}}
        }
    }
}

DAILY_JSON = {
    "status": "ok",
    "result": {
        "daily": {
            "temperature": [
                {"date": "2024-05-01T00:00+08:00", "max": 27.0, "min": 14.0},
                {"date": "2024-05-02T00:00+08:00", "max": 25.0, "min": 13.0},
                {"date": "2024-05-03T00:00+08:00", "max": 22.0, "min": 12.0}
            ],
            "skycon": [
                {"date": "2024-05-01T00:00+08:00", "value": "CLEAR_DAY"},
                {"date": "2024-05-02T00:00+08:00", "value": "LIGHT_RAIN"},
                {"date": "2024-05-03T00:00+08:00", "value": "CLOUDY"}
            ],
            "precipitation": [
                {"date": "2024-05-01T00:00+08:00", "probability": 0},
                {"date": "2024-05-02T00:00+08:00", "probability": 70},
                {"date": "2024-05-03T00:00+08:00", "probability": 10}
            ],
            "life_index": {
                "coldRisk": [{"date": "2024-05-01T00:00+08:00", "index": "3", "desc": "易发"}],
                "carWashing": [{"date": "2024-05-01T00:00+08:00", "index": "1", "desc": "适宜"}],
                "ultraviolet": [{"date": "2024-05-01T00:00+08:00", "index": "4", "desc": "强"}],
                "dressing": [{"date": "2024-05-01T00:00+08:00", "index": "5", "desc": "舒适"}]
            }
        }
    }
}


class FakeAPIClient:
    """
    Подмена APIClient: отдаёт заранее заданные ответы (или выбрасывает исключения)
    с искусственной задержкой.
    """

    def __init__(self, place=None, realtime=None, daily=None, realtime_delay=0.0, daily_delay=0.0):
        self.place = place
        self.realtime = realtime
        self.daily = daily
        self.realtime_delay = realtime_delay
        self.daily_delay = daily_delay
        self.calls = []

    @staticmethod
    def _answer(outcome, delay=0.0):
        if delay:
            time.sleep(delay)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def search_places(self, query):
        self.calls.append(("search", query))
        return self._answer(self.place)

    def get_realtime_weather(self, lng, lat):
        self.calls.append(("realtime", lng, lat))
        return self._answer(self.realtime, self.realtime_delay)

    def get_daily_weather(self, lng, lat):
        self.calls.append(("daily", lng, lat))
        return self._answer(self.daily, self.daily_delay)


@pytest.fixture
def place_json():
    return copy.deepcopy(PLACE_JSON)


@pytest.fixture
def realtime_json():
    return copy.deepcopy(REALTIME_JSON)


@pytest.fixture
def daily_json():
    return copy.deepcopy(DAILY_JSON)


@pytest.fixture
def app_config():
    return AppConfig(caiyun_token=TOKEN, base_url=BASE_URL, api_timeout=5, io_workers=4)


@pytest.fixture
def place_dao(tmp_path):
    return PlaceDao(db_path=tmp_path / "place.db")


@pytest.fixture
def make_repository(place_dao):
    """Фабрика репозиториев поверх FakeAPIClient; пулы потоков закрываются после теста."""
    created = []

    def factory(client):
        repository = Repository(client, place_dao, io_workers=4)
        created.append(repository)
        return repository

    yield factory
    for repository in created:
        repository.executor.shutdown(wait=True)


@pytest.fixture
def fake_api_client():
    return FakeAPIClient
