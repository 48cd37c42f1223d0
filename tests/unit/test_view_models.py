# -*- coding: utf-8 -*-
"""
Тесты для ui/place/place_view_model.py и ui/weather/weather_view_model.py
"""
import asyncio

from sunnyweather.core.models.place import PlaceResponse
from sunnyweather.core.models.weather import DailyResponse, RealtimeResponse
from sunnyweather.ui.place.place_view_model import PlaceViewModel
from sunnyweather.ui.weather.weather_view_model import WeatherViewModel


async def _wait_for(received, count, timeout=2.0):
    deadline = asyncio.get_running_loop().time() + timeout
    while len(received) < count and asyncio.get_running_loop().time() < deadline:
        await asyncio.sleep(0.01)


async def test_each_trigger_starts_one_search(make_repository, fake_api_client, place_json):
    client = fake_api_client(place=PlaceResponse.from_dict(place_json))
    view_model = PlaceViewModel(make_repository(client))
    received = []
    view_model.place_live_data.observe(received.append)

    view_model.search_places("beijing")
    await _wait_for(received, 1)
    view_model.search_places("beijing")
    await _wait_for(received, 2)

    assert client.calls == [("search", "beijing"), ("search", "beijing")]
    assert len(received) == 2
    assert all(result.is_success for result in received)
    assert [p.name for p in received[-1].value] == ["北京市", "北京西站"]


async def test_only_latest_search_is_delivered(make_repository, fake_api_client, place_json):
    client = fake_api_client(place=PlaceResponse.from_dict(place_json))
    view_model = PlaceViewModel(make_repository(client))
    received = []
    view_model.place_live_data.observe(received.append)

    view_model.search_places("bei")
    view_model.search_places("beijing")
    await _wait_for(received, 1)
    await asyncio.sleep(0.05)

    assert len(received) == 1


def test_place_list_starts_empty(make_repository, fake_api_client):
    view_model = PlaceViewModel(make_repository(fake_api_client()))
    assert view_model.place_list == []
    assert view_model.is_place_saved() is False


async def test_weather_view_model_refresh(make_repository, fake_api_client, realtime_json, daily_json):
    client = fake_api_client(
        realtime=RealtimeResponse.from_dict(realtime_json),
        daily=DailyResponse.from_dict(daily_json)
    )
    view_model = WeatherViewModel(make_repository(client))
    received = []
    view_model.weather_live_data.observe(received.append)

    view_model.refresh_weather("116.4", "39.9")
    await _wait_for(received, 1)

    assert received[0].is_success
    assert received[0].value.realtime.skycon == "PARTLY_CLOUDY_DAY"
    assert ("realtime", "116.4", "39.9") in client.calls


async def test_weather_view_model_refresh_reuses_last_location(make_repository, fake_api_client,
                                                               realtime_json, daily_json):
    client = fake_api_client(
        realtime=RealtimeResponse.from_dict(realtime_json),
        daily=DailyResponse.from_dict(daily_json)
    )
    view_model = WeatherViewModel(make_repository(client))
    received = []
    view_model.weather_live_data.observe(received.append)

    assert view_model.refresh() is False

    view_model.refresh_weather("116.4", "39.9")
    await _wait_for(received, 1)
    assert (view_model.location_lng, view_model.location_lat) == ("116.4", "39.9")

    assert view_model.refresh() is True
    await _wait_for(received, 2)

    assert len(received) == 2
    assert client.calls.count(("realtime", "116.4", "39.9")) == 2
