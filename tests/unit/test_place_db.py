# -*- coding: utf-8 -*-
"""
Тесты для core/db/place_db.py
"""
from contextlib import closing

import pytest

from sunnyweather.core.db.place_db import PlaceDao
from sunnyweather.core.models.place import Location, Place
from sunnyweather.core.utils.error_handler import NotFoundError

BEIJING = Place(name="北京市", location=Location(lng="116.405285", lat="39.904989"), address="中国北京市")
SHANGHAI = Place(name="上海市", location=Location(lng="121.473701", lat="31.230416"), address="中国上海市")


def test_nothing_saved_initially(place_dao):
    assert place_dao.is_place_saved() is False
    with pytest.raises(NotFoundError):
        place_dao.get_saved_place()


def test_save_and_load_round_trip(place_dao):
    place_dao.save_place(BEIJING)

    assert place_dao.is_place_saved() is True
    assert place_dao.get_saved_place() == BEIJING


def test_second_save_overwrites_first(place_dao):
    place_dao.save_place(BEIJING)
    place_dao.save_place(SHANGHAI)

    assert place_dao.get_saved_place() == SHANGHAI
    with closing(place_dao._get_connection()) as conn:
        count = conn.execute("SELECT COUNT(*) FROM saved_place").fetchone()[0]
    assert count == 1


def test_saved_place_survives_reopen(tmp_path):
    db_path = tmp_path / "nested" / "place.db"
    PlaceDao(db_path=db_path).save_place(BEIJING)

    assert PlaceDao(db_path=db_path).get_saved_place() == BEIJING


def test_clear(place_dao):
    place_dao.save_place(BEIJING)
    place_dao.clear()
    assert place_dao.is_place_saved() is False


def test_is_place_saved_never_raises(tmp_path):
    dao = PlaceDao(db_path=tmp_path / "place.db")
    dao.db_path = tmp_path / "missing-dir" / "place.db"
    assert dao.is_place_saved() is False
