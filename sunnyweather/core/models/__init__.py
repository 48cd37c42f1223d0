# -*- coding: utf-8 -*-
"""
Модели данных: места, погода, Result.
"""

from .place import Location, Place, PlaceResponse
from .result import Result
from .sky import Sky, get_sky
from .weather import (
    Daily,
    DailyForecast,
    DailyResponse,
    LifeIndex,
    Realtime,
    RealtimeResponse,
    Weather,
)

__all__ = [
    "Location", "Place", "PlaceResponse", "Result", "Sky", "get_sky",
    "Daily", "DailyForecast", "DailyResponse", "LifeIndex",
    "Realtime", "RealtimeResponse", "Weather",
]
