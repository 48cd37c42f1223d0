# -*- coding: utf-8 -*-
"""
SunnyWeather: поиск мест, погода (сейчас + по дням) и сохранённое место.
"""

__version__ = "1.0.0"
