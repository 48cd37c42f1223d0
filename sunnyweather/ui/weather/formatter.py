# -*- coding: utf-8 -*-
"""
Форматирование погодного отчёта для отправки в чат (HTML-текст).
"""

import logging
from pathlib import Path
from typing import List, Tuple

from jinja2 import Environment, FileSystemLoader

from sunnyweather.core.models.sky import get_sky
from sunnyweather.core.models.weather import Weather

logger = logging.getLogger("formatter")

TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=True
)


def _life_index(weather: Weather) -> List[Tuple[str, str]]:
    """Индексы жизни на сегодня (первый день прогноза)."""
    life = weather.daily.life_index
    if life is None:
        return []
    rows = [
        ("Риск простуды", life.cold_risk),
        ("Одежда", life.dressing),
        ("УФ-индекс", life.ultraviolet),
        ("Мойка машины", life.car_washing),
    ]
    return [(label, values[0]) for label, values in rows if values]


def format_weather_report(weather: Weather, place_name: str) -> str:
    """
    Формирует текстовый отчёт: сейчас + прогноз по дням + индексы жизни.

    Args:
        weather (Weather): Объединённая погода
        place_name (str): Название места

    Returns:
        str: HTML для parse_mode=HTML
    """
    realtime = weather.realtime
    now = {
        "temperature": int(realtime.temperature),
        "sky": get_sky(realtime.skycon),
        "aqi": int(realtime.aqi),
    }
    days = [
        {
            "date": forecast.date[:10],
            "sky": get_sky(forecast.skycon),
            "temperature_min": int(forecast.temperature_min),
            "temperature_max": int(forecast.temperature_max),
            "precipitation": (
                None if forecast.precipitation_probability is None
                else int(forecast.precipitation_probability)
            ),
        }
        for forecast in weather.daily.forecasts
    ]
    text = _env.get_template("weather_now.html.j2").render(
        place_name=place_name,
        now=now,
        days=days,
        life=_life_index(weather)
    )
    logger.info(f"✅ Отчёт сформирован для {place_name}")
    return text.strip()
