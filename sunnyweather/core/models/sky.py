# sunnyweather/core/models/sky.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Sky:
    info: str
    icon: str


SKY = {
    "CLEAR_DAY": Sky("Ясно", "☀️"),
    "CLEAR_NIGHT": Sky("Ясно", "🌙"),
    "PARTLY_CLOUDY_DAY": Sky("Переменная облачность", "⛅"),
    "PARTLY_CLOUDY_NIGHT": Sky("Переменная облачность", "☁️"),
    "CLOUDY": Sky("Пасмурно", "☁️"),
    "WIND": Sky("Ветрено", "💨"),
    "LIGHT_RAIN": Sky("Небольшой дождь", "🌦️"),
    "MODERATE_RAIN": Sky("Дождь", "🌧️"),
    "HEAVY_RAIN": Sky("Сильный дождь", "🌧️"),
    "STORM_RAIN": Sky("Ливень", "⛈️"),
    "THUNDER_SHOWER": Sky("Гроза", "⛈️"),
    "SLEET": Sky("Мокрый снег", "🌨️"),
    "LIGHT_SNOW": Sky("Небольшой снег", "🌨️"),
    "MODERATE_SNOW": Sky("Снег", "❄️"),
    "HEAVY_SNOW": Sky("Сильный снег", "❄️"),
    "STORM_SNOW": Sky("Метель", "❄️"),
    "HAIL": Sky("Град", "🌨️"),
    "LIGHT_HAZE": Sky("Лёгкая дымка", "🌫️"),
    "MODERATE_HAZE": Sky("Дымка", "🌫️"),
    "HEAVY_HAZE": Sky("Смог", "🌫️"),
    "FOG": Sky("Туман", "🌫️"),
    "DUST": Sky("Пыль", "🌪️"),
    "SAND": Sky("Песчаная буря", "🌪️"),
}


def get_sky(skycon: str) -> Sky:
    """Описание погоды по коду skycon; неизвестный код считается CLEAR_DAY."""
    return SKY.get(skycon, SKY["CLEAR_DAY"])
