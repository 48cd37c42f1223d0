# -*- coding: utf-8 -*-
"""
Модели погоды: текущая (realtime), по дням (daily) и их объединение Weather.

Формат ответов:
- realtime: {"status": ..., "result": {"realtime": {"temperature", "skycon", "air_quality": {"aqi": {"chn"}}}}}
- daily:    {"status": ..., "result": {"daily": {"temperature": [...], "skycon": [...],
             "precipitation": [...], "life_index": {...}}}}

Полезная нагрузка разбирается только при status == "ok".
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

logger = logging.getLogger("weather_models")


@dataclass(frozen=True)
class Realtime:
    temperature: float
    skycon: str
    aqi: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Realtime":
        return cls(
            temperature=float(data["temperature"]),
            skycon=str(data["skycon"]),
            aqi=float(data["air_quality"]["aqi"]["chn"])
        )


@dataclass(frozen=True)
class DailyForecast:
    date: str
    temperature_max: float
    temperature_min: float
    skycon: str
    precipitation_probability: Optional[float] = None


@dataclass(frozen=True)
class LifeIndex:
    cold_risk: List[str] = field(default_factory=list)
    car_washing: List[str] = field(default_factory=list)
    ultraviolet: List[str] = field(default_factory=list)
    dressing: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LifeIndex":
        def descs(key: str) -> List[str]:
            return [str(item["desc"]) for item in data.get(key) or []]

        return cls(
            cold_risk=descs("coldRisk"),
            car_washing=descs("carWashing"),
            ultraviolet=descs("ultraviolet"),
            dressing=descs("dressing")
        )


@dataclass(frozen=True)
class Daily:
    forecasts: List[DailyForecast]
    life_index: Optional[LifeIndex] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Daily":
        """
        Склеивает параллельные массивы temperature / skycon / precipitation по индексу дня.
        Длина прогноза — по самому короткому из temperature и skycon.
        """
        temperatures = data["temperature"]
        skycons = data["skycon"]
        precipitation = data.get("precipitation") or []
        if len(temperatures) != len(skycons):
            logger.warning(
                f"⚠️ Длины temperature ({len(temperatures)}) и skycon ({len(skycons)}) не совпадают, "
                f"прогноз обрезан до {min(len(temperatures), len(skycons))} дн."
            )

        forecasts = []
        for i, (temp, sky) in enumerate(zip(temperatures, skycons)):
            probability = None
            if i < len(precipitation) and precipitation[i].get("probability") is not None:
                probability = float(precipitation[i]["probability"])
            forecasts.append(DailyForecast(
                date=str(sky.get("date") or temp.get("date") or ""),
                temperature_max=float(temp["max"]),
                temperature_min=float(temp["min"]),
                skycon=str(sky["value"]),
                precipitation_probability=probability
            ))

        life_index = data.get("life_index")
        return cls(
            forecasts=forecasts,
            life_index=LifeIndex.from_dict(life_index) if life_index else None
        )

    def __len__(self) -> int:
        return len(self.forecasts)

    def __iter__(self):
        return iter(self.forecasts)


@dataclass(frozen=True)
class RealtimeResponse:
    status: str
    realtime: Optional[Realtime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RealtimeResponse":
        status = str(data["status"])
        if status != "ok":
            return cls(status=status)
        return cls(status=status, realtime=Realtime.from_dict(data["result"]["realtime"]))


@dataclass(frozen=True)
class DailyResponse:
    status: str
    daily: Optional[Daily] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyResponse":
        status = str(data["status"])
        if status != "ok":
            return cls(status=status)
        return cls(status=status, daily=Daily.from_dict(data["result"]["daily"]))


@dataclass(frozen=True)
class Weather:
    """Текущая погода + прогноз по дням. Создаётся только когда оба запроса успешны."""
    realtime: Realtime
    daily: Daily
