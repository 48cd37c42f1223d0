# -*- coding: utf-8 -*-
"""
Обёртка для API Caiyun (彩云天气).
Поддерживает:
- Поиск мест: search_places(query)
- Текущая погода: get_realtime_weather(lng, lat)
- Погода по дням: get_daily_weather(lng, lat)

Все методы блокирующие: Repository запускает их в пуле потоков.
Ошибки не глотаются: сеть → TransportError, пустое/битое тело → EmptyBodyError.
Повторов нет, таймаут — только у транспорта (API_TIMEOUT).
"""

import logging
from typing import Any, Dict, Optional

import requests

from sunnyweather.config.app_config import AppConfig
from sunnyweather.core.models.place import PlaceResponse
from sunnyweather.core.models.weather import DailyResponse, RealtimeResponse
from sunnyweather.core.utils.error_handler import EmptyBodyError, TransportError

logger = logging.getLogger("api_client")


class APIClient:
    """Единый клиент для всех эндпоинтов Caiyun. Токен добавляется к каждому запросу."""

    def __init__(self, config: AppConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.base_url = config.base_url
        self.token = config.caiyun_token
        self.timeout = config.api_timeout
        self.session = session or requests.Session()

    # === ЭНДПОИНТЫ ===
    def search_places(self, query: str) -> PlaceResponse:
        """
        Ищет места по названию.

        Args:
            query (str): Строка поиска (не проверяется — это забота вызывающего)

        Returns:
            PlaceResponse: status и список мест (места только при status == "ok")
        """
        url = f"{self.base_url}v2/place"
        params = {"query": query, "token": self.token, "lang": self.config.lang}
        data = self._get_json(url, params=params)
        response = self._parse(PlaceResponse, data, url)
        logger.info(f"🔍 Поиск '{query}': status={response.status}, найдено {len(response.places)}")
        return response

    def get_realtime_weather(self, lng: str, lat: str) -> RealtimeResponse:
        """Текущая погода для точки (lng, lat)."""
        url = f"{self.base_url}v2.5/{self.token}/{lng},{lat}/realtime.json"
        response = self._parse(RealtimeResponse, self._get_json(url), url)
        logger.info(f"✅ Realtime: status={response.status} для ({lng}, {lat})")
        return response

    def get_daily_weather(self, lng: str, lat: str) -> DailyResponse:
        """Прогноз по дням для точки (lng, lat)."""
        url = f"{self.base_url}v2.5/{self.token}/{lng},{lat}/daily.json"
        response = self._parse(DailyResponse, self._get_json(url), url)
        logger.info(f"✅ Daily: status={response.status} для ({lng}, {lat})")
        return response

    def close(self) -> None:
        self.session.close()

    # === ВНУТРЕННЕЕ ===
    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ Ошибка запроса {self._safe_url(url)}: {self._safe_url(str(e))}")
            raise TransportError(f"request to {self._safe_url(url)} failed: {self._safe_url(str(e))}") from e

        if not response.content or not response.content.strip():
            logger.error(f"❌ Пустой ответ от {self._safe_url(url)}")
            raise EmptyBodyError("response body is null")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"❌ Ответ не JSON от {self._safe_url(url)}: {e}")
            raise EmptyBodyError(f"response body is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise EmptyBodyError(f"unexpected response body type: {type(data).__name__}")
        return data

    def _parse(self, model, data: Dict[str, Any], url: str):
        try:
            return model.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"❌ Не удалось разобрать ответ {self._safe_url(url)}: {e!r}")
            raise EmptyBodyError(f"cannot parse {model.__name__}: {e!r}") from e

    def _safe_url(self, url: str) -> str:
        """URL без токена — для логов и сообщений об ошибках."""
        return url.replace(self.token, "***") if self.token else url
