# -*- coding: utf-8 -*-
"""
Локальное хранилище сохранённого места.
Использует SQLite в синхронном режиме. Хранит ровно одну запись:
каждое сохранение перезаписывает предыдущее, истории нет.
"""

import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Optional

from sunnyweather.config.db_config import DB_CONNECTION_TIMEOUT, PLACE_DB_PATH
from sunnyweather.core.models.place import Location, Place
from sunnyweather.core.utils.error_handler import NotFoundError

logger = logging.getLogger("place_db")


class PlaceDao:
    """
    Хранилище одного сохранённого места.
    Соединение открывается на каждый вызов, поэтому методы можно звать из пула потоков.
    """

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = Path(db_path or PLACE_DB_PATH)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(
            self.db_path,
            timeout=DB_CONNECTION_TIMEOUT,
            check_same_thread=False
        )
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self):
        """Создаёт таблицу при первом запуске."""
        with closing(self._get_connection()) as conn, conn:
            # id всегда 1: запись одна
            conn.execute("""
                CREATE TABLE IF NOT EXISTS saved_place (
                    id INTEGER PRIMARY KEY CHECK (id = 1),
                    name TEXT NOT NULL,
                    lng TEXT NOT NULL,
                    lat TEXT NOT NULL,
                    address TEXT NOT NULL DEFAULT '',
                    saved_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
        logger.info("Локальная БД места инициализирована: %s", self.db_path)

    def save_place(self, place: Place) -> None:
        """Сохраняет место, безусловно перезаписывая предыдущее."""
        with closing(self._get_connection()) as conn, conn:
            conn.execute(
                """
                INSERT INTO saved_place (id, name, lng, lat, address)
                VALUES (1, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name = excluded.name,
                    lng = excluded.lng,
                    lat = excluded.lat,
                    address = excluded.address,
                    saved_at = CURRENT_TIMESTAMP
                """,
                (place.name, place.location.lng, place.location.lat, place.address)
            )
        logger.info(f"💾 Место сохранено: {place.name} ({place.location.lng}, {place.location.lat})")

    def get_saved_place(self) -> Place:
        """
        Возвращает сохранённое место.

        Raises:
            NotFoundError: если ничего не сохранено (сначала проверяйте is_place_saved())
        """
        with closing(self._get_connection()) as conn, conn:
            row = conn.execute(
                "SELECT name, lng, lat, address FROM saved_place WHERE id = 1"
            ).fetchone()

        if row is None:
            raise NotFoundError("no saved place")
        return Place(
            name=row["name"],
            location=Location(lng=row["lng"], lat=row["lat"]),
            address=row["address"]
        )

    def is_place_saved(self) -> bool:
        """Есть ли сохранённое место. Не выбрасывает исключений."""
        try:
            with closing(self._get_connection()) as conn, conn:
                row = conn.execute("SELECT 1 FROM saved_place WHERE id = 1").fetchone()
            return row is not None
        except sqlite3.Error as e:
            logger.error("❌ Ошибка чтения сохранённого места: %s", e)
            return False

    def clear(self) -> None:
        """Удаляет сохранённое место."""
        with closing(self._get_connection()) as conn, conn:
            conn.execute("DELETE FROM saved_place")
        logger.info("🗑️ Сохранённое место удалено")
