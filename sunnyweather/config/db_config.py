# -*- coding: utf-8 -*-
"""
Конфигурация путей к локальному хранилищу.
Папка данных задаётся через SUNNYWEATHER_DATA_DIR, иначе ./data.
"""

import os
from pathlib import Path

# === Папка данных ===
DATA_DIR = Path(os.getenv("SUNNYWEATHER_DATA_DIR", Path.cwd() / "data")).resolve()

# === Сохранённое место (одна запись) ===
PLACE_DB_PATH = DATA_DIR / "place.db"

# === Логи ===
LOGS_DIR = DATA_DIR / "logs"

# === ПАРАМЕТРЫ ПОДКЛЮЧЕНИЯ ===
DB_CONNECTION_TIMEOUT = 30  # секунд
