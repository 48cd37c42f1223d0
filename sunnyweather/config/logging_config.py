# sunnyweather/config/logging_config.py
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from sunnyweather.config.db_config import LOGS_DIR

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s"


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None):
    """Настраивает глобальное логирование с ротацией."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if not logger.handlers:
        log_dir = Path(log_dir) if log_dir else LOGS_DIR
        log_dir.mkdir(parents=True, exist_ok=True)

        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

        # Файл с ротацией 10 МБ, 5 файлов
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    # Подавляем шум от сетевых библиотек
    for noisy in ("httpx", "telegram", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.info("🔧 Логирование инициализировано")
