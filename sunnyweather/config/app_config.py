# sunnyweather/config/app_config.py
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://api.caiyunapp.com/"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else default


@dataclass
class AppConfig:
    caiyun_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    lang: str = "zh_CN"
    api_timeout: int = 30  # секунд
    io_workers: int = 4  # минимум 2: realtime и daily грузятся параллельно
    telegram_token: str = ""
    owner_chat_id: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def load(cls):
        owner = os.getenv("OWNER_CHAT_ID", "").strip()
        base_url = os.getenv("CAIYUN_BASE_URL", DEFAULT_BASE_URL)
        if not base_url.endswith("/"):
            base_url += "/"
        return cls(
            caiyun_token=os.getenv("CAIYUN_TOKEN", ""),
            base_url=base_url,
            lang=os.getenv("CAIYUN_LANG", "zh_CN"),
            api_timeout=_env_int("API_TIMEOUT", 30),
            io_workers=max(2, _env_int("IO_WORKERS", 4)),
            telegram_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
            owner_chat_id=int(owner) if owner else None,
            log_level=os.getenv("LOG_LEVEL", "INFO")
        )
