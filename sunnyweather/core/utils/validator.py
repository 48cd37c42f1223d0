# sunnyweather/core/utils/validator.py
import re

MAX_QUERY_LENGTH = 100

_UNSAFE_CHARS = re.compile(r"[^а-яА-ЯёЁa-zA-Z0-9\u4e00-\u9fff\s,\.\-\(\)]")


def sanitize_user_input(text: str) -> str:
    """Санитизация поискового запроса: буквы (кириллица, латиница, CJK), цифры и базовая пунктуация."""
    if not isinstance(text, str):
        raise ValueError("Input must be a string")
    text = _UNSAFE_CHARS.sub("", text.strip())
    return text[:MAX_QUERY_LENGTH].strip()
