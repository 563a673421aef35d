# skycast/config/bot_config.py
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv
load_dotenv()


def _optional_float(value: str) -> Optional[float]:
    return float(value) if value else None


def _history_days(value: str) -> int:
    days = int(value)
    if days < 1:
        raise ValueError(f"HISTORY_DAYS должно быть не меньше 1, получено {days}")
    return days


@dataclass
class BotConfig:
    telegram_token: str
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    log_level: str = "INFO"
    history_days: int = 7
    http_timeout: Optional[float] = None  # None: без таймаута, как у requests по умолчанию

    @classmethod
    def load(cls):
        return cls(
            telegram_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            history_days=_history_days(os.getenv("HISTORY_DAYS", "7")),
            http_timeout=_optional_float(os.getenv("HTTP_TIMEOUT", ""))
        )
