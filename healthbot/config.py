from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(slots=True)
class Settings:
    telegram_bot_token: str
    gemini_key: str
    gemini_model: str
    server_host: str
    server_port: str
    update_delay_seconds: float
    polling_timeout: int
    log_level: str


def load_settings() -> Settings:
    load_dotenv()
    token = os.getenv("TELEGRAM_BOT_TOKEN", "").strip()
    gemini_key = os.getenv("GEMINI_KEY", "").strip()
    gemini_model = os.getenv("GEMINI_MODEL", "").strip() or "gemini-2.5-flash"
    # SERVER_* зарезервированы под будущий HTTP-интерфейс, цикл их не читает.
    server_host = os.getenv("SERVER_HOST", "").strip()
    server_port = os.getenv("SERVER_PORT", "").strip()
    delay = float(os.getenv("UPDATE_DELAY_SECONDS", "3"))
    polling_timeout = int(os.getenv("POLLING_TIMEOUT", "30"))
    log_level = os.getenv("LOG_LEVEL", "").strip().upper() or "INFO"

    if not token:
        raise ValueError("TELEGRAM_BOT_TOKEN is required")
    if not gemini_key:
        raise ValueError("GEMINI_KEY is required")
    if delay < 0:
        raise ValueError("UPDATE_DELAY_SECONDS must be >= 0")
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

    return Settings(
        telegram_bot_token=token,
        gemini_key=gemini_key,
        gemini_model=gemini_model,
        server_host=server_host,
        server_port=server_port,
        update_delay_seconds=delay,
        polling_timeout=polling_timeout,
        log_level=log_level,
    )
