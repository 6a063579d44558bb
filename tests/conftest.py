"""Общие фикстуры: настройки, фейковый бот, контекст с замоканным анализатором."""
from __future__ import annotations

from io import BytesIO
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from healthbot.config import Settings
from healthbot.runtime import AppContext


@pytest.fixture
def settings() -> Settings:
    return Settings(
        telegram_bot_token="42:TEST",
        gemini_key="gemini-fake",
        gemini_model="gemini-2.5-flash",
        server_host="",
        server_port="",
        update_delay_seconds=0.0,
        polling_timeout=30,
        log_level="INFO",
    )


@pytest.fixture
def analyzer() -> MagicMock:
    a = MagicMock()
    a.analyze = AsyncMock(return_value="📊 Nutrition Estimation")
    return a


@pytest.fixture
def ctx(settings: Settings, analyzer: MagicMock) -> AppContext:
    return AppContext(settings=settings, analyzer=analyzer)  # type: ignore[arg-type]


@pytest.fixture
def bot() -> MagicMock:
    b = MagicMock()
    b.send_message = AsyncMock()
    b.get_file = AsyncMock(return_value=SimpleNamespace(file_path="photos/file_1.jpg"))
    b.download_file = AsyncMock(return_value=BytesIO(b"\xff\xd8\xff\xe0fake-jpeg"))
    return b


def make_message(
    *,
    chat_id: int = 100,
    text: str | None = None,
    photo: list[SimpleNamespace] | None = None,
    username: str | None = "tester",
) -> SimpleNamespace:
    return SimpleNamespace(
        chat=SimpleNamespace(id=chat_id),
        from_user=SimpleNamespace(id=7, username=username),
        text=text,
        photo=photo,
    )


def photo_sizes(*file_ids: str) -> list[SimpleNamespace]:
    return [SimpleNamespace(file_id=fid) for fid in file_ids]
