from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject


class UpdateDelayMiddleware(BaseMiddleware):
    """Фиксированная пауза после обработки каждого апдейта (включая пропущенные и упавшие)."""

    def __init__(self, delay_seconds: float = 3.0) -> None:
        super().__init__()
        self.delay_seconds = delay_seconds

    async def _pause(self) -> None:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        try:
            result = await handler(event, data)
        except Exception:
            await self._pause()
            raise
        await self._pause()
        return result
