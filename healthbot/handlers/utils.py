from __future__ import annotations

import logging

from aiogram import Bot
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramAPIError

from healthbot.services.response import NO_ANALYSIS

logger = logging.getLogger(__name__)


def describe_error(exc: BaseException) -> str:
    # у части исключений (TimeoutError и т.п.) пустой str()
    return str(exc) or exc.__class__.__name__


def analysis_text(result: str) -> str:
    return result if result.strip() else NO_ANALYSIS


async def send_reply(bot: Bot, chat_id: int, text: str, *, markdown: bool = True) -> bool:
    """Отправляет ответ в чат. Ошибка отправки логируется, повторов нет. Возвращает True при успехе."""
    try:
        await bot.send_message(
            chat_id,
            text,
            parse_mode=ParseMode.MARKDOWN if markdown else None,
        )
    except TelegramAPIError:
        logger.exception("Failed to send reply to chat_id=%s", chat_id)
        return False
    return True


async def log_and_send(bot: Bot, chat_id: int, message: str) -> None:
    logger.info("chat_id=%s: %s", chat_id, message)
    await send_reply(bot, chat_id, message, markdown=False)
