from __future__ import annotations

import logging

from aiogram import Bot, F, Router
from aiogram.types import Message

from healthbot.handlers.utils import analysis_text, describe_error, log_and_send, send_reply
from healthbot.runtime import AppContext
from healthbot.services.prompt import (
    AnalysisRequest,
    ImageAnalysisRequest,
    TextAnalysisRequest,
)

logger = logging.getLogger(__name__)

router = Router()


async def download_photo(bot: Bot, message: Message) -> bytes | None:
    """
    Скачивает самый крупный вариант фото. При ошибке getFile или загрузки
    отправляет текст ошибки в чат и возвращает None.
    """
    chat_id = message.chat.id
    photo = message.photo[-1]  # type: ignore[index]
    try:
        file = await bot.get_file(photo.file_id)
        if not file.file_path:
            raise ValueError(f"Telegram returned no file path for file_id={photo.file_id}")
    except Exception as exc:  # noqa: BLE001
        logger.exception("Failed to resolve photo file for chat_id=%s", chat_id)
        await log_and_send(bot, chat_id, describe_error(exc))
        return None

    try:
        buffer = await bot.download_file(file.file_path)
        data = buffer.read() if buffer is not None else b""
    except Exception as exc:  # noqa: BLE001
        logger.exception("Failed to download photo for chat_id=%s", chat_id)
        await log_and_send(bot, chat_id, "Error download: " + describe_error(exc))
        return None
    return data


async def run_analysis(bot: Bot, ctx: AppContext, request: AnalysisRequest) -> None:
    try:
        result = await ctx.analyzer.analyze(request)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Analysis failed for chat_id=%s", request.chat_id)
        await log_and_send(bot, request.chat_id, "Error during analysis: " + describe_error(exc))
        return
    await send_reply(bot, request.chat_id, analysis_text(result))


@router.message(F.photo)
async def photo_message(message: Message, bot: Bot, ctx: AppContext) -> None:
    if not message.photo:
        return
    logger.info(
        "Photo received from %s (chat_id=%s), %d size variants",
        message.from_user.username if message.from_user else None,
        message.chat.id,
        len(message.photo),
    )
    data = await download_photo(bot, message)
    if data is None:
        return
    await run_analysis(bot, ctx, ImageAnalysisRequest(chat_id=message.chat.id, image=data))


@router.message(F.text)
async def text_message(message: Message, bot: Bot, ctx: AppContext) -> None:
    if not message.text:
        return
    logger.info(
        "Received message from %s: %s",
        message.from_user.username if message.from_user else None,
        message.text,
    )
    await run_analysis(bot, ctx, TextAnalysisRequest(chat_id=message.chat.id, text=message.text))
