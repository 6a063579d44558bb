from __future__ import annotations

from aiogram import Bot, Router
from aiogram.filters import Command, CommandStart, or_f
from aiogram.types import Message

from healthbot.handlers.utils import send_reply
from healthbot.prompts import HELP_TEXT

router = Router()


@router.message(or_f(CommandStart(), Command("help")))
async def help_command(message: Message, bot: Bot) -> None:
    await send_reply(bot, message.chat.id, HELP_TEXT, markdown=False)
