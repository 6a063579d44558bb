"""Тесты сборки диспетчера и маршрутизации апдейтов (healthbot.main)."""
from __future__ import annotations

from datetime import datetime
from unittest.mock import AsyncMock, patch

from aiogram import Bot
from aiogram.dispatcher.event.bases import UNHANDLED
from aiogram.types import Chat, Message, Update, User

from healthbot.main import build_dispatcher
from healthbot.prompts import HELP_TEXT
from healthbot.services.prompt import TextAnalysisRequest


def _message(message_id: int, **fields) -> Message:  # noqa: ANN003
    return Message(
        message_id=message_id,
        date=datetime.now(),
        chat=Chat(id=100, type="private"),
        from_user=User(id=7, is_bot=False, first_name="T", username="tester"),
        **fields,
    )


async def test_dispatcher_routes_updates_one_by_one(ctx, analyzer) -> None:
    # роутеры модульные, подключить их к диспетчеру можно только один раз за процесс
    dp = build_dispatcher(ctx)
    assert dp.workflow_data["ctx"] is ctx

    bot = Bot(token="42:TEST")
    with patch.object(Bot, "send_message", new_callable=AsyncMock) as send:
        # сообщение без текста и фото - молча пропускается
        result = await dp.feed_update(bot, Update(update_id=1, message=_message(1)))
        assert result is UNHANDLED
        send.assert_not_awaited()

        # не-message апдейт тоже пропускается
        result = await dp.feed_update(
            bot, Update(update_id=2, edited_message=_message(2, text="edited"))
        )
        assert result is UNHANDLED
        send.assert_not_awaited()

        await dp.feed_update(bot, Update(update_id=3, message=_message(3, text="/start")))
        analyzer.analyze.assert_not_awaited()
        assert send.await_args.args[1] == HELP_TEXT

        send.reset_mock()
        await dp.feed_update(bot, Update(update_id=4, message=_message(4, text="apple")))
        analyzer.analyze.assert_awaited_once_with(TextAnalysisRequest(chat_id=100, text="apple"))
        send.assert_awaited_once()
        assert send.await_args.args[:2] == (100, "📊 Nutrition Estimation")

        # текст со слэшем, кроме /start и /help, тоже уходит на анализ
        send.reset_mock()
        analyzer.analyze.reset_mock()
        await dp.feed_update(
            bot, Update(update_id=5, message=_message(5, text="/sugar, salt, E120"))
        )
        analyzer.analyze.assert_awaited_once_with(
            TextAnalysisRequest(chat_id=100, text="/sugar, salt, E120")
        )
        send.assert_awaited_once()
