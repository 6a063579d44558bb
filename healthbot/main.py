from __future__ import annotations

import asyncio
import logging

from aiogram import Bot, Dispatcher

from healthbot.config import Settings, load_settings
from healthbot.handlers import ALL_ROUTERS
from healthbot.middlewares.throttle import UpdateDelayMiddleware
from healthbot.runtime import AppContext
from healthbot.services.analyzer import NutritionAnalyzer

logger = logging.getLogger(__name__)


def build_dispatcher(ctx: AppContext) -> Dispatcher:
    dp = Dispatcher(ctx=ctx)
    dp.update.outer_middleware(UpdateDelayMiddleware(ctx.settings.update_delay_seconds))
    for router in ALL_ROUTERS:
        dp.include_router(router)
    return dp


async def run(settings: Settings) -> None:
    bot = Bot(token=settings.telegram_bot_token)
    try:
        me = await bot.get_me()
        logger.info("Bot authorized as @%s", me.username)

        analyzer = NutritionAnalyzer(api_key=settings.gemini_key, model=settings.gemini_model)
        logger.info("Gemini model: %s", settings.gemini_model)

        dp = build_dispatcher(AppContext(settings=settings, analyzer=analyzer))
        # handle_as_tasks=False: апдейты обрабатываются строго по одному, в порядке поступления
        await dp.start_polling(
            bot,
            polling_timeout=settings.polling_timeout,
            handle_as_tasks=False,
        )
    finally:
        await bot.session.close()


async def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    await run(settings)


def cli() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    cli()
