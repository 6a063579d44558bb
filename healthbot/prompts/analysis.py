"""Инструкции для анализа состава и этикетки продукта (загрузка из .md)."""
from __future__ import annotations

from healthbot.prompts.loader import load

# Роль модели; заканчивается пустой строкой, дальше идут входные данные или сразу формат ответа.
PROMPT_PREFIX = load("nutrition/prefix") + "\n\n"

# Формат ответа: оценка КБЖУ, красные флаги/аллергены, вердикт.
PROMPT_SUFFIX = "\n\n" + load("nutrition/suffix")

INPUT_DATA_LABEL = "Input Data: "

HELP_TEXT = load("nutrition/help")


def text_instructions(text: str) -> str:
    """Полный текст запроса для анализа присланного текстом состава."""
    return PROMPT_PREFIX + INPUT_DATA_LABEL + text + PROMPT_SUFFIX


def image_instructions() -> str:
    """Текст запроса к фото этикетки: входные данные - само изображение."""
    return PROMPT_PREFIX + PROMPT_SUFFIX
