"""Промпты бота: инструкции для модели и текст справки (из .md)."""
from __future__ import annotations

from healthbot.prompts.analysis import (
    HELP_TEXT,
    INPUT_DATA_LABEL,
    PROMPT_PREFIX,
    PROMPT_SUFFIX,
    image_instructions,
    text_instructions,
)

__all__ = [
    "HELP_TEXT",
    "INPUT_DATA_LABEL",
    "PROMPT_PREFIX",
    "PROMPT_SUFFIX",
    "image_instructions",
    "text_instructions",
]
