"""Тексты промптов лежат в .md рядом с модулем, читаются один раз."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

_PROMPTS_DIR = Path(__file__).parent


@lru_cache(maxsize=None)
def load(name: str) -> str:
    """Текст healthbot/prompts/{name}.md без крайних пробелов; name вида "nutrition/prefix"."""
    return (_PROMPTS_DIR / f"{name}.md").read_text(encoding="utf-8").strip()
