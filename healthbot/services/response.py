from __future__ import annotations

from typing import Any

NO_ANALYSIS = "No analysis returned."


def extract_text(response: Any) -> str:
    """Склеивает текстовые части первого кандидата ответа модели в одну строку."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return NO_ANALYSIS
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return NO_ANALYSIS

    chunks: list[str] = []
    for part in parts:
        # нетекстовые части (inline_data, function_call, ...) пропускаем молча
        text = getattr(part, "text", None)
        if isinstance(text, str):
            chunks.append(text)
    return "".join(chunks)
