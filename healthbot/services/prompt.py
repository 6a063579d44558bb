"""Запросы на анализ и сборка промпта для модели (текст состава или фото этикетки)."""
from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from healthbot.prompts import image_instructions, text_instructions

DEFAULT_IMAGE_FORMAT = "jpeg"

# MPO - JPEG с APP2/MPF-блоком (снимки с телефонов), для модели это обычный jpeg
_FORMAT_ALIASES = {"MPO": "jpeg"}


@dataclass(frozen=True, slots=True)
class TextAnalysisRequest:
    chat_id: int
    text: str


@dataclass(frozen=True, slots=True)
class ImageAnalysisRequest:
    chat_id: int
    image: bytes


AnalysisRequest = TextAnalysisRequest | ImageAnalysisRequest


@dataclass(frozen=True, slots=True)
class TextPart:
    text: str


@dataclass(frozen=True, slots=True)
class ImagePart:
    # Голый формат ("jpeg", "png"): префикс "image/" добавляет клиент модели.
    format: str
    data: bytes

    @property
    def mime_type(self) -> str:
        return f"image/{self.format}"


PromptPart = TextPart | ImagePart


def detect_image_format(data: bytes) -> str:
    """
    Определяет формат изображения по содержимому (не по имени файла).
    Возвращает токен без "image/" (например "jpeg"); если формат не распознан - "jpeg".
    """
    if not data:
        return DEFAULT_IMAGE_FORMAT
    try:
        with Image.open(BytesIO(data)) as img:
            fmt = img.format or ""
            mime = img.get_format_mimetype() or Image.MIME.get(fmt)
    except (UnidentifiedImageError, OSError, ValueError):
        return DEFAULT_IMAGE_FORMAT
    if fmt in _FORMAT_ALIASES:
        return _FORMAT_ALIASES[fmt]
    if not mime or not mime.startswith("image/"):
        return DEFAULT_IMAGE_FORMAT
    token = mime.removeprefix("image/").split(";", 1)[0].strip()
    return token or DEFAULT_IMAGE_FORMAT


def build_prompt(request: AnalysisRequest) -> list[PromptPart]:
    if isinstance(request, TextAnalysisRequest):
        return [TextPart(text_instructions(request.text))]
    data = bytes(request.image)
    return [
        ImagePart(format=detect_image_format(data), data=data),
        TextPart(image_instructions()),
    ]
