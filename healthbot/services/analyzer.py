from __future__ import annotations

import logging

from google import genai
from google.genai import types

from healthbot.services.prompt import (
    AnalysisRequest,
    ImagePart,
    PromptPart,
    build_prompt,
)
from healthbot.services.response import extract_text

logger = logging.getLogger(__name__)


def to_genai_part(part: PromptPart) -> types.Part:
    if isinstance(part, ImagePart):
        return types.Part.from_bytes(data=part.data, mime_type=part.mime_type)
    return types.Part.from_text(text=part.text)


class NutritionAnalyzer:
    def __init__(self, api_key: str, model: str) -> None:
        self.client = genai.Client(api_key=api_key)
        self.model = model

    async def analyze(self, request: AnalysisRequest) -> str:
        prompt = build_prompt(request)
        contents = [
            types.Content(role="user", parts=[to_genai_part(p) for p in prompt])
        ]
        logger.info(
            "Executing content generation request (model=%s, parts=%d, chat_id=%s)",
            self.model,
            len(prompt),
            request.chat_id,
        )
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=contents,
        )
        logger.info("Content generation response received for chat_id=%s", request.chat_id)
        return extract_text(response)
