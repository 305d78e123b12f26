from __future__ import annotations

import logging
from typing import Protocol

from google import genai
from google.genai import types

from .errors import INTERNAL_ERROR_MESSAGE, ConfigurationError, PaperGeneratorError
from .types import GenerationOptions

logger = logging.getLogger(__name__)


class PaperGenerator(Protocol):
    async def generate(
        self,
        instruction_block: str,
        request_block: str,
        options: GenerationOptions,
    ) -> str: ...


class GeminiGenerator:
    """Text generation backed by the Gemini API.

    One instance is created per process and shared by every request; the
    underlying ``genai.Client`` keeps no per-request state.
    """

    def __init__(self, client: genai.Client):
        self._client = client

    @classmethod
    def from_api_key(cls, api_key: str | None) -> "GeminiGenerator":
        if not api_key:
            raise ConfigurationError(
                "GEMINI_API_KEY is not set. Add it to the environment or .env file."
            )
        return cls(genai.Client(api_key=api_key))

    async def generate(
        self,
        instruction_block: str,
        request_block: str,
        options: GenerationOptions,
    ) -> str:
        response = await self._client.aio.models.generate_content(
            model=options.model,
            contents=_build_contents(instruction_block, request_block),
            config=_build_config(options),
        )

        text = response.text
        if not text:
            raise PaperGeneratorError(
                status_code=500,
                message=INTERNAL_ERROR_MESSAGE,
                code="empty_generation",
            )

        logger.debug("Gemini returned %d characters (model=%s)", len(text), options.model)
        return text


def _build_contents(instruction_block: str, request_block: str) -> list[types.Content]:
    return [
        types.Content(role="user", parts=[types.Part(text=instruction_block)]),
        types.Content(role="user", parts=[types.Part(text=request_block)]),
    ]


def _build_config(options: GenerationOptions) -> types.GenerateContentConfig | None:
    if not options.use_search:
        return None

    return types.GenerateContentConfig(
        tools=[types.Tool(google_search=types.GoogleSearch())],
    )
