from __future__ import annotations

import logging

from papergen.core.errors import map_generation_error, missing_fields_error
from papergen.core.generation import PaperGenerator
from papergen.core.prompts import PaperTemplate, build_prompt_pair
from papergen.core.types import (
    DEFAULT_DURATION_MINUTES,
    GenerationOptions,
    GenerationRequest,
    GenerationResult,
)

from .schemas import PaperRequest

logger = logging.getLogger(__name__)


def normalize_paper_request(payload: PaperRequest | None) -> GenerationRequest:
    """Validate the incoming body, raising a 400 error before any model call."""

    subject = _clean(payload.subject) if payload is not None else ""
    chapter = _clean(payload.chapter) if payload is not None else ""
    if not subject or not chapter:
        error = missing_fields_error()
        logger.info("Rejected POST /ai-test-generator: %s", error.message)
        raise error

    # A zero or missing duration falls back to the default.
    duration = payload.duration or DEFAULT_DURATION_MINUTES
    return GenerationRequest(subject=subject, chapter=chapter, duration=duration)


async def generate_paper(
    payload: PaperRequest | None,
    generator: PaperGenerator,
    template: PaperTemplate,
) -> GenerationResult:
    request = normalize_paper_request(payload)
    options = GenerationOptions(model=template.model, use_search=True)

    try:
        prompt = build_prompt_pair(request, template)
        text = await generator.generate(
            prompt.instruction_block,
            prompt.request_block,
            options,
        )
    except Exception as exc:
        error = map_generation_error(exc)
        logger.exception(
            "Gemini API Error (code=%s, template=%s, model=%s)",
            error.code,
            template.name,
            template.model,
        )
        if error is exc:
            raise
        raise error from exc

    logger.info(
        "Generated paper for subject=%r chapter=%r (%d characters)",
        request.subject,
        request.chapter,
        len(text),
    )
    return GenerationResult(text=text)


async def create_paper(
    payload: PaperRequest | None,
    generator: PaperGenerator,
    template: PaperTemplate,
) -> dict[str, str]:
    result = await generate_paper(payload, generator, template)
    return {"paper": result.text}


def _clean(value: str | None) -> str:
    if value is None:
        return ""
    return value.strip()
