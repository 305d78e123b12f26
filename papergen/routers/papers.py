from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from papergen.core.generation import PaperGenerator
from papergen.core.prompts import PaperTemplate
from papergen.dependencies import get_generator, get_template
from papergen.papers.schemas import PaperRequest, PaperResponse
from papergen.papers.service import create_paper

router = APIRouter(tags=["papers"])


@router.post("/ai-test-generator", response_model=PaperResponse)
async def ai_test_generator(
    payload: PaperRequest | None = Body(default=None),
    generator: PaperGenerator = Depends(get_generator),
    template: PaperTemplate = Depends(get_template),
) -> dict[str, str]:
    return await create_paper(payload, generator, template)
