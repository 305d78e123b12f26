from __future__ import annotations

import dataclasses
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from papergen.config import Settings
from papergen.core.generation import GeminiGenerator, PaperGenerator
from papergen.core.prompts import PaperTemplate, get_template
from papergen.dependencies import register_exception_handlers
from papergen.internal import health
from papergen.routers import papers

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    generator: PaperGenerator | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    template = resolve_template(settings)
    if generator is None:
        generator = GeminiGenerator.from_api_key(settings.gemini_api_key)

    app = FastAPI(
        title="ai-test-generator",
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.template = template
    app.state.generator = generator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(papers.router)
    app.include_router(health.router)

    logger.info("Using paper template %s with model %s", template.name, template.model)
    return app


def resolve_template(settings: Settings) -> PaperTemplate:
    template = get_template(settings.template_name)
    if settings.model_override:
        return dataclasses.replace(template, model=settings.model_override)
    return template


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
