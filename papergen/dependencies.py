from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from papergen.core.errors import INTERNAL_ERROR_MESSAGE, PaperGeneratorError
from papergen.core.generation import PaperGenerator
from papergen.core.prompts import PaperTemplate

logger = logging.getLogger(__name__)


def get_generator(request: Request) -> PaperGenerator:
    return request.app.state.generator


def get_template(request: Request) -> PaperTemplate:
    return request.app.state.template


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PaperGeneratorError)
    async def handle_paper_error(
        _request: Request,
        exc: PaperGeneratorError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_error(),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        first_error = exc.errors()[0]["msg"] if exc.errors() else "Invalid request"
        logger.info("Rejected %s %s: %s", request.method, request.url.path, first_error)

        return JSONResponse(
            status_code=400,
            content={"error": first_error},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
