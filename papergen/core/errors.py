from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import httpx
from google.genai import errors as genai_errors

MISSING_FIELDS_MESSAGE = "Subject and Chapter are required"
GEMINI_FETCH_MESSAGE = "Gemini API Fetch Error, check your API key or internet"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ConfigurationError(RuntimeError):
    """Raised at startup when the process environment is unusable."""


@dataclass
class PaperGeneratorError(Exception):
    status_code: int
    message: str
    code: str | None = None

    def __str__(self) -> str:
        return self.message

    def to_error(self) -> dict[str, Any]:
        return {"error": self.message}


def missing_fields_error() -> PaperGeneratorError:
    return PaperGeneratorError(
        status_code=400,
        message=MISSING_FIELDS_MESSAGE,
        code="missing_fields",
    )


def is_transport_error(exc: BaseException) -> bool:
    """True for Gemini HTTP/auth failures and network-level failures.

    Connection and timeout errors raised by the aiohttp transport subclass
    ``OSError`` and ``asyncio.TimeoutError``.
    """

    return isinstance(
        exc,
        (genai_errors.APIError, httpx.HTTPError, OSError, asyncio.TimeoutError),
    )


def map_generation_error(exc: Exception) -> PaperGeneratorError:
    """Map collaborator exceptions to the errors exposed over HTTP."""

    if isinstance(exc, PaperGeneratorError):
        return exc

    if is_transport_error(exc):
        return PaperGeneratorError(
            status_code=500,
            message=GEMINI_FETCH_MESSAGE,
            code="gemini_fetch_error",
        )

    return PaperGeneratorError(
        status_code=500,
        message=INTERNAL_ERROR_MESSAGE,
        code="internal_error",
    )
