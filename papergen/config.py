from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from papergen.core.errors import ConfigurationError
from papergen.core.prompts import DEFAULT_TEMPLATE_NAME

DEFAULT_PORT = 5000


@dataclass(slots=True)
class Settings:
    gemini_api_key: str | None = None
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    template_name: str = DEFAULT_TEMPLATE_NAME
    model_override: str | None = None
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv()

        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip() or None,
            host=os.getenv("HOST", "0.0.0.0").strip(),
            port=_parse_port(os.getenv("PORT")),
            template_name=os.getenv("PAPER_TEMPLATE", DEFAULT_TEMPLATE_NAME).strip(),
            model_override=os.getenv("GEMINI_MODEL", "").strip() or None,
            cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )


def _parse_port(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_PORT

    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer. Got: {raw!r}") from None

    if not 0 < port < 65536:
        raise ConfigurationError(f"PORT must be between 1 and 65535. Got: {port}")
    return port


def _parse_origins(raw: str) -> list[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]
