from __future__ import annotations

import pytest

from papergen.config import DEFAULT_PORT, Settings
from papergen.core.errors import ConfigurationError
from papergen.main import create_app

ENV_VARS = (
    "GEMINI_API_KEY",
    "HOST",
    "PORT",
    "PAPER_TEMPLATE",
    "GEMINI_MODEL",
    "CORS_ORIGINS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults():
    settings = Settings.from_env(load_env_file=False)

    assert settings.gemini_api_key is None
    assert settings.port == DEFAULT_PORT == 5000
    assert settings.template_name == "class6-cbse"
    assert settings.model_override is None
    assert settings.cors_origins == ["*"]


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", " test-key ")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, https://example.test")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env(load_env_file=False)

    assert settings.gemini_api_key == "test-key"
    assert settings.port == 8080
    assert settings.model_override == "gemini-2.5-pro"
    assert settings.cors_origins == ["http://localhost:5173", "https://example.test"]
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["abc", "0", "70000"])
def test_settings_reject_invalid_port(monkeypatch, raw):
    monkeypatch.setenv("PORT", raw)

    with pytest.raises(ConfigurationError):
        Settings.from_env(load_env_file=False)


def test_create_app_without_api_key_fails_at_startup():
    with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
        create_app(Settings())


def test_create_app_with_unknown_template_fails_at_startup():
    with pytest.raises(ConfigurationError):
        create_app(Settings(gemini_api_key="key", template_name="missing"))
