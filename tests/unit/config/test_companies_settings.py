from __future__ import annotations

import pytest
from pydantic import ValidationError

from companies_api.config.settings import Environment, Settings, get_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.environment is Environment.DEVELOPMENT
    assert settings.service_name == "companies-api"
    assert settings.docs_url == "/docs"
    assert settings.openapi_url == "/openapi.json"
    assert settings.cors_allow_origins == []


def test_allowed_origins_are_split(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.test, https://b.test,,")
    assert Settings().cors_allow_origins == ["https://a.test", "https://b.test"]


def test_wildcard_origin_rejected_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("ALLOWED_ORIGINS", "*")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
