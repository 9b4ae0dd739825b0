# src/companies_api/config/settings.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Companies API Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated application configuration for the Companies API. Only
    adapters, dependencies and infrastructure read the process environment;
    other layers receive `Settings` via DI.

Design:
    - Pydantic v2 BaseSettings with explicit aliases per environment variable.
    - Environment enumeration for behavior toggles (includes TEST).
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from companies_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

_PRODUCTION_LIKE = frozenset({"staging", "production"})


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed application configuration for the Companies API."""

    # ---------------------------
    # Core environment
    # ---------------------------
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )

    # Raw env for CORS; the parsed list is computed in a model validator.
    cors_allow_origins_raw: str | None = Field(
        default=None,
        description="Raw env for allowed CORS origins (comma-separated).",
        validation_alias="ALLOWED_ORIGINS",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=list,
        description=(
            "Allowed CORS origins. Derived from ALLOWED_ORIGINS. "
            "In production-like envs, '*' is rejected."
        ),
    )

    # ---------------------------
    # OpenAPI / docs
    # ---------------------------
    docs_url: str | None = Field(
        default="/docs",
        description="Swagger UI docs URL. Set to None to disable interactive docs.",
        validation_alias="DOCS_URL",
    )
    openapi_url: str | None = Field(
        default="/openapi.json",
        description="OpenAPI JSON schema URL. Set to None to disable OpenAPI exposure.",
        validation_alias="OPENAPI_URL",
    )

    # ---------------------------
    # Service identity / logging
    # ---------------------------
    service_name: str = Field(
        default="companies-api",
        description="Logical service name for logging.",
        validation_alias="SERVICE_NAME",
    )
    service_version: str | None = Field(
        default=None,
        description="Service version reported in OpenAPI and startup logs.",
        validation_alias="SERVICE_VERSION",
    )
    log_level: str | None = Field(
        default=None,
        description="Override log level (e.g., 'DEBUG', 'INFO'). If not set, defaults are used.",
        validation_alias="LOG_LEVEL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _derive_cors_origins(self) -> Settings:
        """Parse ALLOWED_ORIGINS and reject wildcards in production-like envs."""
        raw = (self.cors_allow_origins_raw or "").strip()
        if raw:
            self.cors_allow_origins = [o.strip() for o in raw.split(",") if o.strip()]

        if self.environment.value in _PRODUCTION_LIKE and "*" in self.cors_allow_origins:
            raise ValueError("ALLOWED_ORIGINS must not contain '*' in production-like environments")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings singleton.

    Returns:
        Settings: Loaded and validated settings.
    """
    settings = Settings()
    logger.debug(
        "settings_loaded",
        extra={
            "extra": {
                "environment": settings.environment.value,
                "cors_origins": len(settings.cors_allow_origins),
            }
        },
    )
    return settings
