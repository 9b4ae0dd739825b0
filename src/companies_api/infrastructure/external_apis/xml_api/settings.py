# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""XML service client settings.

Purpose:
    Provide Pydantic-based configuration for the company XML service client:
    base URL and request timeout.

Layer:
    infrastructure

Notes:
    - Values are sourced from environment variables prefixed with ``XML_API_``.
    - This module does not depend on FastAPI or application-layer concepts.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_XML_API_BASE_URL = (
    "https://raw.githubusercontent.com/MiddlewareNewZealand/evaluation-instructions/main/xml-api"
)


class XmlApiSettings(BaseSettings):
    """Configuration for the company XML service client.

    Environment variables (with ``model_config.env_prefix``):

    * ``XML_API_BASE_URL``
    * ``XML_API_TIMEOUT_S``
    """

    base_url: str = Field(
        DEFAULT_XML_API_BASE_URL,
        description="Base URL under which `{id}.xml` company documents are served.",
    )
    timeout_s: float = Field(
        5.0,
        gt=0,
        description="Per-request timeout in seconds for the XML service.",
    )

    model_config = SettingsConfigDict(
        env_prefix="XML_API_",
        extra="ignore",
    )
