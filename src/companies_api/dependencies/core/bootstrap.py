# src/companies_api/dependencies/core/bootstrap.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Core bootstrap for shared infrastructure (settings, logging, HTTP).

This module owns the lifecycle of shared infrastructure used by the FastAPI app.
It is intentionally thin: configuration is read from Settings, and the heavy
lifting is delegated to the infrastructure modules.

The single public surface is :func:`bootstrap`, an async context manager that
yields a simple state object with the resolved Settings and shared HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from fastapi import FastAPI

from companies_api.config.settings import Settings, get_settings
from companies_api.dependencies.companies import get_xml_api_settings
from companies_api.infrastructure.logging.logger import configure_root_logging, get_json_logger

logger = get_json_logger(__name__)


@dataclass
class BootstrapState:
    """State yielded by the bootstrap context manager."""

    settings: Settings
    http_client: httpx.AsyncClient


@asynccontextmanager
async def bootstrap(app: FastAPI) -> AsyncGenerator[BootstrapState, None]:
    """Initialize and teardown shared infrastructure.

    Responsibilities:
        * Load application settings and apply the configured log level.
        * Create the shared HTTPX AsyncClient used for the XML service.
        * Ensure the client is closed on exit, even on error.

    Args:
        app: FastAPI application whose lifespan owns the yielded state.

    Yields:
        BootstrapState: Resolved settings and shared HTTP client.
    """
    settings: Settings = get_settings()
    if settings.log_level:
        configure_root_logging(settings.log_level.upper())
    logger.info("bootstrap.start")

    http_client = httpx.AsyncClient(timeout=get_xml_api_settings().timeout_s)
    state = BootstrapState(settings=settings, http_client=http_client)

    try:
        yield state
    finally:
        try:
            await http_client.aclose()
        except Exception:
            logger.exception("bootstrap.http_client_close_failed")

        logger.info("bootstrap.stop")
