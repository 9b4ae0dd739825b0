# src/companies_api/main.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""
Application Entry (Adapters Bootstrap)

Synopsis:
    FastAPI bootstrap that wires middleware, exception handlers, and routers.
    Provides an application factory (`create_app`) and a module-level eager app
    (`app`) for tooling and ASGI servers.

Design:
    • Bootstrap only (no business logic): routers + middleware + handlers.
    • Lifespan creates the shared HTTP client and tears it down safely.
    • Every failure is rendered as ``{"error", "error_description"}``.
    • Root JSON logging configured at import time.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from companies_api.adapters.routers.companies_router import router as companies_router
from companies_api.adapters.routers.health_router import router as health_router
from companies_api.adapters.routers.metrics_router import router as metrics_router
from companies_api.config.settings import Settings, get_settings
from companies_api.dependencies.core.bootstrap import bootstrap
from companies_api.domain.exceptions.companies import CompanyError
from companies_api.infrastructure.http.errors import (
    handle_company_error,
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_error,
)
from companies_api.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
)
from companies_api.infrastructure.middleware.access_log import AccessLogMiddleware
from companies_api.infrastructure.middleware.request_id import RequestIdMiddleware

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
configure_root_logging()
logger = get_json_logger(__name__)


def _stable_operation_id(route: APIRoute) -> str:
    """Deterministic operationId, e.g. ``get__companies_id``."""
    methods = ",".join(sorted(route.methods or []))
    path = route.path_format.replace("/", "_").replace("{", "").replace("}", "")
    return f"{methods.lower()}_{path.lower()}"


# -----------------------------------------------------------------------------
# Lifespan
# -----------------------------------------------------------------------------
@asynccontextmanager
async def runtime_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Expose bootstrap state (settings, shared HTTP client) on ``app.state``."""
    async with bootstrap(app) as state:
        app.state.settings = state.settings
        app.state.http_client = state.http_client
        yield


# -----------------------------------------------------------------------------
# Middleware, CORS & handlers
# -----------------------------------------------------------------------------
def _attach_middlewares(app: FastAPI) -> None:
    """Attach core middleware.

    Starlette runs the last added middleware first, so the request id is
    assigned before the access log entry is written.
    """
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)


def _attach_cors(app: FastAPI, settings: Settings) -> None:
    """Attach CORS middleware based on settings."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins or ["*"],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )


def _patch_exception_handlers(app: FastAPI) -> None:
    """Replace default exception handlers with the two-field error body."""
    app.add_exception_handler(CompanyError, handle_company_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unhandled_exception)


# -----------------------------------------------------------------------------
# App factory
# -----------------------------------------------------------------------------
def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Fully configured application instance.
    """
    settings: Settings = get_settings()
    service_version = settings.service_version or "0.0.0"

    app = FastAPI(
        title="Companies API",
        version=service_version,
        description="Company lookups backed by an external XML document service.",
        lifespan=runtime_lifespan,
        docs_url=settings.docs_url,
        openapi_url=settings.openapi_url,
        generate_unique_id_function=_stable_operation_id,
    )

    _patch_exception_handlers(app)
    _attach_middlewares(app)
    _attach_cors(app, settings)

    app.include_router(companies_router)
    app.include_router(health_router)
    app.include_router(metrics_router)

    logger.info(
        "service_startup",
        extra={
            "extra": {
                "service": settings.service_name,
                "env": settings.environment.value,
                "version": service_version,
                "status": "starting",
            }
        },
    )
    return app


# Eager app for ASGI servers and tools.
app: FastAPI = create_app()


if __name__ == "__main__":  # pragma: no cover
    from companies_api.__main__ import main

    main()
