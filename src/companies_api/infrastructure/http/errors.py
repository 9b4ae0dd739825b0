# src/companies_api/infrastructure/http/errors.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""HTTP boundary exception handlers.

Every failure leaves the service as ``{"error": ..., "error_description": ...}``
with a matching status code:

* ``CompanyError``: its own status and body.
* ``RequestValidationError``: 400 with the numeric-id description.
* ``HTTPException``: its status, reason phrase as ``error``, detail as
  ``error_description``.
* Anything else: 500 with a fixed body. The exception is logged, never echoed.
"""

from __future__ import annotations

from http import HTTPStatus

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.responses import Response

from companies_api.domain.exceptions.companies import CompanyError
from companies_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

VALIDATION_ERROR_DESCRIPTION = "Validation failed (numeric string is expected)"
INTERNAL_ERROR_DESCRIPTION = "Internal server error"


def error_body(error: str, error_description: str) -> dict[str, str]:
    """Build the two-field error body.

    Args:
        error: Short error type, usually the HTTP reason phrase.
        error_description: Human-readable description safe for clients.

    Returns:
        dict[str, str]: ``{"error": ..., "error_description": ...}``.
    """
    return {"error": error, "error_description": error_description}


def _reason_phrase(status_code: int) -> str:
    """Return the standard reason phrase for a status code, or ``"Error"``."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


async def handle_company_error(request: Request, exc: Exception) -> Response:
    """Render a structured company error with its own status and body.

    Args:
        request: Incoming request.
        exc: The raised ``CompanyError``.

    Returns:
        Response: JSON response carrying ``exc.status_code``.
    """
    if not isinstance(exc, CompanyError):  # pragma: no cover - registered for CompanyError only
        return await handle_unhandled_exception(request, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def handle_validation_error(request: Request, exc: Exception) -> Response:
    """Render request validation failures as a 400 bad request.

    Args:
        request: Incoming request.
        exc: The raised ``RequestValidationError``; its errors are logged only.

    Returns:
        Response: 400 JSON response with the numeric-id description.
    """
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    logger.info(
        "request.validation_failed",
        extra={"extra": {"path": request.url.path, "errors": errors}},
    )
    return JSONResponse(
        status_code=400,
        content=error_body(_reason_phrase(400), VALIDATION_ERROR_DESCRIPTION),
    )


async def handle_http_exception(request: Request, exc: Exception) -> Response:
    """Render framework HTTP exceptions (including unknown routes).

    Args:
        request: Incoming request.
        exc: The raised ``HTTPException``.

    Returns:
        Response: JSON response with the reason phrase as ``error`` and the
        detail as ``error_description``.
    """
    if not isinstance(exc, HTTPException):  # pragma: no cover - registered for HTTPException only
        return await handle_unhandled_exception(request, exc)
    phrase = _reason_phrase(exc.status_code)
    description = exc.detail if isinstance(exc.detail, str) else phrase
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(phrase, description),
        headers=getattr(exc, "headers", None),
    )


async def handle_unhandled_exception(request: Request, exc: Exception) -> Response:
    """Log an unexpected exception and render a fixed 500 body.

    Args:
        request: Incoming request.
        exc: Any exception not handled elsewhere; never echoed to clients.

    Returns:
        Response: 500 JSON response.
    """
    logger.error(
        "request.unhandled_exception",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={"extra": {"path": request.url.path}},
    )
    return JSONResponse(
        status_code=500,
        content=error_body(_reason_phrase(500), INTERNAL_ERROR_DESCRIPTION),
    )
