# src/companies_api/application/services/company_error_classifier.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Company error classifier.

Purpose:
    Map any failure raised while looking up a company to one of the
    structured :class:`CompanyError` shapes returned to API clients.

Rules (first match wins):
    1. A ``CompanyError`` is returned unchanged.
    2. Upstream answered 404            → ``CompanyNotFound`` (404).
    3. Upstream answered >= 500         → ``UpstreamUnavailable`` (503, service issues).
    4. Message mentions "XML"/"parsing" → ``UnprocessableUpstreamData`` (503).
    5. Anything else                    → ``UpstreamUnavailable`` (503, retrieval failed).

Layer:
    application/services
"""

from __future__ import annotations

from typing import Final

from companies_api.domain.exceptions.companies import (
    CompanyError,
    CompanyNotFound,
    UnprocessableUpstreamData,
    UpstreamUnavailable,
    XmlServiceHTTPError,
)

_PROCESSING_MARKERS: Final[tuple[str, ...]] = ("XML", "parsing")


def classify_company_error(exc: BaseException, company_id: int) -> CompanyError:
    """Classify a pipeline failure into a structured company error.

    Args:
        exc: The failure raised by fetching, parsing, validation, or transform.
        company_id: The requested company id, used in the not-found message.

    Returns:
        A ``CompanyError`` carrying status code and response body.
    """
    if isinstance(exc, CompanyError):
        return exc

    details = {"cause": type(exc).__name__}

    if isinstance(exc, XmlServiceHTTPError):
        if exc.status_code == 404:
            return CompanyNotFound(company_id)
        if exc.status_code >= 500:
            return UpstreamUnavailable(
                UpstreamUnavailable.EXPERIENCING_ISSUES,
                details={**details, "status": exc.status_code},
            )

    message = str(exc)
    if any(marker in message for marker in _PROCESSING_MARKERS):
        return UnprocessableUpstreamData(details=details)

    return UpstreamUnavailable(UpstreamUnavailable.RETRIEVAL_FAILED, details=details)
