# src/companies_api/domain/exceptions/companies.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""
Company lookup exceptions.

Purpose:
    Two families of errors live here:

    * XML service failures (``XmlServiceError`` and subclasses), raised by the
      fetcher and the XML mapper while the pipeline runs. They describe *what*
      went wrong and carry no HTTP semantics.
    * Structured company errors (``CompanyError`` and subclasses), which carry
      an HTTP status code plus the two-field error body returned to callers.
      The error classifier turns any failure into one of these.

Layer:
    domain
"""

from __future__ import annotations

from typing import Any, ClassVar

from companies_api.domain.exceptions.base import DomainError

# ---------------------------------------------------------------------------
# XML service failures (pre-classification)
# ---------------------------------------------------------------------------


class XmlServiceError(DomainError):
    """Base class for failures talking to, or reading from, the XML service."""

    code = "XML_SERVICE_ERROR"


class XmlServiceHTTPError(XmlServiceError):
    """Raised when the XML service answers with a non-2xx status.

    Args:
        status_code: HTTP status returned by the upstream.
        url: Requested document URL.
    """

    code = "XML_SERVICE_HTTP_ERROR"

    def __init__(self, status_code: int, *, url: str | None = None) -> None:
        super().__init__(
            f"Request failed with status code {status_code}",
            details={"status": status_code, "url": url},
        )
        self.status_code = status_code


class XmlServiceTransportError(XmlServiceError):
    """Raised on network failure, timeout, or when no response was received."""

    code = "XML_SERVICE_TRANSPORT_ERROR"


class XmlContentTypeError(XmlServiceError):
    """Raised when the upstream declares a content type that is not XML or plain text."""

    code = "XML_CONTENT_TYPE_ERROR"

    def __init__(self, content_type: str) -> None:
        super().__init__(
            f"Expected XML content but received: {content_type}",
            details={"content_type": content_type},
        )
        self.content_type = content_type


class XmlParseError(XmlServiceError):
    """Raised when the upstream body is not well-formed XML."""

    code = "XML_PARSE_ERROR"


class XmlStructureError(XmlServiceError):
    """Raised when well-formed XML lacks the expected ``Data`` container."""

    code = "XML_STRUCTURE_ERROR"


# ---------------------------------------------------------------------------
# Structured errors (post-classification)
# ---------------------------------------------------------------------------


class CompanyError(DomainError):
    """Error already carrying an HTTP status and the client-facing error shape.

    Args:
        error_description: Human-readable description safe for clients.
        details: Optional diagnostic payload; never serialized to clients.
    """

    code = "COMPANY_ERROR"
    status_code: ClassVar[int] = 503
    error: ClassVar[str] = "Service Unavailable"

    def __init__(self, error_description: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(error_description, details=details)
        self.error_description = error_description

    def to_body(self) -> dict[str, str]:
        """Return the ``{error, error_description}`` response body."""
        return {"error": self.error, "error_description": self.error_description}


class CompanyNotFound(CompanyError):
    """The XML service has no document for the requested company."""

    code = "COMPANY_NOT_FOUND"
    status_code: ClassVar[int] = 404
    error: ClassVar[str] = "Not Found"

    def __init__(self, company_id: int) -> None:
        super().__init__(
            f"Company with ID {company_id} not found",
            details={"company_id": company_id},
        )
        self.company_id = company_id


class UpstreamUnavailable(CompanyError):
    """The XML service failed, timed out, or could not be reached."""

    code = "UPSTREAM_UNAVAILABLE"

    EXPERIENCING_ISSUES: ClassVar[str] = "External XML service is experiencing issues"
    RETRIEVAL_FAILED: ClassVar[str] = "Unable to retrieve company data from XML service"

    def __init__(
        self,
        error_description: str = RETRIEVAL_FAILED,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(error_description, details=details)


class UnprocessableUpstreamData(CompanyError):
    """The XML service answered, but the payload could not be used."""

    code = "UNPROCESSABLE_UPSTREAM_DATA"

    PROCESSING_FAILED: ClassVar[str] = "Unable to process data from XML service"

    def __init__(
        self,
        error_description: str = PROCESSING_FAILED,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(error_description, details=details)
