# src/companies_api/infrastructure/external_apis/xml_api/client.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Company XML Transport Client (async, instrumented).

This transport is framework-agnostic and provides:

* Async HTTP (httpx) with a per-request timeout.
* Content-type screening (XML or plain text only).
* Deterministic mapping to XML service domain errors.
* Prometheus-style metrics.

Endpoints:
    * fetch_company_xml: ``{base_url}/{id}.xml``

Notes:
    * Exactly one attempt per call; failures surface immediately.
    * Caller-facing exceptions are always ``XmlServiceError`` subclasses; httpx
      types are never allowed to cross the boundary.
"""

from __future__ import annotations

import time
from typing import Final

import httpx

from companies_api.domain.exceptions.companies import (
    XmlContentTypeError,
    XmlServiceError,
    XmlServiceHTTPError,
    XmlServiceTransportError,
)
from companies_api.infrastructure.external_apis.xml_api.settings import XmlApiSettings
from companies_api.infrastructure.logging.logger import get_json_logger, get_request_id
from companies_api.infrastructure.observability.metrics_xml_api import (
    get_xml_api_errors_total,
    get_xml_api_http_status_total,
    get_xml_api_latency_seconds,
    get_xml_api_response_bytes,
)

logger = get_json_logger(__name__)

_ENDPOINT: Final[str] = "company_xml"
_ACCEPTED_CONTENT_TYPES: Final[tuple[str, ...]] = ("xml", "text/plain")
_DEFAULT_HEADERS: Final[dict[str, str]] = {"Accept": "application/xml"}


class XmlApiClient:
    """Transport client for the company XML documents service."""

    def __init__(
        self,
        settings: XmlApiSettings,
        *,
        http: httpx.AsyncClient | None = None,
        timeout_s: float | None = None,
    ) -> None:
        """Initialize the transport client.

        Args:
            settings:
                Provider settings loaded from environment or DI.
            http:
                Optional shared ``httpx.AsyncClient``. If omitted, a client is
                created and owned by this instance.
            timeout_s:
                Optional per-request timeout override in seconds.
        """
        self._base_url = str(settings.base_url).rstrip("/")
        self._timeout = float(timeout_s if timeout_s is not None else settings.timeout_s)
        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(timeout=self._timeout)

        self._latency = get_xml_api_latency_seconds()
        self._errors = get_xml_api_errors_total()
        self._status_total = get_xml_api_http_status_total()
        self._resp_bytes = get_xml_api_response_bytes()

    @property
    def base_url(self) -> str:
        """Base URL documents are resolved against (no trailing slash)."""
        return self._base_url

    @property
    def timeout(self) -> float:
        """Per-request timeout in seconds."""
        return self._timeout

    def document_url(self, company_id: int) -> str:
        """Return the document URL for ``company_id``."""
        return f"{self._base_url}/{company_id}.xml"

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> XmlApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #

    async def fetch_company_xml(self, company_id: int) -> str:
        """Fetch the raw XML document for a company.

        Args:
            company_id: Company identifier substituted into the document URL.

        Returns:
            The response body as text.

        Raises:
            XmlServiceHTTPError: On non-2xx responses.
            XmlServiceTransportError: On network failures and timeouts.
            XmlContentTypeError: When the declared content type is neither XML
                nor plain text.
        """
        url = self.document_url(company_id)
        logger.debug("Fetching XML", extra={"extra": {"url": url}})

        start = time.perf_counter()
        error_reason: str | None = None
        try:
            response = await self._get(url)
            self._status_total.labels(_ENDPOINT, str(response.status_code)).inc()

            if not response.is_success:
                raise XmlServiceHTTPError(response.status_code, url=url)

            self._check_content_type(response, company_id)
            self._resp_bytes.labels(_ENDPOINT).observe(float(len(response.content)))
            return response.text
        except XmlServiceError as exc:
            error_reason = type(exc).__name__
            self._errors.labels(_ENDPOINT, error_reason).inc()
            raise
        finally:
            outcome = "error" if error_reason else "success"
            self._latency.labels(_ENDPOINT, outcome).observe(time.perf_counter() - start)

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #

    async def _get(self, url: str) -> httpx.Response:
        """Execute a single GET and map transport errors."""
        headers = dict(_DEFAULT_HEADERS)
        request_id = get_request_id()
        if request_id:
            headers["X-Request-ID"] = request_id

        try:
            return await self._client.get(
                url,
                headers=headers,
                timeout=self._timeout,
                follow_redirects=True,
            )
        except httpx.TimeoutException as exc:
            raise XmlServiceTransportError(
                f"timeout of {int(self._timeout * 1000)}ms exceeded",
                details={"url": url, "error": str(exc)},
            ) from exc
        except httpx.RequestError as exc:
            raise XmlServiceTransportError(
                "Network Error",
                details={"url": url, "error": str(exc)},
            ) from exc

    @staticmethod
    def _check_content_type(response: httpx.Response, company_id: int) -> None:
        """Reject declared content types other than XML or plain text.

        A missing ``content-type`` header is accepted as-is.
        """
        content_type = response.headers.get("content-type")
        if content_type and not any(t in content_type for t in _ACCEPTED_CONTENT_TYPES):
            logger.warning(
                "Unexpected content type",
                extra={"extra": {"content_type": content_type, "company_id": company_id}},
            )
            raise XmlContentTypeError(content_type)
