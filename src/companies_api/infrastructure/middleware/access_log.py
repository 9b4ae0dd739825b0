# src/companies_api/infrastructure/middleware/access_log.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Access Log Middleware.

Summary:
    Emits a structured access log entry for every request/response pair.

Fields:
    evt: Literal "access" marker.
    method: HTTP method.
    path: URL path (no scheme/host).
    query: Raw query string.
    status: HTTP status code (500 if unhandled exception).
    elapsed_ms: Latency in milliseconds, rounded to two decimals.
    client_ip: Best-effort client IP (from connection).
    request_id: Correlation ID if present.
    ok: True if the downstream handler returned normally; False if raised.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from companies_api.infrastructure.logging.logger import get_json_logger

_logger: logging.Logger = get_json_logger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Structured access logging middleware."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Log a single access record around the downstream handler.

        Raises:
            Exception: Re-raised after logging if the downstream handler fails.
        """
        t0 = time.perf_counter()
        response: Response | None = None
        ok = False
        try:
            response = await call_next(request)
            ok = True
            return response
        finally:
            status_code = response.status_code if response is not None else 500
            fields: dict[str, Any] = {
                "evt": "access",
                "method": request.method,
                "path": request.url.path,
                "query": str(request.url.query),
                "status": status_code,
                "elapsed_ms": round((time.perf_counter() - t0) * 1000.0, 2),
                "client_ip": request.client.host if request.client else None,
                "request_id": getattr(request.state, "request_id", None),
                "ok": ok,
            }
            _logger.info("access_log", extra={"extra": fields})
