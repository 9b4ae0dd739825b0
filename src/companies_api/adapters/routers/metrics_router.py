# src/companies_api/adapters/routers/metrics_router.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Prometheus scrape endpoint (`/metrics`).

The XML service collectors are created lazily; this router touches their
getters before rendering so the series are registered on the first scrape.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from companies_api.infrastructure.observability.metrics_xml_api import (
    get_xml_api_errors_total,
    get_xml_api_http_status_total,
    get_xml_api_latency_seconds,
    get_xml_api_response_bytes,
)

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Render all registered collectors in the Prometheus text format."""
    get_xml_api_latency_seconds()
    get_xml_api_errors_total()
    get_xml_api_http_status_total()
    get_xml_api_response_bytes()
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
