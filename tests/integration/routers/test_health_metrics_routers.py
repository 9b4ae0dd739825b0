from __future__ import annotations

import httpx
import pytest
from httpx import ASGITransport

from companies_api.main import create_app


@pytest.mark.asyncio
async def test_healthz_returns_ok_with_request_id() -> None:
    transport = ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/healthz")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers.get("X-Request-ID")


@pytest.mark.asyncio
async def test_metrics_exposes_xml_api_series() -> None:
    transport = ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/metrics")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "xml_api_errors_total" in resp.text or "# HELP xml_api" in resp.text


@pytest.mark.asyncio
async def test_unknown_route_uses_error_body() -> None:
    transport = ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/nope")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found", "error_description": "Not Found"}
