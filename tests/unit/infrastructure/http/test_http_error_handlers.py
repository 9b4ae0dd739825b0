from __future__ import annotations

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient
from starlette.exceptions import HTTPException as StarletteHTTPException

from companies_api.domain.exceptions.companies import (
    CompanyError,
    CompanyNotFound,
    UnprocessableUpstreamData,
)
from companies_api.infrastructure.http import errors


def test_error_body_shape() -> None:
    assert errors.error_body("Not Found", "gone") == {
        "error": "Not Found",
        "error_description": "gone",
    }


def _make_app_with_handlers() -> FastAPI:
    """Build a FastAPI app wired with the handlers under test."""
    app = FastAPI()
    app.add_exception_handler(CompanyError, errors.handle_company_error)
    app.add_exception_handler(StarletteHTTPException, errors.handle_http_exception)
    app.add_exception_handler(RequestValidationError, errors.handle_validation_error)
    app.add_exception_handler(Exception, errors.handle_unhandled_exception)

    @app.get("/not-found")
    async def not_found() -> None:
        raise CompanyNotFound(12)

    @app.get("/unprocessable")
    async def unprocessable() -> None:
        raise UnprocessableUpstreamData()

    @app.get("/http-exc")
    async def http_exc() -> None:
        raise HTTPException(status_code=400, detail="bad input")

    @app.get("/typed/{value}")
    async def typed(value: int) -> dict[str, int]:
        return {"value": value}

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("secret internals")

    return app


def test_company_error_renders_status_and_body() -> None:
    client = TestClient(_make_app_with_handlers())

    resp = client.get("/not-found")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found", "error_description": "Company with ID 12 not found"}

    resp = client.get("/unprocessable")
    assert resp.status_code == 503
    assert resp.json() == {
        "error": "Service Unavailable",
        "error_description": "Unable to process data from XML service",
    }


def test_http_exception_uses_reason_phrase() -> None:
    client = TestClient(_make_app_with_handlers())

    resp = client.get("/http-exc")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Bad Request", "error_description": "bad input"}

    resp = client.get("/no-such-route")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found", "error_description": "Not Found"}


def test_validation_error_maps_to_400() -> None:
    resp = TestClient(_make_app_with_handlers()).get("/typed/abc")
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Bad Request",
        "error_description": "Validation failed (numeric string is expected)",
    }


def test_unhandled_exception_hides_details() -> None:
    client = TestClient(_make_app_with_handlers(), raise_server_exceptions=False)
    resp = client.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {
        "error": "Internal Server Error",
        "error_description": "Internal server error",
    }
    assert "secret" not in resp.text
