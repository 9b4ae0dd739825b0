from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
import respx
from fastapi import FastAPI
from fastapi.testclient import TestClient

from companies_api.adapters.controllers.companies_controller import CompaniesController
from companies_api.dependencies.companies import get_companies_controller
from companies_api.domain.entities.company import Company
from companies_api.infrastructure.external_apis.xml_api.settings import DEFAULT_XML_API_BASE_URL
from companies_api.main import create_app

BASE = DEFAULT_XML_API_BASE_URL


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest.fixture
def upstream() -> Iterator[respx.MockRouter]:
    with respx.mock(base_url=BASE, assert_all_called=False) as router:
        yield router


def _xml(body: str) -> httpx.Response:
    return httpx.Response(200, content=body.encode(), headers={"content-type": "application/xml"})


def test_get_company_success(app: FastAPI, upstream: respx.MockRouter, company_1_xml: str) -> None:
    upstream.get("/1.xml").mock(return_value=_xml(company_1_xml))

    resp = TestClient(app).get("/companies/1")

    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "MWNZ", "description": "..is awesome"}


def test_get_company_second_document(
    app: FastAPI, upstream: respx.MockRouter, company_2_xml: str
) -> None:
    upstream.get("/2.xml").mock(return_value=_xml(company_2_xml))

    resp = TestClient(app).get("/companies/2")

    assert resp.status_code == 200
    assert resp.json() == {"id": 2, "name": "Other", "description": "....is not"}


def test_get_company_with_lifespan_uses_shared_client(
    app: FastAPI, upstream: respx.MockRouter, company_1_xml: str
) -> None:
    route = upstream.get("/1.xml").mock(return_value=_xml(company_1_xml))

    with TestClient(app) as client:
        assert isinstance(app.state.http_client, httpx.AsyncClient)
        resp = client.get("/companies/1", headers={"X-Request-ID": "it-1"})

    assert resp.status_code == 200
    assert resp.headers["X-Request-ID"] == "it-1"
    assert route.calls.last.request.headers["X-Request-ID"] == "it-1"
    assert app.state.http_client.is_closed


def test_get_company_not_found(app: FastAPI, upstream: respx.MockRouter) -> None:
    upstream.get("/99.xml").mock(return_value=httpx.Response(404, text="404: Not Found"))

    resp = TestClient(app).get("/companies/99")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found", "error_description": "Company with ID 99 not found"}


@pytest.mark.parametrize(
    ("mock_kwargs", "description"),
    [
        (
            {"return_value": httpx.Response(500)},
            "External XML service is experiencing issues",
        ),
        (
            {"side_effect": httpx.ConnectError("refused")},
            "Unable to retrieve company data from XML service",
        ),
        (
            {"side_effect": httpx.ReadTimeout("slow")},
            "Unable to retrieve company data from XML service",
        ),
        (
            {"return_value": httpx.Response(403)},
            "Unable to retrieve company data from XML service",
        ),
        (
            {"return_value": _xml("invalid xml content")},
            "Unable to process data from XML service",
        ),
        (
            {"return_value": _xml("<Company><id>1</id></Company>")},
            "Unable to process data from XML service",
        ),
        (
            {
                "return_value": httpx.Response(
                    200, content=b"<html></html>", headers={"content-type": "text/html"}
                )
            },
            "Unable to process data from XML service",
        ),
    ],
)
def test_get_company_upstream_failures_map_to_503(
    app: FastAPI, upstream: respx.MockRouter, mock_kwargs: dict[str, object], description: str
) -> None:
    upstream.get("/1.xml").mock(**mock_kwargs)

    resp = TestClient(app).get("/companies/1")

    assert resp.status_code == 503
    assert resp.json() == {"error": "Service Unavailable", "error_description": description}


def test_get_company_with_default_namespace(app: FastAPI, upstream: respx.MockRouter) -> None:
    upstream.get("/1.xml").mock(
        return_value=_xml(
            '<Data xmlns="http://example.com/ns">'
            "<id>1</id><name>MWNZ</name><description>d</description></Data>"
        )
    )

    resp = TestClient(app).get("/companies/1")

    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "MWNZ", "description": "d"}


def test_get_company_repeated_requests_are_identical(
    app: FastAPI, upstream: respx.MockRouter, company_1_xml: str
) -> None:
    route = upstream.get("/1.xml").mock(side_effect=lambda request: _xml(company_1_xml))
    client = TestClient(app)

    first = client.get("/companies/1")
    second = client.get("/companies/1")

    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()
    assert route.call_count == 2


def test_get_company_defaults_malformed_fields(app: FastAPI, upstream: respx.MockRouter) -> None:
    upstream.get("/5.xml").mock(return_value=_xml("<Data><id>abc</id><name>  X  </name></Data>"))

    resp = TestClient(app).get("/companies/5")

    assert resp.status_code == 200
    assert resp.json() == {"id": 0, "name": "  X  ", "description": ""}


@pytest.mark.parametrize("raw_id", ["invalid", "1.5", "12abc", "--1", "+3"])
def test_get_company_rejects_non_numeric_ids(
    app: FastAPI, upstream: respx.MockRouter, raw_id: str
) -> None:
    resp = TestClient(app).get(f"/companies/{raw_id}")

    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Bad Request",
        "error_description": "Validation failed (numeric string is expected)",
    }
    assert not upstream.calls


def test_get_company_accepts_negative_ids(app: FastAPI, upstream: respx.MockRouter) -> None:
    route = upstream.get("/-1.xml").mock(return_value=httpx.Response(404))

    resp = TestClient(app).get("/companies/-1")

    assert route.called
    assert resp.status_code == 404
    assert resp.json()["error_description"] == "Company with ID -1 not found"


def test_controller_can_be_overridden(app: FastAPI) -> None:
    class _StubUseCase:
        async def execute(self, company_id: int) -> Company:
            return Company(id=company_id, name="Stub", description="stubbed")

    app.dependency_overrides[get_companies_controller] = lambda: CompaniesController(
        _StubUseCase()
    )

    resp = TestClient(app).get("/companies/7")

    assert resp.status_code == 200
    assert resp.json() == {"id": 7, "name": "Stub", "description": "stubbed"}


def test_openapi_documents_error_responses(app: FastAPI) -> None:
    spec = TestClient(app).get("/openapi.json").json()
    responses = spec["paths"]["/companies/{id}"]["get"]["responses"]
    assert {"200", "400", "404", "503"} <= set(responses)
