from __future__ import annotations

from companies_api.domain.exceptions.base import DomainError
from companies_api.domain.exceptions.companies import (
    CompanyError,
    CompanyNotFound,
    UnprocessableUpstreamData,
    UpstreamUnavailable,
    XmlContentTypeError,
    XmlServiceHTTPError,
)


def test_company_not_found_shape() -> None:
    exc = CompanyNotFound(99)
    assert exc.status_code == 404
    assert exc.to_body() == {
        "error": "Not Found",
        "error_description": "Company with ID 99 not found",
    }
    assert isinstance(exc, CompanyError)
    assert isinstance(exc, DomainError)


def test_upstream_unavailable_defaults_to_retrieval_failed() -> None:
    exc = UpstreamUnavailable()
    assert exc.status_code == 503
    assert exc.to_body() == {
        "error": "Service Unavailable",
        "error_description": "Unable to retrieve company data from XML service",
    }


def test_unprocessable_upstream_data_body() -> None:
    exc = UnprocessableUpstreamData()
    assert exc.status_code == 503
    assert exc.error_description == "Unable to process data from XML service"


def test_xml_service_errors_expose_messages_but_not_details() -> None:
    http_err = XmlServiceHTTPError(500, url="https://example.test/1.xml")
    assert str(http_err) == "Request failed with status code 500"
    assert http_err.status_code == 500
    assert http_err.details["url"] == "https://example.test/1.xml"

    ct_err = XmlContentTypeError("text/html")
    assert str(ct_err) == "Expected XML content but received: text/html"
