# src/companies_api/dependencies/companies.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Dependency wiring for the companies endpoint.

Overview:
    FastAPI dependency providers that assemble the XML service client, the
    GetCompany use case, and the CompaniesController.

Layer:
    dependencies

Design:
    * The shared ``httpx.AsyncClient`` created by the lifespan bootstrap is
      reused when present on ``app.state``; otherwise the XML client owns a
      private one that is closed when the request finishes.
    * Tests override :func:`get_companies_controller` or
      :func:`get_xml_api_client` through ``app.dependency_overrides``.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from companies_api.adapters.controllers.companies_controller import CompaniesController
from companies_api.adapters.mappers.xml_document_parser import XmlDocumentParser
from companies_api.application.use_cases.companies.get_company import GetCompany
from companies_api.infrastructure.external_apis.xml_api.client import XmlApiClient
from companies_api.infrastructure.external_apis.xml_api.settings import XmlApiSettings


@lru_cache(maxsize=1)
def get_xml_api_settings() -> XmlApiSettings:
    """Return the cached XML service settings."""
    return XmlApiSettings()


async def get_xml_api_client(request: Request) -> AsyncIterator[XmlApiClient]:
    """Yield an XML service client bound to the shared HTTP client, if any."""
    shared = getattr(request.app.state, "http_client", None)
    client = XmlApiClient(get_xml_api_settings(), http=shared)
    try:
        yield client
    finally:
        await client.aclose()


def get_get_company_uc(
    client: Annotated[XmlApiClient, Depends(get_xml_api_client)],
) -> GetCompany:
    """Build the GetCompany use case for the current request."""
    return GetCompany(gateway=client, parser=XmlDocumentParser())


def get_companies_controller(
    use_case: Annotated[GetCompany, Depends(get_get_company_uc)],
) -> CompaniesController:
    """Build the companies controller for the current request."""
    return CompaniesController(use_case)
