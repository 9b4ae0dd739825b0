# src/companies_api/domain/interfaces/gateways/company_xml_gateway.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""
Company XML gateway interface.

Purpose:
- Define the provider-agnostic contract for retrieving the raw XML document
  that describes one company.
- Hide transport, timeout, and content negotiation concerns behind a stable
  domain contract.

Layer: domain

Notes:
- Implementations live in the infrastructure layer and must translate
  transport errors into ``XmlServiceError`` subclasses.
"""

from __future__ import annotations

from typing import Protocol


class CompanyXmlGateway(Protocol):
    """Protocol for sources of per-company XML documents."""

    async def fetch_company_xml(self, company_id: int) -> str:
        """Fetch the raw XML document for a company.

        Args:
            company_id: Company identifier; not range-checked.

        Returns:
            The response body as text.

        Raises:
            XmlServiceHTTPError: If the upstream answers with a non-2xx status.
            XmlServiceTransportError: On network failure or timeout.
            XmlContentTypeError: If the declared content type is not XML or plain text.
        """
        ...
