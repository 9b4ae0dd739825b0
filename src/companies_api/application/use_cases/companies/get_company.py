# src/companies_api/application/use_cases/companies/get_company.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""
Use Case: Get Company

Purpose:
    Orchestrate the company lookup pipeline: fetch the XML document, parse
    it, check its structure, and transform the ``Data`` container into a
    :class:`Company`. Any failure is classified into a structured
    :class:`CompanyError` before it leaves the use case.

Layer: application/use_cases
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from companies_api.application.services.company_error_classifier import (
    classify_company_error,
)
from companies_api.domain.entities.company import Company
from companies_api.domain.interfaces.gateways.company_xml_gateway import CompanyXmlGateway
from companies_api.domain.interfaces.gateways.xml_parser_gateway import XmlParserGateway
from companies_api.domain.services.field_parsers import (
    parse_integer_field,
    parse_string_field,
)
from companies_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


def transform_to_company(data: Any) -> Company:
    """Map a ``Data`` container into a :class:`Company`.

    Malformed or missing fields never raise; they degrade to ``0``/``""``.

    Args:
        data: Value stored under ``Data`` in a parsed document.

    Returns:
        Company: Normalized record.
    """
    fields: Mapping[str, Any] = data if isinstance(data, Mapping) else {}
    return Company(
        id=parse_integer_field(fields.get("id")),
        name=parse_string_field(fields.get("name")),
        description=parse_string_field(fields.get("description")),
    )


class GetCompany:
    """Use case to fetch one company from the XML service.

    Args:
        gateway: Source of raw company XML documents.
        parser: XML parser producing the generic document mapping.

    Raises:
        CompanyError: Always the classified form of any pipeline failure.
    """

    def __init__(self, gateway: CompanyXmlGateway, parser: XmlParserGateway) -> None:
        self._gateway = gateway
        self._parser = parser

    async def execute(self, company_id: int) -> Company:
        """Fetch, parse, validate and transform the company document.

        Args:
            company_id: Requested company id.

        Returns:
            Company: Normalized company record.
        """
        logger.info("Fetching company", extra={"extra": {"company_id": company_id}})

        try:
            xml_text = await self._gateway.fetch_company_xml(company_id)
            document = self._parse(xml_text)
            data = self._parser.validate_structure(document, company_id)
            company = transform_to_company(data)
        except Exception as exc:
            logger.error(
                "Failed to get company",
                extra={
                    "extra": {
                        "company_id": company_id,
                        "error_type": type(exc).__name__,
                        "error": str(exc),
                    }
                },
            )
            classified = classify_company_error(exc, company_id)
            if classified is exc:
                raise
            raise classified from exc

        logger.info(
            "Successfully retrieved company",
            extra={"extra": {"company_id": company_id, "name": company.name}},
        )
        return company

    def _parse(self, xml_text: str) -> dict[str, Any]:
        """Parse XML text, logging parse failures before re-raising."""
        logger.debug("Parsing XML data")
        try:
            return self._parser.parse(xml_text)
        except Exception as exc:
            logger.error("XML parsing failed", extra={"extra": {"error": str(exc)}})
            raise
