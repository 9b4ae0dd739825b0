# src/companies_api/domain/interfaces/gateways/xml_parser_gateway.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""XML parser gateway interface.

Purpose:
    Define a domain-level abstraction for turning raw company XML into a
    generic nested mapping and extracting its ``Data`` container.
    Implementations live in the adapters layer.

Layer:
    domain/interfaces/gateways
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class XmlParserGateway(Protocol):
    """Protocol for adapters that parse company XML documents."""

    def parse(self, content: str) -> dict[str, Any]:
        """Parse raw XML text.

        Raises:
            XmlParseError: If the content is not well-formed XML.
        """
        ...

    def validate_structure(self, document: Mapping[str, Any], company_id: int) -> Any:
        """Return the ``Data`` container of a parsed document.

        Raises:
            XmlStructureError: If the container is missing or empty.
        """
        ...
