# src/companies_api/adapters/mappers/xml_document_parser.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""XML document parsing adapter.

Purpose:
    Turn raw company XML into a generic nested mapping and check that the
    mapping carries the expected ``Data`` container, without leaking XML
    parsing details into the domain or application layers.

Parsed shape:
    The root element becomes the single top-level key. Child element values
    are always wrapped in a list, so ``<Data><name>Foo</name></Data>`` parses
    to ``{"Data": {"name": ["Foo"]}}``. Leaf text is kept verbatim; an empty
    element becomes ``""``. Attributes are kept under ``"$"`` and, for
    elements that carry attributes or children, non-blank text under ``"_"``.
    Namespace URIs are dropped from element and attribute names, so
    ``<Data xmlns="urn:x">`` still parses under ``"Data"``.
    Downstream field parsers unwrap the lists (see ``field_parsers``).

Layer:
    adapters/mappers
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, cast
from xml.etree.ElementTree import Element, ParseError  # stdlib typed

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as ET

from companies_api.domain.exceptions.companies import XmlParseError, XmlStructureError

ParsedDocument = dict[str, Any]

DATA_KEY: Final[str] = "Data"
_ATTRS_KEY: Final[str] = "$"
_TEXT_KEY: Final[str] = "_"


def _local_name(name: str) -> str:
    """Strip a ``{uri}`` prefix from an ElementTree tag or attribute name."""
    if name.startswith("{"):
        return name.rpartition("}")[2]
    return name


def _element_value(elem: Element) -> Any:
    """Convert one element into its parsed value (string or mapping)."""
    children = list(elem)
    attrs = {_local_name(key): value for key, value in elem.attrib.items()}
    text = elem.text or ""

    if not children:
        if not attrs:
            return text
        leaf: dict[str, Any] = {_ATTRS_KEY: attrs}
        if text:
            leaf[_TEXT_KEY] = text
        return leaf

    node: dict[str, Any] = {}
    if attrs:
        node[_ATTRS_KEY] = attrs
    mixed_text = text + "".join(child.tail or "" for child in children)
    if mixed_text.strip():
        node[_TEXT_KEY] = mixed_text
    for child in children:
        node.setdefault(_local_name(child.tag), []).append(_element_value(child))
    return node


class XmlDocumentParser:
    """Parse raw company XML into a :data:`ParsedDocument`."""

    def parse(self, content: str) -> ParsedDocument:
        """Parse the provided XML text.

        Args:
            content: Raw XML text as received from the XML service.

        Returns:
            Mapping with the root element tag as its only key.

        Raises:
            XmlParseError: If the content is not well-formed XML or uses
                forbidden constructs (entity expansion, external entities).
        """
        try:
            root = cast(Element, ET.fromstring(content))
        except (ParseError, DefusedXmlException) as exc:
            raise XmlParseError(
                "Invalid XML format received from service",
                details={"error": str(exc)},
            ) from exc

        return {_local_name(root.tag): _element_value(root)}

    @staticmethod
    def validate_structure(document: Mapping[str, Any], company_id: int) -> Any:
        """Return the ``Data`` container of a parsed document.

        Args:
            document: Output of :meth:`parse`.
            company_id: Requested company id, for error context.

        Returns:
            The (truthy) value stored under ``Data``.

        Raises:
            XmlStructureError: If ``Data`` is missing or empty.
        """
        data = document.get(DATA_KEY) if isinstance(document, Mapping) else None
        if not data:
            raise XmlStructureError(
                f"XML response missing required Data element for company id {company_id}",
                details={"company_id": company_id, "root": list(document or {})},
            )
        return data
