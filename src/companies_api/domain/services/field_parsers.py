# src/companies_api/domain/services/field_parsers.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Field parsers for parsed XML values.

Purpose:
    Reduce the loosely typed values found in a parsed XML document to plain
    scalars with safe defaults. The XML mapper wraps every child element value
    in a single-item list (``<name>Foo</name>`` → ``["Foo"]``), so each parser
    first unwraps a list to its first element.

Design:
    * Parsers never raise; malformed or missing values degrade to a default.
    * Every fallback is logged at warning level so silent defaults remain
      visible to operators.
    * Integer parsing follows ``parseInt``-style prefix coercion: leading
      whitespace, an optional sign, then the longest run of ASCII digits.

Layer:
    domain/services
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Final

logger = logging.getLogger(__name__)

_INT_PREFIX_RE: Final[re.Pattern[str]] = re.compile(r"^\s*([+-]?[0-9]+)")
_TEXT_KEY: Final[str] = "_"


def unwrap_field(field: Any) -> Any:
    """Return the first element of a list value, or the value itself.

    Args:
        field: Scalar, list, or ``None`` as found in a parsed document.

    Returns:
        The unwrapped value; ``None`` for an absent field or an empty list.
    """
    if isinstance(field, list):
        return field[0] if field else None
    return field


def _as_text(value: Any) -> str | None:
    """Coerce an unwrapped value to text, reading ``_`` from attribute nodes."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        text = value.get(_TEXT_KEY)
        return text if isinstance(text, str) else None
    return str(value)


def parse_integer_field(field: Any) -> int:
    """Parse a parsed-XML field into an integer with fallback handling.

    Args:
        field: String or list value from XML parsing (may be ``None``).

    Returns:
        The parsed integer, or ``0`` when the field is missing, empty, or has
        no leading digits.
    """
    value = _as_text(unwrap_field(field))
    if not value:
        logger.warning("Missing or empty integer field, defaulting to 0")
        return 0

    match = _INT_PREFIX_RE.match(value)
    if match is None:
        logger.warning(
            "Invalid integer value, defaulting to 0",
            extra={"extra": {"value": value}},
        )
        return 0

    return int(match.group(1))


def parse_string_field(field: Any) -> str:
    """Parse a parsed-XML field into a string with fallback handling.

    Args:
        field: String or list value from XML parsing (may be ``None``).

    Returns:
        The value verbatim (no trimming), or ``""`` when missing or empty.
    """
    value = _as_text(unwrap_field(field))
    if not value:
        logger.warning("Missing or empty string field, defaulting to empty string")
        return ""

    return value
