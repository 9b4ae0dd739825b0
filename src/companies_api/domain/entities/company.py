# src/companies_api/domain/entities/company.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Company entity.

Purpose:
    Normalized company record produced from one XML document. Built fresh for
    every request and never persisted.

Layer:
    domain
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Company:
    """Normalized company record.

    Attributes:
        id: Company identifier as reported by the document (``0`` when missing
            or not numeric).
        name: Company name (``""`` when missing).
        description: Free-text description (``""`` when missing).
    """

    id: int
    name: str
    description: str
