# src/companies_api/adapters/schemas/http/companies.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Company HTTP schemas.

Purpose:
    Transport-facing response models for the companies endpoint:
      - CompanyHTTP: success body.
      - ErrorResponseHTTP: the two-field error body used by every failure.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from companies_api.adapters.schemas.http.base import BaseHTTPSchema
from companies_api.domain.entities.company import Company

__all__ = ["CompanyHTTP", "ErrorResponseHTTP"]


class CompanyHTTP(BaseHTTPSchema):
    """Company record as returned by ``GET /companies/{id}``."""

    model_config = ConfigDict(
        title="Company",
        json_schema_extra={
            "examples": [{"id": 1, "name": "MWNZ", "description": "..is awesome"}],
        },
    )

    id: int = Field(..., description="Company ID")
    name: str = Field(..., description="Company name")
    description: str = Field(..., description="Company description")

    @classmethod
    def from_entity(cls, company: Company) -> CompanyHTTP:
        """Build the HTTP schema from a domain :class:`Company`."""
        return cls(id=company.id, name=company.name, description=company.description)


class ErrorResponseHTTP(BaseHTTPSchema):
    """Error body: ``{"error": ..., "error_description": ...}``."""

    model_config = ConfigDict(
        title="ErrorResponse",
        json_schema_extra={
            "examples": [
                {"error": "Not Found", "error_description": "Company with ID 99 not found"},
            ],
        },
    )

    error: str = Field(..., description="Error type")
    error_description: str = Field(..., description="Error description")
