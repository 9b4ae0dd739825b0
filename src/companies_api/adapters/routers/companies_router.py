# src/companies_api/adapters/routers/companies_router.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Companies Router.

Synopsis:
    HTTP surface for company lookups.

Endpoints:
    - GET /companies/{id}
        → CompanyHTTP on success; ErrorResponseHTTP on 400/404/503.

Design:
    * Router handles path validation; the id is checked before any upstream
      call is made.
    * Controllers orchestrate use cases only (no direct infra).
    * Structured ``CompanyError`` instances propagate to the app-level
      exception handler, which renders their status and body.
"""

from __future__ import annotations

import re
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from companies_api.adapters.controllers.companies_controller import CompaniesController
from companies_api.adapters.schemas.http.companies import CompanyHTTP, ErrorResponseHTTP
from companies_api.dependencies.companies import get_companies_controller
from companies_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

router = APIRouter(prefix="/companies", tags=["Companies"])

NUMERIC_ID_DETAIL = "Validation failed (numeric string is expected)"
_NUMERIC_ID_RE = re.compile(r"-?[0-9]+")


def _parse_company_id(raw: str) -> int:
    """Validate a path id and return it as an integer.

    Raises:
        HTTPException: 400 when ``raw`` is not an optionally signed digit string.
    """
    if not _NUMERIC_ID_RE.fullmatch(raw):
        logger.info("companies.invalid_id", extra={"extra": {"raw_id": raw}})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NUMERIC_ID_DETAIL)
    return int(raw)


@router.get(
    "/{id}",
    response_model=CompanyHTTP,
    summary="Get company by id",
    description=(
        "Fetches `{id}.xml` from the upstream XML service and returns the "
        "normalized company record."
    ),
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponseHTTP, "description": "Invalid id"},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponseHTTP, "description": "Company not found"},
        status.HTTP_503_SERVICE_UNAVAILABLE: {
            "model": ErrorResponseHTTP,
            "description": "XML service unavailable or returned unusable data",
        },
    },
)
async def get_company(
    id: Annotated[str, Path(description="Company ID (base-10 integer)")],  # noqa: A002
    controller: Annotated[CompaniesController, Depends(get_companies_controller)],
) -> CompanyHTTP:
    """Return a single company by id."""
    company_id = _parse_company_id(id)
    company = await controller.get_company(company_id)
    return CompanyHTTP.from_entity(company)
