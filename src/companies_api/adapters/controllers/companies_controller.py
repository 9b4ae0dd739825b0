# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""
Companies Controller.

Summary:
    Thin adapter coordinating the GetCompany use-case. Structured errors
    raised by the use-case propagate unchanged to the HTTP boundary.

Layer:
    adapters/controllers
"""
from __future__ import annotations

from typing import Protocol

from companies_api.adapters.controllers.base import BaseController
from companies_api.domain.entities.company import Company


class GetCompanyUseCase(Protocol):
    """Protocol for a use-case resolving one company by id."""

    async def execute(self, company_id: int) -> Company:
        """Return the company, or raise a ``CompanyError``."""
        ...


class CompaniesController(BaseController):
    """Controller orchestrating company retrieval."""

    __slots__ = ("_uc",)

    def __init__(self, use_case: GetCompanyUseCase) -> None:
        """Initialize the controller.

        Args:
            use_case: Use-case that fetches and normalizes a company.
        """
        self._uc = use_case

    async def get_company(self, company_id: int) -> Company:
        """Fetch a company by id.

        Args:
            company_id: Validated integer company id.

        Returns:
            Company: Normalized company record.
        """
        return await self._uc.execute(company_id)
