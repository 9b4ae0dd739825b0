# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""HTTP schemas (adapters layer)."""

from __future__ import annotations

from companies_api.adapters.schemas.http.base import BaseHTTPSchema
from companies_api.adapters.schemas.http.companies import CompanyHTTP, ErrorResponseHTTP

__all__ = ["BaseHTTPSchema", "CompanyHTTP", "ErrorResponseHTTP"]
