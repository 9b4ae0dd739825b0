# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""
Base HTTP Schema (Adapters Layer)

Purpose:
    Canonical Pydantic base for all adapter-layer HTTP schemas.
    Enforces strict config (no extra fields, immutable instances).

Layer: adapters/schemas/http

Notes:
    - Transport-facing only. Domain and application code must not import from
      this module.
    - Strings are passed through verbatim; no whitespace stripping.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseHTTPSchema(BaseModel):
    """Base class for all HTTP-facing schemas.

    Attributes:
        model_config: Pydantic v2 `ConfigDict` with strict extra handling.
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        frozen=True,
    )

