# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Health endpoint (Adapters Layer).

Purpose:
    Expose a liveness signal for container orchestrators and load balancers.
    The service holds no stateful dependencies, so liveness is the only probe.
"""

from __future__ import annotations

import typing as t

from fastapi import APIRouter

from companies_api.adapters.schemas.http.base import BaseHTTPSchema

router = APIRouter(tags=["Health"])


class LivenessResponse(BaseHTTPSchema):
    """Liveness probe body."""

    status: t.Literal["ok"] = "ok"


@router.get(
    "/healthz",
    response_model=LivenessResponse,
    summary="Liveness probe",
    operation_id="health_liveness",
)
async def healthz() -> LivenessResponse:
    """Return ``{"status": "ok"}`` while the process is serving requests."""
    return LivenessResponse()
