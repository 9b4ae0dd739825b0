# src/companies_api/__main__.py
# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Console entry point: ``python -m companies_api`` or ``companies-api``."""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    """Serve the application with uvicorn on ``$HOST:$PORT`` (default 0.0.0.0:3000)."""
    uvicorn.run(
        "companies_api.main:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),  # noqa: S104
        port=int(os.getenv("PORT", "3000")),
        log_config=None,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
