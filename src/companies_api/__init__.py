# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Companies API: normalized JSON view over the company XML documents service."""

from __future__ import annotations

__version__ = "0.1.0"
