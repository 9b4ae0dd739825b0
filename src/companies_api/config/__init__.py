# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Configuration package for the Companies API."""

from __future__ import annotations

from companies_api.config.settings import Environment, Settings, get_settings

__all__ = ["Environment", "Settings", "get_settings"]
