# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""ASGI middleware (request correlation, access logging)."""
