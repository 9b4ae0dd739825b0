# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""HTTP routers (adapters layer)."""
