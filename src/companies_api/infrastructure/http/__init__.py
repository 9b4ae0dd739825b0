# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""HTTP boundary helpers (exception handlers)."""
