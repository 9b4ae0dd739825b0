# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""Company XML service package.

Purpose:
    Group the XML service infrastructure modules:

    * settings: Pydantic settings for the XML service client.
    * client: Async HTTP client fetching per-company XML documents.
"""

from __future__ import annotations
