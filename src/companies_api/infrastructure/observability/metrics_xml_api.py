# Copyright (c) Companies API.
# SPDX-License-Identifier: MIT
"""XML service metrics.

Purpose:
    Provide Prometheus metrics for calls to the company XML service:
      * Latency histogram by outcome.
      * Error counter by reason.
      * HTTP status distribution.
      * Response size histogram.

Design:
    - Functions return lazily created singleton metric instances so that
      importing this module never registers duplicate collectors.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

_xml_api_latency_seconds: Histogram | None = None
_xml_api_errors_total: Counter | None = None
_xml_api_http_status_total: Counter | None = None
_xml_api_response_bytes: Histogram | None = None


def get_xml_api_latency_seconds() -> Histogram:
    """Return (and lazily create) the XML service latency histogram."""
    global _xml_api_latency_seconds
    if _xml_api_latency_seconds is None:
        _xml_api_latency_seconds = Histogram(
            "xml_api_latency_seconds",
            "Latency of company XML service calls in seconds.",
            ["endpoint", "outcome"],
        )
    return _xml_api_latency_seconds


def get_xml_api_errors_total() -> Counter:
    """Return (and lazily create) the XML service error counter."""
    global _xml_api_errors_total
    if _xml_api_errors_total is None:
        _xml_api_errors_total = Counter(
            "xml_api_errors_total",
            "Total number of company XML service errors.",
            ["endpoint", "reason"],
        )
    return _xml_api_errors_total


def get_xml_api_http_status_total() -> Counter:
    """Return (and lazily create) the XML service HTTP status counter."""
    global _xml_api_http_status_total
    if _xml_api_http_status_total is None:
        _xml_api_http_status_total = Counter(
            "xml_api_http_status_total",
            "Company XML service responses by status code.",
            ["endpoint", "status"],
        )
    return _xml_api_http_status_total


def get_xml_api_response_bytes() -> Histogram:
    """Return (and lazily create) the XML service response-bytes histogram."""
    global _xml_api_response_bytes
    if _xml_api_response_bytes is None:
        _xml_api_response_bytes = Histogram(
            "xml_api_response_bytes",
            "Size of company XML service responses in bytes.",
            ["endpoint"],
            buckets=(128, 512, 1024, 4096, 16384, 65536, 262144),
        )
    return _xml_api_response_bytes
