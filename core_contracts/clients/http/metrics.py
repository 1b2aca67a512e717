"""Prometheus metrics of the outbound HTTP clients.

The library only records; exposing ``/metrics`` is left to the embedding
service (``prometheus_client.start_http_server`` or its own ASGI mount).
"""
from __future__ import annotations

from prometheus_client import Counter, Histogram

__all__ = ["REQUESTS_TOTAL", "REQUEST_LATENCY"]

# ---------------------------------------------------------------------------
# Metric objects (module-level singletons)
# ---------------------------------------------------------------------------
REQUESTS_TOTAL = Counter(
    "core_contracts_http_requests_total",
    "Outbound requests sent to sibling services",
    ["method", "outcome"],
)
REQUEST_LATENCY = Histogram(
    "core_contracts_http_request_seconds",
    "Round-trip time of an outbound request",
    ["method"],
    buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10),
)

OUTCOME_OK = "ok"
OUTCOME_ERROR_STATUS = "error_status"
OUTCOME_TRANSPORT_ERROR = "transport_error"
