"""Prometheus metrics collectors for idcn.

Defines all application metrics for monitoring and observability.
"""

from prometheus_client import Counter, Gauge, Histogram

# Request metrics
REQUEST_LATENCY = Histogram(
    "idcn_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint", "status"],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

REQUEST_COUNT = Counter(
    "idcn_requests_total",
    "Total request count",
    ["method", "endpoint", "status"],
)

ACTIVE_REQUESTS = Gauge(
    "idcn_active_requests",
    "Currently processing requests",
)

# Engine metrics
VALIDATIONS = Counter(
    "idcn_validations_total",
    "Identity numbers validated, by outcome",
    ["result"],
)

GENERATED = Counter(
    "idcn_generated_total",
    "Identity numbers generated, by length",
    ["length"],
)

UNKNOWN_REGIONS = Counter(
    "idcn_unknown_region_total",
    "Region codes that resolved at no tier",
)
