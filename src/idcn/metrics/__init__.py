"""Prometheus metrics module for idcn."""

from idcn.metrics.collectors import (
    ACTIVE_REQUESTS,
    GENERATED,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    UNKNOWN_REGIONS,
    VALIDATIONS,
)

__all__ = [
    "ACTIVE_REQUESTS",
    "GENERATED",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "UNKNOWN_REGIONS",
    "VALIDATIONS",
]
