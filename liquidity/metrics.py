"""Prometheus collectors for outbound Liquidity API calls.

Nothing here starts an HTTP exporter; the host application decides how to
expose the default registry.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple, Type

from prometheus_client import Counter, Histogram

__all__ = ["get_metric", "requests_total", "latency_seconds"]

# Registration helper (avoid duplicate collectors on module reload)
_METRICS: Dict[Tuple[Type[Any], str], Any] = {}


def get_metric(cls: Type[Any], name: str, *args, **kwargs):
    key = (cls, name)
    if key in _METRICS:
        return _METRICS[key]
    metric = cls(name, *args, **kwargs)
    _METRICS[key] = metric
    return metric


requests_total = get_metric(
    Counter,
    "liquidity_http_requests_total",
    "HTTP requests sent to the Liquidity API",
    labelnames=["endpoint", "method", "status"],
)

latency_seconds = get_metric(
    Histogram,
    "liquidity_http_latency_seconds",
    "Latency of Liquidity API requests in seconds",
    labelnames=["endpoint"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10),
)
