"""Prometheus metric definitions for dashboard data access."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

data_access_queries_total = Counter(
    "data_access_queries_total",
    "Total data access calls by operation and outcome.",
    labelnames=["operation", "outcome"],
)

data_access_query_seconds = Histogram(
    "data_access_query_seconds",
    "Duration of data access calls in seconds.",
    labelnames=["operation"],
)

__all__ = [
    "data_access_queries_total",
    "data_access_query_seconds",
]
