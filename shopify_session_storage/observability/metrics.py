"""Prometheus metrics for session storage operations."""

from prometheus_client import Counter, Histogram

SESSION_STORAGE_OPERATIONS = Counter(
    "shopify_session_storage_operations_total",
    "Total number of session storage operations",
    labelnames=["operation", "status"],
)

SESSION_STORAGE_LATENCY = Histogram(
    "shopify_session_storage_latency_seconds",
    "Session storage operation latency in seconds",
    labelnames=["operation"],
    buckets=(0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)
