"""Observability: structured logging and Prometheus metrics.

Uses structlog for logging and prometheus_client for metrics.
"""
