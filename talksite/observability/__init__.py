"""Observability helpers.

Request IDs + structlog contextvars, plus a Prometheus registry per application
context for page hit counts and HTTP request metrics.
"""
