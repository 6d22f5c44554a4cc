from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram


class HitCounter:
    """Per-page view counter, labeled by the requested page name.

    Label children are created on first increment and never reset.
    """

    def __init__(self, registry: CollectorRegistry) -> None:
        self._counter = Counter(
            "talks_hits",
            "Number of hits to talks pages",
            ["name"],
            registry=registry,
        )

    def increment(self, label: str) -> None:
        self._counter.labels(name=label).inc()


class HttpMetrics:
    """Request count and latency for every routed HTTP request."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self.requests_total = Counter(
            "http_requests",
            "Number of HTTP requests served",
            ["method", "status_code"],
            registry=registry,
        )
        self.request_seconds = Histogram(
            "http_request_duration_seconds",
            "Time spent serving HTTP requests",
            registry=registry,
        )

    def observe_http_request(self, method: str, status_code: int, elapsed_s: float) -> None:
        self.requests_total.labels(method=method, status_code=str(status_code)).inc()
        self.request_seconds.observe(elapsed_s)


def hit_count(registry: CollectorRegistry, name: str) -> float:
    """Current hit count for ``name``; 0.0 when the page was never served."""

    value = registry.get_sample_value("talks_hits_total", {"name": name})
    return value or 0.0
