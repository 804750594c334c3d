"""Prometheus metrics for organization operations."""

from prometheus_client import Counter, Histogram

organization_requests_total = Counter(
    "organization_requests_total",
    "Total organization operations by outcome",
    ["operation", "outcome"],
)

organization_store_latency_ms = Histogram(
    "organization_store_latency_ms",
    "Document store call latency in milliseconds",
    ["operation"],
    buckets=[1, 5, 10, 50, 100, 200, 500, 1000, 2000, 5000],
)


class PrometheusOrgMetrics:
    """Prometheus-based organization metrics implementation."""

    def inc_request(self, operation: str, outcome: str) -> None:
        """Increment the request outcome counter."""
        organization_requests_total.labels(operation=operation, outcome=outcome).inc()

    def record_store_latency(self, operation: str, latency_ms: float) -> None:
        """Record document store call latency."""
        organization_store_latency_ms.labels(operation=operation).observe(latency_ms)
