from fastapi import Request
from prometheus_client import Counter, Histogram

# Prometheus metrics
REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["service", "method", "endpoint"]
)
ERROR_COUNT = Counter(
    "http_errors_total",
    "Total HTTP errors",
    ["service", "endpoint", "error_type"]
)


def endpoint_label(request: Request) -> str:
    """Route template for metric labels, e.g. ``/api/products/{product_id}``."""
    route = request.scope.get("route")
    return getattr(route, "path", "unmatched")
