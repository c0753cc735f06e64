"""
Prometheus metrics for the catalog search service.

Tracks HTTP traffic, search operations and result sizes.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "catalog_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "catalog_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

# Search metrics
search_queries_total = Counter(
    "catalog_search_queries_total", "Total search queries", ["filtered", "status"]
)

search_query_duration_seconds = Histogram(
    "catalog_search_query_duration_seconds",
    "Search query duration in seconds",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25),
)

search_results_per_query = Histogram(
    "catalog_search_results_per_query",
    "Number of results returned per query",
    buckets=(0, 1, 5, 10, 25, 50, 100),
)

# Catalog metrics
catalog_items = Gauge("catalog_items", "Number of products in the loaded catalog")


def track_search(filtered: bool, status: str, duration: float, result_count: int) -> None:
    """Record one search operation."""
    search_queries_total.labels(filtered=str(filtered).lower(), status=status).inc()
    search_query_duration_seconds.observe(duration)
    search_results_per_query.observe(result_count)


def metrics_response() -> Response:
    """Render all metrics in Prometheus exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
