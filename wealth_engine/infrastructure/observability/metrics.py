"""Prometheus metrics for reference-rate fetches and projection workload"""

from prometheus_client import Counter, Histogram

# Reference rate metrics
reference_rate_fetch_counter = Counter(
    "wealth_reference_rate_fetch_total",
    "Reference rate lookups by source",
    ["source"],  # api | cache | fallback
)

reference_rate_failures_counter = Counter(
    "wealth_reference_rate_failures_total",
    "Failed reference rate API calls",
)

reference_rate_latency_histogram = Histogram(
    "wealth_reference_rate_latency_seconds",
    "Reference rate API response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

# Projection metrics
projection_counter = Counter(
    "wealth_projection_total",
    "Wealth projections computed",
)

projection_months_histogram = Histogram(
    "wealth_projection_months",
    "Requested projection horizon in months",
    buckets=[1, 6, 12, 24, 36, 60, 120],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_projection(months: int) -> None:
    """Record projection count and horizon distribution"""
    projection_counter.inc()
    projection_months_histogram.observe(months)
