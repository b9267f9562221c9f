"""
Prometheus metrics for the StreamTitle backend.

RED metrics for HTTP, plus duration/error metrics for the LLM and the
game-data providers, and a counter of resolution outcomes.
"""

from prometheus_client import (
    Counter,
    Histogram,
    Gauge,
    REGISTRY,
)

# Use the default registry
metrics_registry = REGISTRY

# HTTP Metrics (RED - Rate, Errors, Duration)
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
    registry=metrics_registry,
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
    registry=metrics_registry,
)

http_requests_in_progress = Gauge(
    "http_requests_in_progress",
    "Number of HTTP requests in progress",
    ["method", "endpoint"],
    registry=metrics_registry,
)

# External API Metrics
llm_api_duration_seconds = Histogram(
    "llm_api_duration_seconds",
    "LLM API call duration in seconds",
    ["provider", "model"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
    registry=metrics_registry,
)

llm_api_errors_total = Counter(
    "llm_api_errors_total",
    "Total LLM API errors",
    ["provider", "error_type"],
    registry=metrics_registry,
)

# Game-data provider metrics
search_provider_duration_seconds = Histogram(
    "search_provider_duration_seconds",
    "Game-data provider API duration in seconds",
    ["provider"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
    registry=metrics_registry,
)

search_provider_errors_total = Counter(
    "search_provider_errors_total",
    "Total game-data provider errors",
    ["provider", "error_type"],  # error_type: timeout, rate_limited, error
    registry=metrics_registry,
)

# Business Metrics
fact_resolution_total = Counter(
    "fact_resolution_total",
    "Fact resolution outcomes",
    ["outcome", "source"],  # outcome: found, not_found; source: Steam, Modrinth, CurseForge, none
    registry=metrics_registry,
)
