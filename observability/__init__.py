"""
Observability infrastructure for the StreamTitle backend.

Provides:
- Structured logging with correlation IDs
- Sentry error tracking
- Prometheus metrics
"""

from .logging import get_logger, correlation_id_context, get_correlation_id
from .metrics import (
    metrics_registry,
    http_requests_total,
    http_request_duration_seconds,
    http_requests_in_progress,
    llm_api_duration_seconds,
    llm_api_errors_total,
    search_provider_duration_seconds,
    search_provider_errors_total,
    fact_resolution_total,
)

__all__ = [
    "get_logger",
    "correlation_id_context",
    "get_correlation_id",
    "metrics_registry",
    "http_requests_total",
    "http_request_duration_seconds",
    "http_requests_in_progress",
    "llm_api_duration_seconds",
    "llm_api_errors_total",
    "search_provider_duration_seconds",
    "search_provider_errors_total",
    "fact_resolution_total",
]
