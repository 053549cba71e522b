"""Prometheus metrics for the classification service."""

from classification_service.monitoring.metrics import (
    classification_requests_total,
    llm_errors_total,
    llm_latency_seconds,
    llm_tokens_total,
)

__all__ = [
    "classification_requests_total",
    "llm_errors_total",
    "llm_latency_seconds",
    "llm_tokens_total",
]
