"""Custom Prometheus metrics for the classification service.

Exposed at /metrics alongside the HTTP metrics from
prometheus-fastapi-instrumentator when PROMETHEUS_ENABLED is set.
"""

from prometheus_client import Counter, Histogram

# === Endpoint Metrics ===

classification_requests_total = Counter(
    "classification_requests_total",
    "Total classification requests by outcome",
    ["status"],
)
"""
Labels:
- status: success, invalid_input, or the ProviderErrorKind / error class name
"""

# === LLM Metrics ===

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "Provider call latency in seconds",
    ["model", "success"],
    buckets=(0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0),
)

llm_errors_total = Counter(
    "llm_errors_total",
    "Provider call failures by error kind",
    ["kind"],
)

llm_tokens_total = Counter(
    "llm_tokens_total",
    "Tokens consumed by provider calls",
    ["model", "token_type"],
)
