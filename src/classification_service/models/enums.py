"""
Enumerations for the classification service.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class ProviderErrorKind(str, Enum):
    """
    Closed classification of LLM provider failures.

    Produced by the LLM client layer so the HTTP layer can map failures
    to status codes without looking at vendor error payloads.
    """

    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    QUOTA_EXCEEDED = "quota_exceeded"
    SCHEMA_VIOLATION = "schema_violation"
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    GENERATION = "generation"

