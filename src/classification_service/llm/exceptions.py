"""
Custom exceptions for the LLM client layer.

Every exception carries a `ProviderErrorKind` so the API layer can map
failures to HTTP responses without inspecting vendor error payloads.
"""

from classification_service.models.enums import ProviderErrorKind


class LLMClientError(Exception):
    """
    Base exception for all LLM client errors.

    All LLM-specific exceptions inherit from this to allow catching
    any LLM-related error with a single except clause.
    """
    kind: ProviderErrorKind = ProviderErrorKind.GENERATION

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class LLMAuthenticationError(LLMClientError):
    """
    Raised when the provider rejects the API key, or no key is configured.
    """
    kind = ProviderErrorKind.AUTHENTICATION


class LLMRateLimitError(LLMClientError):
    """
    Raised when the provider rate-limits the request (HTTP 429).

    Not retried here: extraction output is not deterministic, so a retry
    is not guaranteed to be equivalent to the first attempt.
    """
    kind = ProviderErrorKind.RATE_LIMIT


class LLMQuotaExceededError(LLMClientError):
    """
    Raised when the account is out of credit or billing is blocked.
    """
    kind = ProviderErrorKind.QUOTA_EXCEEDED


class LLMSchemaViolationError(LLMClientError):
    """
    Raised when the provider reply carries no structured object at all.

    Objects that are present but do not match the schema are reported by
    the validation layer instead.
    """
    kind = ProviderErrorKind.SCHEMA_VIOLATION


class LLMConnectionError(LLMClientError):
    """
    Raised when unable to reach the provider (DNS, TCP, TLS failures).
    """
    kind = ProviderErrorKind.CONNECTION


class LLMTimeoutError(LLMConnectionError):
    """
    Raised when the provider call exceeds the configured timeout.
    """
    kind = ProviderErrorKind.TIMEOUT


class LLMGenerationError(LLMClientError):
    """
    Raised when the provider returns any other error.

    Examples:
    - Server error or overload (5xx, 529)
    - Invalid request parameters (400)
    - Unparseable response body
    """
    kind = ProviderErrorKind.GENERATION
