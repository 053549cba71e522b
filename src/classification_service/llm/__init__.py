"""
LLM client abstraction and implementations.

Components:
- BaseLLMClient: Abstract base class for LLM clients
- AnthropicClient: Implementation for the Anthropic Messages API
- PromptBuilder: Renders the extraction prompt and request
- exceptions: LLM-specific exceptions tagged with ProviderErrorKind
"""

from classification_service.llm.base_client import BaseLLMClient
from classification_service.llm.anthropic_client import AnthropicClient
from classification_service.llm.prompt_builder import PromptBuilder
from classification_service.llm.exceptions import (
    LLMAuthenticationError,
    LLMClientError,
    LLMConnectionError,
    LLMGenerationError,
    LLMQuotaExceededError,
    LLMRateLimitError,
    LLMSchemaViolationError,
    LLMTimeoutError,
)

__all__ = [
    "BaseLLMClient",
    "AnthropicClient",
    "PromptBuilder",
    "LLMAuthenticationError",
    "LLMClientError",
    "LLMConnectionError",
    "LLMGenerationError",
    "LLMQuotaExceededError",
    "LLMRateLimitError",
    "LLMSchemaViolationError",
    "LLMTimeoutError",
]
