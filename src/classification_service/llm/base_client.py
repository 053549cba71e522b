"""
Abstract base client for LLM providers.

Defines the narrow interface the classification endpoint depends on, so the
provider can be swapped without changing validation or error mapping.
"""

from abc import ABC, abstractmethod
import structlog

from classification_service.models.llm_models import LLMGenerationRequest, LLMGenerationResponse


logger = structlog.get_logger(__name__)


class BaseLLMClient(ABC):
    """
    Abstract base class for schema-constrained LLM clients.

    Responsibilities:
    - Send one generation request with an output schema to the provider
    - Return the structured object and metadata
    - Translate provider failures into LLMClientError subclasses

    Does NOT handle:
    - Prompt construction (that's PromptBuilder's job)
    - Validating the object against the schema (that's SchemaValidator's job)
    - Retries (none are performed; see LLMRateLimitError)
    """

    def __init__(self, base_url: str, timeout: int = 60, **kwargs):
        """
        Initialize base client.

        Args:
            base_url: Base URL of the provider API
            timeout: Request timeout in seconds
            **kwargs: Additional provider-specific config
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.extra_config = kwargs

        logger.info(
            "Initialized LLM client",
            client_class=self.__class__.__name__,
            base_url=self.base_url,
            timeout=timeout,
        )

    @abstractmethod
    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Generate a structured object constrained by `request.format_schema`.

        Args:
            request: Provider-agnostic generation request

        Returns:
            LLMGenerationResponse whose `data` holds the structured object

        Raises:
            LLMAuthenticationError: Credentials missing or rejected
            LLMRateLimitError: Provider rate limit hit
            LLMQuotaExceededError: Credit or billing exhausted
            LLMSchemaViolationError: Reply had no structured object
            LLMConnectionError / LLMTimeoutError: Network failures
            LLMGenerationError: Any other provider failure
        """
        pass

    async def close(self):
        """
        Release connections. Called on application shutdown.
        """
        logger.debug("Closing LLM client", client_class=self.__class__.__name__)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )
