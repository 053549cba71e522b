"""
Anthropic client implementation for structured extraction.

Talks to the Anthropic Messages API using httpx AsyncClient. Structured
output is obtained by offering a single tool whose input_schema is the
output schema and forcing the model to call it (tool_choice), so the tool
input is the extraction object.
"""

import time
from typing import Any, Dict, Optional
import httpx
import structlog

from classification_service.llm.base_client import BaseLLMClient
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
from classification_service.models.llm_models import LLMGenerationRequest, LLMGenerationResponse
from classification_service.monitoring.metrics import llm_latency_seconds, llm_tokens_total


logger = structlog.get_logger(__name__)

MESSAGES_PATH = "/v1/messages"


class AnthropicClient(BaseLLMClient):
    """
    Anthropic Messages API client.

    API Endpoints:
    - POST /v1/messages: single-turn message with a forced tool call

    Error classification (HTTP status or `error.type` in the body):
    - 401 / authentication_error -> LLMAuthenticationError
    - 402 / billing_error / "credit balance" message -> LLMQuotaExceededError
    - 429 / rate_limit_error -> LLMRateLimitError
    - anything else -> LLMGenerationError
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.anthropic.com",
        api_version: str = "2023-06-01",
        timeout: int = 60,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs
    ):
        """
        Initialize Anthropic client.

        Args:
            api_key: Anthropic API key. A missing key is reported as an
                authentication failure on the first call.
            base_url: API base URL
            api_version: Value of the anthropic-version header
            timeout: Request timeout in seconds
            connection_limits: httpx connection pool limits
            transport: Optional httpx transport (used by tests)
        """
        super().__init__(base_url, timeout, **kwargs)
        self._api_key = api_key
        self.api_version = api_version

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=10,
                max_connections=50,
                keepalive_expiry=30.0
            )
        self._connection_limits = connection_limits
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        if not api_key:
            logger.warning("ANTHROPIC_API_KEY is not set; classification calls will fail")

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the pooled async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                headers={
                    "x-api-key": self._api_key or "",
                    "anthropic-version": self.api_version,
                    "content-type": "application/json",
                },
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    def build_payload(self, request: LLMGenerationRequest) -> Dict[str, Any]:
        """
        Build the Messages API payload:
        {
            "model": "claude-sonnet-4-20250514",
            "max_tokens": 1024,
            "temperature": 0.3,
            "messages": [{"role": "user", "content": "..."}],
            "tools": [{"name": ..., "description": ..., "input_schema": {...}}],
            "tool_choice": {"type": "tool", "name": ...}
        }
        """
        return {
            "model": request.model,
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
            "messages": [{"role": "user", "content": request.prompt}],
            "tools": [
                {
                    "name": request.schema_name,
                    "description": "Record the information extracted from the text.",
                    "input_schema": request.format_schema,
                }
            ],
            "tool_choice": {"type": "tool", "name": request.schema_name},
        }

    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Send one Messages API call and return the forced tool call's input.

        No retries: each call is a single attempt.
        """
        if not self._api_key:
            raise LLMAuthenticationError(
                "Anthropic API key is not configured",
                details={"reason": "missing_api_key"}
            )

        payload = self.build_payload(request)

        logger.info(
            "Sending extraction request to Anthropic",
            model=request.model,
            prompt_length=len(request.prompt),
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        )

        start_time = time.perf_counter()
        try:
            client = await self._get_client()
            response = await client.post(MESSAGES_PATH, json=payload)
        except httpx.TimeoutException as e:
            self._observe_failure(request.model, start_time)
            raise LLMTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"timeout": self.timeout, "error_type": type(e).__name__}
            ) from e
        except httpx.TransportError as e:
            self._observe_failure(request.model, start_time)
            raise LLMConnectionError(
                f"Network error: {e}",
                details={"error_type": type(e).__name__}
            ) from e

        latency_ms = int((time.perf_counter() - start_time) * 1000)

        if response.is_error:
            self._observe_failure(request.model, start_time)
            error = self._error_from_response(response)
            logger.error(
                "Anthropic API error",
                status_code=response.status_code,
                error_class=type(error).__name__,
                provider_error_type=error.details.get("error_type"),
            )
            raise error

        try:
            body = response.json()
        except ValueError as e:
            self._observe_failure(request.model, start_time)
            raise LLMGenerationError(
                "Invalid JSON response from Anthropic",
                details={"parse_error": str(e)}
            ) from e

        data = self._extract_tool_input(body, request.schema_name)

        model_version = body.get("model", request.model)
        usage = body.get("usage") or {}
        prompt_tokens = usage.get("input_tokens")
        completion_tokens = usage.get("output_tokens")

        llm_latency_seconds.labels(model=model_version, success="true").observe(latency_ms / 1000.0)
        if prompt_tokens:
            llm_tokens_total.labels(model=model_version, token_type="prompt").inc(prompt_tokens)
        if completion_tokens:
            llm_tokens_total.labels(model=model_version, token_type="completion").inc(completion_tokens)

        logger.info(
            "Anthropic extraction successful",
            model=model_version,
            latency_ms=latency_ms,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            stop_reason=body.get("stop_reason"),
        )

        return LLMGenerationResponse(
            data=data,
            model_version=model_version,
            finish_reason=body.get("stop_reason") or "unknown",
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            latency_ms=latency_ms,
            request_id=response.headers.get("request-id"),
        )

    @staticmethod
    def _error_from_response(response: httpx.Response) -> LLMClientError:
        """Classify a non-2xx response into an LLMClientError subclass."""
        status_code = response.status_code
        error_type = None
        message = ""
        try:
            error = response.json().get("error") or {}
            error_type = error.get("type")
            message = error.get("message") or ""
        except (ValueError, AttributeError):
            message = response.text[:500]

        details = {"status": status_code, "error_type": error_type, "error": message}

        if status_code == 401 or error_type == "authentication_error":
            return LLMAuthenticationError("Anthropic rejected the API key", details=details)
        if (
            status_code == 402
            or error_type == "billing_error"
            or "credit balance" in message.lower()
        ):
            return LLMQuotaExceededError("Anthropic account quota exhausted", details=details)
        if status_code == 429 or error_type == "rate_limit_error":
            return LLMRateLimitError("Anthropic rate limit exceeded", details=details)
        return LLMGenerationError(f"Anthropic API error: {status_code}", details=details)

    @staticmethod
    def _extract_tool_input(body: Dict[str, Any], tool_name: str) -> Dict[str, Any]:
        """Return the input of the forced tool call from a Messages API reply."""
        for block in body.get("content") or []:
            if block.get("type") == "tool_use" and block.get("name") == tool_name:
                tool_input = block.get("input")
                if not isinstance(tool_input, dict):
                    raise LLMSchemaViolationError(
                        "Tool input is not a JSON object",
                        details={"input_type": type(tool_input).__name__}
                    )
                return tool_input

        raise LLMSchemaViolationError(
            "No structured output in Anthropic response",
            details={
                "stop_reason": body.get("stop_reason"),
                "block_types": [b.get("type") for b in body.get("content") or []],
            }
        )

    @staticmethod
    def _observe_failure(model: str, start_time: float) -> None:
        llm_latency_seconds.labels(model=model, success="false").observe(
            time.perf_counter() - start_time
        )

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed Anthropic client connection")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
