"""
LLM-specific data models for request/response cycle.

These models are internal to the LLM layer. They are separate from the
business models (ClassificationResult) so the provider client can be
swapped without touching the endpoint.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict


class LLMGenerationRequest(BaseModel):
    """
    Provider-agnostic request for a schema-constrained generation.
    """
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., description="Complete prompt (instructions + input text)")
    model: str = Field(..., description="Model identifier (e.g., 'claude-sonnet-4-20250514')")
    temperature: float = Field(default=0.3, ge=0.0, le=1.0, description="Sampling temperature")
    max_tokens: int = Field(default=1024, ge=1, le=8192, description="Maximum tokens to generate")
    format_schema: Dict[str, Any] = Field(
        ...,
        description="JSON Schema the structured output must conform to"
    )
    schema_name: str = Field(
        default="structured_output",
        description="Name under which the schema is presented to the provider"
    )


class LLMGenerationResponse(BaseModel):
    """
    Structured object returned by the provider plus metadata for logging.
    """
    model_config = ConfigDict(frozen=True)

    data: Dict[str, Any] = Field(..., description="Structured output, not yet validated")
    model_version: str = Field(..., description="Model that actually served the request")
    finish_reason: str = Field(..., description="Why generation stopped (provider stop_reason)")
    prompt_tokens: Optional[int] = Field(default=None, description="Tokens in prompt")
    completion_tokens: Optional[int] = Field(default=None, description="Tokens in completion")
    latency_ms: int = Field(..., ge=0, description="Generation latency in milliseconds")
    request_id: Optional[str] = Field(default=None, description="Provider request id, if returned")
