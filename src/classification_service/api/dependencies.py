"""
FastAPI dependency injection for the classification service.

Process-scoped components (settings, LLM client, prompt builder, schema
validator) are built once by `create_app()` and stored on `app.state`;
these dependencies hand them to route handlers. Tests swap the client by
passing their own to `create_app()`.
"""

from fastapi import Depends, Request

from classification_service.classifier import Classifier
from classification_service.config import Settings
from classification_service.llm.anthropic_client import AnthropicClient
from classification_service.llm.base_client import BaseLLMClient
from classification_service.llm.prompt_builder import PromptBuilder
from classification_service.validation.schema import SchemaValidator


def build_llm_client(settings: Settings) -> BaseLLMClient:
    """
    Construct the provider client from settings.

    Args:
        settings: Application settings

    Returns:
        AnthropicClient instance
    """
    return AnthropicClient(
        api_key=settings.ANTHROPIC_API_KEY,
        base_url=settings.ANTHROPIC_BASE_URL,
        api_version=settings.ANTHROPIC_API_VERSION,
        timeout=settings.ANTHROPIC_TIMEOUT,
    )


def build_prompt_builder(settings: Settings, validator: SchemaValidator) -> PromptBuilder:
    """Construct the prompt builder around the validator's schema."""
    return PromptBuilder(
        json_schema=validator.schema,
        model=settings.ANTHROPIC_MODEL,
        temperature=settings.LLM_TEMPERATURE,
        max_tokens=settings.LLM_MAX_TOKENS,
    )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_llm_client(request: Request) -> BaseLLMClient:
    return request.app.state.llm_client


def get_prompt_builder(request: Request) -> PromptBuilder:
    return request.app.state.prompt_builder


def get_schema_validator(request: Request) -> SchemaValidator:
    return request.app.state.schema_validator


def get_classifier(
    llm_client: BaseLLMClient = Depends(get_llm_client),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder),
    validator: SchemaValidator = Depends(get_schema_validator),
) -> Classifier:
    """
    Create classifier with injected dependencies.

    Note: Classifier is NOT cached because it's lightweight and stateless.
    All heavy resources (client, builder, validator) are process-scoped.
    """
    return Classifier(
        llm_client=llm_client,
        prompt_builder=prompt_builder,
        validator=validator,
    )
