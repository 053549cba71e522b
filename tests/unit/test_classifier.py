"""Unit tests for the Classifier orchestrator."""

import pytest

from classification_service.classifier import Classifier
from classification_service.llm.exceptions import LLMGenerationError, LLMRateLimitError
from classification_service.llm.prompt_builder import PromptBuilder
from classification_service.models.output_models import ClassificationResult
from classification_service.validation.exceptions import SchemaValidationError
from classification_service.validation.schema import SchemaValidator


@pytest.fixture
def classifier(mock_llm_client) -> Classifier:
    validator = SchemaValidator()
    builder = PromptBuilder(json_schema=validator.schema, model="claude-sonnet-4-20250514")
    return Classifier(llm_client=mock_llm_client, prompt_builder=builder, validator=validator)


@pytest.mark.asyncio
async def test_classify_returns_result(classifier, dominos_request, dominos_extraction):
    result = await classifier.classify(dominos_request)

    assert isinstance(result, ClassificationResult)
    assert result.model_dump() == dominos_extraction


@pytest.mark.asyncio
async def test_classify_sends_built_request(classifier, mock_llm_client, dominos_request):
    await classifier.classify(dominos_request)

    llm_request = mock_llm_client.generate.await_args.args[0]
    assert dominos_request.text in llm_request.prompt
    assert llm_request.format_schema == classifier.validator.schema
    assert llm_request.format_schema["additionalProperties"] is False


@pytest.mark.asyncio
async def test_provider_errors_propagate_unchanged(classifier, mock_llm_client, dominos_request):
    error = LLMRateLimitError("slow down")
    mock_llm_client.generate.side_effect = error

    with pytest.raises(LLMRateLimitError) as exc_info:
        await classifier.classify(dominos_request)

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_schema_errors_propagate(
    classifier, mock_llm_client, dominos_request, make_llm_response
):
    mock_llm_client.generate.return_value = make_llm_response({"zip": "90210"})

    with pytest.raises(SchemaValidationError):
        await classifier.classify(dominos_request)


@pytest.mark.asyncio
async def test_unexpected_errors_become_generation_errors(
    classifier, mock_llm_client, dominos_request
):
    mock_llm_client.generate.side_effect = KeyError("content")

    with pytest.raises(LLMGenerationError) as exc_info:
        await classifier.classify(dominos_request)

    assert exc_info.value.details["error_type"] == "KeyError"
    assert isinstance(exc_info.value.__cause__, KeyError)
