"""Unit tests for PromptBuilder."""

import pytest

from classification_service.llm.prompt_builder import PROMPT_VERSION, SCHEMA_NAME, PromptBuilder
from classification_service.models.input_models import ClassificationRequest
from classification_service.validation.schema import load_output_schema


@pytest.fixture
def builder() -> PromptBuilder:
    return PromptBuilder(
        json_schema=load_output_schema(),
        model="claude-sonnet-4-20250514",
        temperature=0.3,
        max_tokens=1024,
    )


def test_prompt_lists_extraction_targets(builder, dominos_request):
    prompt = builder.build_prompt(dominos_request)

    for target in ("ZIP CODE", "BRAND", "CATEGORY", "TIME PREFERENCE"):
        assert target in prompt
    assert "Return null for any field where no clear information exists" in prompt
    assert "Respond in the same language as the user's input text" in prompt


def test_prompt_ends_with_raw_text(builder, dominos_request):
    prompt = builder.build_prompt(dominos_request)

    assert prompt.endswith("TEXT TO ANALYZE: Order Domino's pizza to 90210 tomorrow evening")


def test_text_is_not_rendered_as_template(builder):
    request = ClassificationRequest(text="{{ 7 * 7 }} {% if x %}y{% endif %}")

    prompt = builder.build_prompt(request)

    assert prompt.endswith("TEXT TO ANALYZE: {{ 7 * 7 }} {% if x %}y{% endif %}")


def test_text_is_not_trimmed(builder):
    request = ClassificationRequest(text="  Nike  ")

    assert builder.build_prompt(request).endswith("TEXT TO ANALYZE:   Nike  ")


def test_build_request(builder, dominos_request):
    llm_request = builder.build_request(dominos_request)

    assert llm_request.model == "claude-sonnet-4-20250514"
    assert llm_request.temperature == 0.3
    assert llm_request.max_tokens == 1024
    assert llm_request.schema_name == SCHEMA_NAME
    assert llm_request.format_schema["required"] == ["zip", "brand", "category", "time_pref"]
    assert llm_request.prompt == builder.build_prompt(dominos_request)


def test_build_request_model_override(builder, dominos_request):
    llm_request = builder.build_request(dominos_request, model="claude-3-5-haiku-latest")

    assert llm_request.model == "claude-3-5-haiku-latest"


def test_default_prompt_version(builder):
    assert builder.prompt_version == PROMPT_VERSION == "extraction_v1"
