"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without external dependencies.
"""

import pytest
from unittest.mock import AsyncMock, Mock

from fastapi.testclient import TestClient

from classification_service.llm.base_client import BaseLLMClient
from classification_service.main import create_app
from classification_service.models.llm_models import LLMGenerationResponse


def _llm_response(data: dict) -> LLMGenerationResponse:
    return LLMGenerationResponse(
        data=data,
        model_version="claude-sonnet-4-20250514",
        finish_reason="tool_use",
        prompt_tokens=600,
        completion_tokens=70,
        latency_ms=900,
    )


@pytest.fixture
def make_llm_response():
    """Factory fixture wrapping an extraction dict in LLMGenerationResponse."""
    return _llm_response


@pytest.fixture
def mock_llm_client(dominos_extraction):
    """Mock provider client returning the Domino's extraction."""
    mock = Mock(spec=BaseLLMClient)
    mock.generate = AsyncMock(return_value=_llm_response(dominos_extraction))
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def make_test_client(test_settings, mock_llm_client):
    """Factory fixture building a TestClient around a mocked provider client.

    Usage:
        def test_something(make_test_client):
            client = make_test_client(settings=production_settings)
    """
    def _make(settings=None, llm_client=None) -> TestClient:
        app = create_app(
            settings=settings or test_settings,
            llm_client=llm_client or mock_llm_client,
        )
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_test_client) -> TestClient:
    """TestClient in development mode with the default mock provider."""
    return make_test_client()
