"""Integration test fixtures (service checks and prerequisites).

Tests against the real Anthropic API are skipped unless
ANTHROPIC_API_KEY is set in the environment.
"""

import os

import httpx
import pytest
from fastapi.testclient import TestClient

from classification_service.llm.anthropic_client import AnthropicClient
from classification_service.main import create_app


@pytest.fixture(scope="session")
def anthropic_api_key() -> str:
    """Real API key, or skip."""
    api_key = os.environ.get("ANTHROPIC_API_KEY")
    if not api_key:
        pytest.skip("ANTHROPIC_API_KEY not set")
    return api_key


@pytest.fixture
def provider_stub(tool_use_response):
    """Programmable stand-in for the Anthropic HTTP API.

    Records every request; replies with `stub.status` / `stub.body`.
    """
    class ProviderStub:
        def __init__(self):
            self.status = 200
            self.body = tool_use_response
            self.requests: list[httpx.Request] = []

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(self.status, json=self.body)

    return ProviderStub()


@pytest.fixture
def make_pipeline_client(test_settings, provider_stub):
    """TestClient wired to a real AnthropicClient over the stub transport."""
    def _make(settings=None, api_key="test-api-key") -> TestClient:
        settings = settings or test_settings
        llm_client = AnthropicClient(
            api_key=api_key,
            base_url=settings.ANTHROPIC_BASE_URL,
            api_version=settings.ANTHROPIC_API_VERSION,
            timeout=settings.ANTHROPIC_TIMEOUT,
            transport=httpx.MockTransport(provider_stub),
        )
        return TestClient(create_app(settings=settings, llm_client=llm_client))

    return _make
