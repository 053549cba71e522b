"""Shared test fixtures and configuration for all tests."""

import json
import pytest
from pathlib import Path
from typing import Any, Dict

from classification_service.config import Settings
from classification_service.models.input_models import ClassificationRequest


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Development environment so error responses carry `message`.
    """
    return Settings(
        APP_NAME="Text Classification API",
        APP_VERSION="1.0.0",
        ENVIRONMENT="development",
        LOG_LEVEL="DEBUG",
        ANTHROPIC_API_KEY="test-api-key",
        ANTHROPIC_BASE_URL="https://api.anthropic.test",
        ANTHROPIC_MODEL="claude-sonnet-4-20250514",
        ANTHROPIC_TIMEOUT=5,
        PROMETHEUS_ENABLED=False,  # Metrics endpoint registers global collectors
    )


@pytest.fixture
def production_settings(test_settings: Settings) -> Settings:
    """Same as test_settings but running in production mode."""
    return test_settings.model_copy(update={"ENVIRONMENT": "production"})


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def tool_use_response(fixtures_dir: Path) -> Dict[str, Any]:
    """Anthropic Messages API reply with a forced tool call."""
    with open(fixtures_dir / "anthropic_tool_use_response.json") as f:
        return json.load(f)


@pytest.fixture
def error_responses(fixtures_dir: Path) -> Dict[str, Any]:
    """Anthropic error replies keyed by failure kind."""
    with open(fixtures_dir / "anthropic_error_responses.json") as f:
        return json.load(f)


@pytest.fixture
def dominos_extraction() -> Dict[str, Any]:
    return {
        "zip": "90210",
        "brand": "Domino's",
        "category": "food",
        "time_pref": "tomorrow evening",
    }


@pytest.fixture
def empty_extraction() -> Dict[str, Any]:
    return {"zip": None, "brand": None, "category": None, "time_pref": None}


@pytest.fixture
def dominos_request() -> ClassificationRequest:
    return ClassificationRequest(text="Order Domino's pizza to 90210 tomorrow evening")
