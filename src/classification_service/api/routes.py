"""
HTTP routes: POST /classify, GET /health, GET /.
"""

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, status

from classification_service.api.dependencies import get_classifier, get_settings
from classification_service.api.models import ErrorResponse, HealthResponse
from classification_service.classifier import Classifier
from classification_service.config import Settings
from classification_service.llm.exceptions import LLMClientError
from classification_service.models.output_models import ClassificationResult
from classification_service.monitoring.metrics import (
    classification_requests_total,
    llm_errors_total,
)
from classification_service.validation.exceptions import (
    InvalidInputError,
    SchemaValidationError,
)
from classification_service.validation.request import parse_classification_request

logger = structlog.get_logger(__name__)

router = APIRouter()


def build_service_description(settings: Settings) -> dict[str, Any]:
    """Static description of the HTTP surface served at GET /."""
    endpoints: dict[str, Any] = {
        "/classify": {
            "method": "POST",
            "description": "Classifies text and extracts structured information",
            "body": {"text": "string (required)"},
            "response": {
                "zip": "string | null",
                "brand": "string | null",
                "category": "string | null",
                "time_pref": "string | null",
            },
            "errors": {"error": "string", "message": "string (non-production only)"},
        },
        "/health": {
            "method": "GET",
            "description": "Service health check",
            "response": {"status": "ok", "timestamp": "ISO-8601 string"},
        },
    }
    if settings.PROMETHEUS_ENABLED:
        endpoints["/metrics"] = {
            "method": "GET",
            "description": "Prometheus metrics",
        }

    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "endpoints": endpoints,
    }


@router.post(
    "/classify",
    response_model=ClassificationResult,
    status_code=status.HTTP_200_OK,
    summary="Extract zip, brand, category and time preference from text",
    responses={
        400: {"model": ErrorResponse, "description": "Missing, non-string or empty text"},
        401: {"model": ErrorResponse, "description": "Provider rejected the API key"},
        402: {"model": ErrorResponse, "description": "Provider quota or billing exhausted"},
        429: {"model": ErrorResponse, "description": "Provider rate limit exceeded"},
        500: {"model": ErrorResponse, "description": "Schema validation or internal failure"},
    },
)
async def classify_text(
    payload: Any = Body(default=None, examples=[{"text": "Order Domino's pizza to 90210 tomorrow evening"}]),
    classifier: Classifier = Depends(get_classifier),
) -> ClassificationResult:
    """
    Classify free text into the four extraction fields.

    The body is validated before any provider call; validation errors,
    provider errors and schema failures are turned into responses by the
    registered exception handlers.
    """
    try:
        request = parse_classification_request(payload)
        result = await classifier.classify(request)
    except InvalidInputError:
        classification_requests_total.labels(status="invalid_input").inc()
        raise
    except LLMClientError as exc:
        classification_requests_total.labels(status=exc.kind.value).inc()
        llm_errors_total.labels(kind=exc.kind.value).inc()
        raise
    except SchemaValidationError:
        classification_requests_total.labels(status="schema_validation").inc()
        raise

    classification_requests_total.labels(status="success").inc()
    return result


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service liveness check",
)
async def health_check() -> HealthResponse:
    """
    Report process liveness. Does not contact the LLM provider.
    """
    return HealthResponse()


@router.get("/", summary="Service documentation")
async def root(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Root endpoint describing the available operations."""
    return build_service_description(settings)
