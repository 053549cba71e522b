"""
Request validation for POST /classify.

Runs before any provider call. Messages are part of the public contract.
"""

from typing import Any

from classification_service.models.input_models import ClassificationRequest
from classification_service.validation.exceptions import InvalidInputError

TEXT_REQUIRED_MESSAGE = 'Field "text" is required and must be a string'
TEXT_EMPTY_MESSAGE = "Text cannot be empty"


def parse_classification_request(payload: Any) -> ClassificationRequest:
    """
    Validate a decoded JSON body and build a ClassificationRequest.

    Args:
        payload: Decoded request body (any JSON value)

    Returns:
        ClassificationRequest with the original, untrimmed text

    Raises:
        InvalidInputError: `text` missing or not a string, or blank after trimming
    """
    text = payload.get("text") if isinstance(payload, dict) else None

    if not isinstance(text, str):
        raise InvalidInputError(TEXT_REQUIRED_MESSAGE)

    if not text.strip():
        raise InvalidInputError(TEXT_EMPTY_MESSAGE)

    return ClassificationRequest(text=text)
