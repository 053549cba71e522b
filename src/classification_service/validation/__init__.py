"""
Validation for the classification pipeline.

- request.py: inbound body validation (before any provider call)
- schema.py: provider output validation against the JSON Schema
- exceptions.py: InvalidInputError, SchemaValidationError
"""

from classification_service.validation.exceptions import (
    InvalidInputError,
    SchemaValidationError,
    ValidationError,
)
from classification_service.validation.request import (
    TEXT_EMPTY_MESSAGE,
    TEXT_REQUIRED_MESSAGE,
    parse_classification_request,
)
from classification_service.validation.schema import SchemaValidator, load_output_schema

__all__ = [
    "InvalidInputError",
    "SchemaValidationError",
    "ValidationError",
    "TEXT_EMPTY_MESSAGE",
    "TEXT_REQUIRED_MESSAGE",
    "parse_classification_request",
    "SchemaValidator",
    "load_output_schema",
]
