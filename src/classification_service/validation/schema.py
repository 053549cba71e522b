"""
Output schema validation.

Checks the provider's structured object against classification_v1.json
before it becomes a ClassificationResult. The provider call already
enforces the schema; this is the second line that guarantees the response
contract even if enforcement is bypassed.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator
from pydantic import ValidationError as PydanticValidationError

from classification_service.models.output_models import ClassificationResult
from classification_service.validation.exceptions import SchemaValidationError

logger = logging.getLogger(__name__)

SCHEMAS_DIR = Path(__file__).resolve().parent.parent / "schemas"
SCHEMA_VERSION = "classification_v1"


@lru_cache()
def load_output_schema(schema_version: str = SCHEMA_VERSION) -> dict:
    """
    Load and cache the output JSON Schema shipped with the package.

    Args:
        schema_version: Schema file name without the .json suffix

    Returns:
        Schema dict
    """
    schema_file = SCHEMAS_DIR / f"{schema_version}.json"
    with open(schema_file, "r", encoding="utf-8") as f:
        schema = json.load(f)
    Draft7Validator.check_schema(schema)
    logger.info(f"Loaded output schema {schema_version}")
    return schema


class SchemaValidator:
    """
    Validate provider output and convert it to ClassificationResult.

    Raises SchemaValidationError on any violation.
    """

    def __init__(self, schema: dict | None = None, schema_name: str = SCHEMA_VERSION):
        self.schema = schema if schema is not None else load_output_schema(schema_name)
        self.schema_name = schema_name
        self._validator = Draft7Validator(self.schema)

    def validate(self, data: Any) -> ClassificationResult:
        """
        Validate data against the output schema.

        Args:
            data: Structured object returned by the provider

        Returns:
            ClassificationResult built from the validated data

        Raises:
            SchemaValidationError: If data doesn't conform to schema
        """
        errors = list(self._validator.iter_errors(data))

        if errors:
            error_messages = []
            for error in errors[:10]:  # Limit to first 10 errors
                path = ".".join(str(p) for p in error.path) if error.path else "root"
                error_messages.append(f"{path}: {error.message}")

            raise SchemaValidationError(
                f"Output schema validation failed with {len(errors)} error(s)",
                validation_errors=error_messages,
                schema_name=self.schema_name
            )

        try:
            return ClassificationResult(**data)
        except PydanticValidationError as e:
            raise SchemaValidationError(
                "Output does not match ClassificationResult",
                validation_errors=[err["msg"] for err in e.errors()],
                schema_name=self.schema_name
            ) from e
