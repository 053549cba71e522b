"""
Validation-specific exceptions.

- InvalidInputError: the client's request body failed validation (HTTP 400)
- SchemaValidationError: the provider's object failed the output schema (HTTP 500)
"""

from typing import Any


class ValidationError(Exception):
    """
    Base exception for all validation errors.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize validation error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(ValidationError):
    """
    The request body is missing `text`, has a non-string `text`, or the
    text is blank. Raised before any provider call. The message is
    returned to the client verbatim.
    """

    def __init__(self, message: str, field: str = "text"):
        super().__init__(message, {"field": field})


class SchemaValidationError(ValidationError):
    """
    The provider's structured object does not conform to the output schema.
    """

    def __init__(
        self,
        message: str,
        validation_errors: list[str] | None = None,
        schema_name: str | None = None
    ):
        """
        Initialize schema validation error.

        Args:
            message: Error description
            validation_errors: List of jsonschema validation error messages
            schema_name: Name of the schema used for validation
        """
        details = {}
        if validation_errors:
            details["validation_errors"] = validation_errors
        if schema_name:
            details["schema_name"] = schema_name

        super().__init__(message, details)
