"""
FastAPI exception handlers for structured error responses.

Every failure becomes `{"error": ..., "message"?: ...}`. `message` carries
internal detail and is only added outside production.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from classification_service.api.middleware import REQUEST_ID_HEADER
from classification_service.llm.exceptions import LLMClientError
from classification_service.models.enums import ProviderErrorKind
from classification_service.validation.exceptions import (
    InvalidInputError,
    SchemaValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"
SCHEMA_ERROR = "Schema validation failed"

# ProviderErrorKind -> (HTTP status, client-facing error text)
PROVIDER_ERROR_RESPONSES: dict[ProviderErrorKind, tuple[int, str]] = {
    ProviderErrorKind.AUTHENTICATION: (status.HTTP_401_UNAUTHORIZED, "Invalid Anthropic API key"),
    ProviderErrorKind.RATE_LIMIT: (status.HTTP_429_TOO_MANY_REQUESTS, "Rate limit exceeded"),
    ProviderErrorKind.QUOTA_EXCEEDED: (status.HTTP_402_PAYMENT_REQUIRED, "Quota exceeded"),
    ProviderErrorKind.SCHEMA_VIOLATION: (status.HTTP_500_INTERNAL_SERVER_ERROR, SCHEMA_ERROR),
    ProviderErrorKind.CONNECTION: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR),
    ProviderErrorKind.TIMEOUT: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR),
    ProviderErrorKind.GENERATION: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR),
}


def _expose_details(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.expose_error_details)


def error_response(
    request: Request, status_code: int, error: str, detail: str | None = None
) -> JSONResponse:
    """
    Build the error body, dropping `detail` in production.

    Args:
        request: FastAPI request (used to reach app settings)
        status_code: HTTP status
        error: Client-facing error text
        detail: Internal detail for the `message` field
    """
    content = {"error": error}
    if detail is not None and _expose_details(request):
        content["message"] = detail
    return JSONResponse(status_code=status_code, content=content)


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    """
    Handle request body validation failures.

    Maps to 400 Bad Request; the validation message is the error text.
    """
    logger.warning(
        "Invalid classification input",
        extra={"error_type": type(exc).__name__, "reason": exc.message},
    )
    return error_response(request, status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle bodies FastAPI could not decode (malformed JSON).

    Maps to 400 Bad Request (client error).
    """
    logger.warning(
        "Malformed request body",
        extra={"errors": [err.get("type") for err in exc.errors()]},
    )
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Invalid request body",
        detail="; ".join(str(err.get("msg")) for err in exc.errors()),
    )


async def llm_client_error_handler(request: Request, exc: LLMClientError) -> JSONResponse:
    """
    Handle provider failures by their ProviderErrorKind.

    401 authentication, 429 rate limit, 402 quota, 500 for everything else.
    """
    status_code, error = PROVIDER_ERROR_RESPONSES.get(
        exc.kind, (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    )
    logger.error(
        "LLM provider error",
        extra={
            "error_kind": exc.kind.value,
            "error_type": type(exc).__name__,
            "status_code": status_code,
            "provider_status": exc.details.get("status"),
        },
    )
    return error_response(request, status_code, error, detail=exc.message)


async def schema_validation_error_handler(
    request: Request, exc: SchemaValidationError
) -> JSONResponse:
    """
    Handle provider output that failed the output schema.

    Maps to 500 Internal Server Error.
    """
    logger.error(
        "Provider output failed schema validation",
        extra={"details": exc.details},
    )
    return error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, SCHEMA_ERROR, detail=str(exc)
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error. Runs in ServerErrorMiddleware, outside
    RequestTracingMiddleware, so the request id header is set here.
    """
    request_id = getattr(request.state, "request_id", None)
    logger.exception(
        "Unexpected error",
        extra={"error_type": type(exc).__name__, "request_id": request_id},
    )
    response = error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR, detail=str(exc)
    )
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    return response


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    InvalidInputError: invalid_input_handler,
    RequestValidationError: request_validation_error_handler,
    LLMClientError: llm_client_error_handler,
    SchemaValidationError: schema_validation_error_handler,
    Exception: generic_error_handler,
}
