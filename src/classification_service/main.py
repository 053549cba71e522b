"""
FastAPI application entry point for the Text Classification Service.
"""

from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from classification_service.api.dependencies import build_llm_client, build_prompt_builder
from classification_service.api.error_handlers import EXCEPTION_HANDLERS
from classification_service.api.middleware import RequestTracingMiddleware
from classification_service.api.routes import router
from classification_service.config import Settings, settings as default_settings
from classification_service.llm.base_client import BaseLLMClient
from classification_service.logging_config import configure_logging
from classification_service.validation.schema import SchemaValidator

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    llm_client: Optional[BaseLLMClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The LLM client is constructed once here (unless one is supplied) and
    shared by every request through `app.state`.

    Args:
        settings: Application settings (defaults to the global instance)
        llm_client: Provider client override, e.g. a mock in tests

    Returns:
        Configured FastAPI app
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Extracts zip, brand, category and time preference from free text",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    validator = SchemaValidator()
    app.state.settings = settings
    app.state.schema_validator = validator
    app.state.prompt_builder = build_prompt_builder(settings, validator)
    app.state.llm_client = llm_client or build_llm_client(settings)

    app.add_middleware(RequestTracingMiddleware)

    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)

    app.include_router(router)

    @app.on_event("startup")
    async def startup():
        base_url = f"http://localhost:{settings.PORT}"
        logger.info(
            "Application startup",
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
            model=settings.ANTHROPIC_MODEL,
            server=base_url,
            documentation=f"{base_url}/",
            endpoint=f"POST {base_url}/classify",
        )
        if not settings.ANTHROPIC_API_KEY:
            logger.warning("ANTHROPIC_API_KEY is not set; /classify will return 401")

    @app.on_event("shutdown")
    async def shutdown():
        await app.state.llm_client.close()
        logger.info("Application shutdown complete")

    if settings.PROMETHEUS_ENABLED:
        Instrumentator().instrument(app).expose(app)

    return app


app = create_app()


def run() -> None:
    """Console script entry point."""
    uvicorn.run(
        "classification_service.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_config=None,  # Logging is configured by configure_logging
    )


if __name__ == "__main__":
    run()
