"""
FastAPI API routes and endpoints.

- routes.py: POST /classify, GET /health, GET /
- dependencies.py: Dependency injection for the LLM client and classifier
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request id tracing
"""

from classification_service.api import dependencies, error_handlers, models
from classification_service.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
