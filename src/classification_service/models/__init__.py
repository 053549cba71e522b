"""
Pydantic data models for the classification service.

Includes:
- Enums (ProviderErrorKind)
- Input models (ClassificationRequest)
- Output models (ClassificationResult)
- LLM models (LLMGenerationRequest, LLMGenerationResponse)
"""

from classification_service.models.enums import ProviderErrorKind
from classification_service.models.input_models import ClassificationRequest
from classification_service.models.output_models import ClassificationResult
from classification_service.models.llm_models import (
    LLMGenerationRequest,
    LLMGenerationResponse,
)

__all__ = [
    # Enums
    "ProviderErrorKind",
    # Input models
    "ClassificationRequest",
    # Output models
    "ClassificationResult",
    # LLM models
    "LLMGenerationRequest",
    "LLMGenerationResponse",
]
