"""
Classification orchestrator.

prompt -> single provider call -> schema validation -> ClassificationResult.
Exactly one provider call per request; no retries.
"""

import time

import structlog

from classification_service.llm.base_client import BaseLLMClient
from classification_service.llm.exceptions import LLMClientError, LLMGenerationError
from classification_service.llm.prompt_builder import PromptBuilder
from classification_service.models.input_models import ClassificationRequest
from classification_service.models.output_models import ClassificationResult
from classification_service.validation.exceptions import ValidationError
from classification_service.validation.schema import SchemaValidator

logger = structlog.get_logger(__name__)


class Classifier:
    """
    Run one classification against the injected provider client.

    Lightweight and stateless; built per request from process-scoped
    components (client, prompt builder, validator).
    """

    def __init__(
        self,
        llm_client: BaseLLMClient,
        prompt_builder: PromptBuilder,
        validator: SchemaValidator,
    ):
        self.llm_client = llm_client
        self.prompt_builder = prompt_builder
        self.validator = validator

    async def classify(self, request: ClassificationRequest) -> ClassificationResult:
        """
        Extract zip, brand, category and time_pref from the request text.

        Raises:
            LLMClientError: Provider failure (kind tells which)
            SchemaValidationError: Provider output did not match the schema
        """
        start_time = time.perf_counter()

        try:
            llm_request = self.prompt_builder.build_request(request)
            llm_response = await self.llm_client.generate(llm_request)
            result = self.validator.validate(llm_response.data)
        except (LLMClientError, ValidationError):
            raise
        except Exception as e:
            raise LLMGenerationError(
                f"Unexpected error: {e}",
                details={"error_type": type(e).__name__}
            ) from e

        logger.info(
            "Classification completed",
            model=llm_response.model_version,
            duration_ms=int((time.perf_counter() - start_time) * 1000),
            fields_found=[name for name, value in result.model_dump().items() if value is not None],
        )
        return result
