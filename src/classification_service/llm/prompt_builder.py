"""
Prompt builder for extraction requests.

Responsible for:
- Loading and rendering the versioned Jinja2 extraction template
- Constructing the LLMGenerationRequest with the output schema
"""

from pathlib import Path
from typing import Any, Dict, Optional
from jinja2 import Environment, FileSystemLoader
import structlog

from classification_service.models.input_models import ClassificationRequest
from classification_service.models.llm_models import LLMGenerationRequest


logger = structlog.get_logger(__name__)

PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"
PROMPT_VERSION = "extraction_v1"
SCHEMA_NAME = "record_classification"


class PromptBuilder:
    """
    Build provider requests from ClassificationRequest objects.

    The template is a fixed, versioned file shipped with the package;
    it is not configurable at runtime.
    """

    def __init__(
        self,
        json_schema: Dict[str, Any],
        model: str,
        temperature: float = 0.3,
        max_tokens: int = 1024,
        templates_dir: Path = PROMPTS_DIR,
        prompt_version: str = PROMPT_VERSION,
    ):
        """
        Initialize prompt builder.

        Args:
            json_schema: Output schema sent with every request
            model: Provider model identifier
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            templates_dir: Directory containing prompt templates
            prompt_version: Template name without the .txt suffix
        """
        self.json_schema = json_schema
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.prompt_version = prompt_version

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False  # We're generating prompts, not HTML
        )
        self.template = self.jinja_env.get_template(f"{prompt_version}.txt")

        logger.debug(
            "PromptBuilder initialized",
            prompt_version=prompt_version,
            model=model,
            temperature=temperature,
        )

    def build_prompt(self, request: ClassificationRequest) -> str:
        """Render the extraction template around the raw input text."""
        return self.template.render(text=request.text)

    def build_request(
        self,
        request: ClassificationRequest,
        model: Optional[str] = None,
    ) -> LLMGenerationRequest:
        """
        Build the complete LLMGenerationRequest for one classification.

        Args:
            request: Validated classification request
            model: Override the configured model

        Returns:
            LLMGenerationRequest carrying prompt, sampling params and schema
        """
        prompt = self.build_prompt(request)

        logger.debug(
            "Extraction request built",
            prompt_version=self.prompt_version,
            text_length=len(request.text),
            prompt_length=len(prompt),
        )

        return LLMGenerationRequest(
            prompt=prompt,
            model=model or self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            format_schema=self.json_schema,
            schema_name=SCHEMA_NAME,
        )
