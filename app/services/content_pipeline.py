"""
Content Pipeline
Prompt -> generator -> sanitize/normalize -> schema validation
"""
from enum import Enum
from typing import Any, Dict, Optional

from ..config import (
    SYSTEM_PROMPT,
    SEO_TITLE_MAX_LENGTH,
    SEO_DESCRIPTION_MAX_LENGTH,
    TAGS_MAX,
    SUGGESTIONS_MAX,
    PRODUCT_TITLE_MAX_LENGTH,
)
from ..errors import GeneratorError
from ..models import GeneratedContent, OptimizeRequest
from ..schemas import GENERATED_CONTENT_JSON_SCHEMA, GENERATED_CONTENT_SCHEMA
from ..utils.normalisers import clamp, clean_list, dedupe_lower
from ..utils.sanitizers import sanitize_html
from ..utils.validators import SchemaValidationError
from .generator import TextGenerator
from .prompts import build_user_prompt


class PipelineState(str, Enum):
    IDLE = "idle"
    PROMPT_BUILT = "prompt_built"
    GENERATOR_INVOKED = "generator_invoked"
    GENERATOR_FAILED = "generator_failed"
    SANITIZED = "sanitized"
    VALIDATED_OK = "validated_ok"
    VALIDATED_FAILED = "validated_failed"


def reshape_generated(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Repair generator output before validation
    Args:
        raw: JSON object returned by the generator
    Returns:
        Copy of raw with every content field sanitized, clamped or deduplicated
    """
    reshaped = dict(raw)

    reshaped["descriptionHtml"] = sanitize_html(_as_text(raw.get("descriptionHtml")))
    reshaped["seoTitle"] = clamp(_as_text(raw.get("seoTitle")), SEO_TITLE_MAX_LENGTH)
    reshaped["seoDescription"] = clamp(_as_text(raw.get("seoDescription")), SEO_DESCRIPTION_MAX_LENGTH)
    reshaped["tags"] = dedupe_lower(raw.get("tags"), TAGS_MAX)
    reshaped["hashtags"] = dedupe_lower(raw.get("hashtags"), TAGS_MAX)
    reshaped["mockupSuggestions"] = clean_list(raw.get("mockupSuggestions"), SUGGESTIONS_MAX)
    reshaped["socialIdeas"] = clean_list(raw.get("socialIdeas"), SUGGESTIONS_MAX)

    product_title = raw.get("productTitle")
    if isinstance(product_title, str) and product_title.strip():
        reshaped["productTitle"] = clamp(product_title.strip(), PRODUCT_TITLE_MAX_LENGTH)
    else:
        reshaped.pop("productTitle", None)

    return reshaped


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


class ContentPipeline:
    """
    Single-use pipeline for one optimize request

    Holds no shared state; the schema and allow-list it uses are module constants.
    """

    def __init__(self, generator: TextGenerator):
        self.generator = generator
        self.state = PipelineState.IDLE
        self.prompt: Optional[str] = None

    async def run(self, product: OptimizeRequest) -> GeneratedContent:
        """
        Generate and validate content for one product
        Args:
            product: Merchant-supplied product fields
        Returns:
            Validated generated content
        Raises:
            GeneratorError: If the generator fails or returns unusable content
            SchemaValidationError: If the repaired output still violates the schema
            RuntimeError: If this pipeline has already run
        """
        if self.state is not PipelineState.IDLE:
            raise RuntimeError(f"Pipeline already used (state: {self.state.value})")

        self.prompt = build_user_prompt(product)
        self.state = PipelineState.PROMPT_BUILT

        try:
            raw = await self.generator.generate(SYSTEM_PROMPT, self.prompt, GENERATED_CONTENT_JSON_SCHEMA)
        except GeneratorError:
            self.state = PipelineState.GENERATOR_FAILED
            raise
        if not isinstance(raw, dict):
            self.state = PipelineState.GENERATOR_FAILED
            raise GeneratorError("Generator returned a non-object response")
        self.state = PipelineState.GENERATOR_INVOKED

        reshaped = reshape_generated(raw)
        self.state = PipelineState.SANITIZED

        try:
            parsed = GENERATED_CONTENT_SCHEMA.parse(reshaped)
        except SchemaValidationError:
            self.state = PipelineState.VALIDATED_FAILED
            raise

        self.state = PipelineState.VALIDATED_OK
        return GeneratedContent(**parsed)
