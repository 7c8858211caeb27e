"""
Text Generation Service
OpenAI chat completions constrained to a JSON schema
"""
import json
import logging
import re
from typing import Any, Dict, Optional, Protocol

from openai import AsyncOpenAI, OpenAIError

from ..config import OPENAI_MODEL, OPENAI_TIMEOUT
from ..errors import GeneratorError, MissingCredentialError

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, system: str, user: str, schema: Dict[str, Any]) -> Dict[str, Any]:
        """Return the parsed JSON object, or raise GeneratorError"""
        ...


def parse_json_from_model(content: str) -> Dict[str, Any]:
    """
    Extract a JSON object from model response, handling code fences
    Args:
        content: Raw message content
    Returns:
        Parsed JSON object
    Raises:
        GeneratorError: If the content is not a JSON object
    """
    body = (content or '').strip()

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        # Handle ```json ... ``` or ``` ... ``` fences wrapping the whole body
        fence_match = re.match(r'^```(?:json)?\s*([\s\S]*?)\s*```$', body, re.IGNORECASE)
        if not fence_match:
            raise GeneratorError(f"Failed to parse OpenAI JSON response: {e}") from e
        try:
            data = json.loads(fence_match.group(1))
        except json.JSONDecodeError as fenced_error:
            raise GeneratorError(f"Failed to parse OpenAI JSON response: {fenced_error}") from fenced_error

    if not isinstance(data, dict):
        raise GeneratorError("OpenAI response is not a JSON object")

    return data


class OpenAIGenerator:
    """Generates structured content with a single chat completion, no retries"""

    def __init__(
        self,
        api_key: str,
        model: str = OPENAI_MODEL,
        timeout: float = OPENAI_TIMEOUT,
        client: Optional[AsyncOpenAI] = None,
    ):
        if not api_key and client is None:
            raise MissingCredentialError("OPENAI_API_KEY")

        self.model = model
        self.timeout = timeout
        self.client = client or AsyncOpenAI(api_key=api_key)

    async def generate(self, system: str, user: str, schema: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"Requesting generation from {self.model}")

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user}
                ],
                response_format={
                    "type": "json_schema",
                    "json_schema": {"name": "generated_content", "schema": schema},
                },
                timeout=float(self.timeout)
            )
        except OpenAIError as e:
            logger.error(f"OpenAI request failed: {e}")
            raise GeneratorError(f"OpenAI request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise GeneratorError("OpenAI response missing content")

        return parse_json_from_model(content)
