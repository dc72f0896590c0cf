"""Gemini client that turns an image into a descriptive prompt.

The client is deliberately thin: one ``generate_content`` round trip per call,
with the outcome classified into the :class:`~imageprompt.core.exceptions.GenerationError`
taxonomy. It holds no per-call state, so a single instance is shared by every
UI session.

Usage Example
-------------
    from imageprompt.core.config import config
    from imageprompt.core.prompt_client import PromptGenerationClient

    client = PromptGenerationClient.from_config(config)
    prompt = await client.generate(image_base64, "image/png")
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Protocol

from google import genai
from google.genai import types

from .config import DEFAULT_MODEL_ID, ImagePromptConfig, require_api_key
from .exceptions import (
    GenerationEmptyResponseError,
    GenerationServiceError,
    GenerationUnknownError,
)

logger = logging.getLogger(__name__)

PROMPT_INSTRUCTION = (
    "You are an expert at writing detailed, descriptive, and artistic prompts for "
    "generative AI image models. Describe the following image in a way that captures "
    "its essence, style, and key elements to be used as a prompt. Focus on visual "
    "details: composition, colors, lighting, subject matter, and mood. "
    "Be concise but evocative."
)


class PromptGenerator(Protocol):
    """Anything the interaction controller can ask for a prompt."""

    async def generate(self, image_base64: str, media_type: str) -> str: ...


class PromptGenerationClient:
    """Async wrapper around the Gemini ``generate_content`` call.

    Args:
        api_key: Gemini API key
        model_id: Gemini model identifier
        client: Pre-built ``genai.Client`` (tests inject a mock here)
    """

    def __init__(
        self,
        api_key: str | None = None,
        model_id: str = DEFAULT_MODEL_ID,
        client: Any | None = None,
    ):
        if client is None:
            client = genai.Client(api_key=api_key)
        self._client = client
        self.model_id = model_id

    @classmethod
    def from_config(cls, settings: ImagePromptConfig) -> PromptGenerationClient:
        """Build the process-wide client from configuration.

        Raises:
            ConfigurationError: If API_KEY is not configured
        """
        api_key = require_api_key(settings)
        logger.info(f"Creating Gemini client for model {settings.model_id}")
        return cls(api_key=api_key, model_id=settings.model_id)

    def build_contents(self, image_base64: str, media_type: str) -> list[types.Part]:
        """Build the image part followed by the fixed instruction part."""
        image_part = types.Part.from_bytes(
            data=base64.b64decode(image_base64),
            mime_type=media_type,
        )
        text_part = types.Part.from_text(text=PROMPT_INSTRUCTION)
        return [image_part, text_part]

    async def generate(self, image_base64: str, media_type: str) -> str:
        """Generate a descriptive prompt for an image.

        Args:
            image_base64: Base64-encoded image bytes
            media_type: Declared media type of the image (e.g. "image/png")

        Returns:
            The generated prompt with surrounding whitespace removed

        Raises:
            GenerationEmptyResponseError: If the response has no text
            GenerationServiceError: If the request fails with a described error
            GenerationUnknownError: If the request fails without any description
        """
        try:
            contents = self.build_contents(image_base64, media_type)
            response = await self._client.aio.models.generate_content(
                model=self.model_id,
                contents=contents,
            )
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e!r}")
            detail = str(e).strip()
            if not detail:
                raise GenerationUnknownError() from e
            raise GenerationServiceError(detail) from e

        text = getattr(response, "text", None) if response is not None else None
        if not isinstance(text, str) or not text.strip():
            logger.warning("Gemini API returned an empty or invalid response")
            raise GenerationEmptyResponseError()

        prompt = text.strip()
        logger.info(f"Generated prompt ({len(prompt)} characters)")
        return prompt
