"""Core functionality for image-to-prompt generation.

- **ImagePromptConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)
- **PromptGenerationClient**: Async Gemini wrapper that describes an image
- **Exceptions**: Configuration and generation error taxonomy

Usage Example
-------------
    from imageprompt.core import PromptGenerationClient, config

    client = PromptGenerationClient.from_config(config)
    prompt = await client.generate(image_base64, "image/jpeg")
"""

from imageprompt.core.config import ImagePromptConfig, config, require_api_key
from imageprompt.core.exceptions import (
    ConfigurationError,
    GenerationEmptyResponseError,
    GenerationError,
    GenerationServiceError,
    GenerationUnknownError,
    ImagePromptError,
)
from imageprompt.core.prompt_client import PromptGenerationClient, PromptGenerator

__all__ = [
    "ConfigurationError",
    "GenerationEmptyResponseError",
    "GenerationError",
    "GenerationServiceError",
    "GenerationUnknownError",
    "ImagePromptConfig",
    "ImagePromptError",
    "PromptGenerationClient",
    "PromptGenerator",
    "config",
    "require_api_key",
]
