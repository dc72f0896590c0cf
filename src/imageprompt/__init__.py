"""Image to Prompt - Let AI craft a descriptive prompt for your image."""

__version__ = "0.1.0"

from imageprompt.core.config import ImagePromptConfig, config
from imageprompt.core.prompt_client import PromptGenerationClient

__all__ = [
    "ImagePromptConfig",
    "PromptGenerationClient",
    "config",
]
