"""Configuration management for Image to Prompt.

This module provides centralized configuration management using Pydantic Settings.
Configuration is loaded from environment variables with the IMAGEPROMPT_ prefix,
except for the Gemini credential, which is read from ``API_KEY``.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (IMAGEPROMPT_* prefix, plus API_KEY)
2. .env file in the project root
3. Default values defined in ImagePromptConfig

Example .env file:
    API_KEY=your-gemini-api-key
    IMAGEPROMPT_MODEL_ID=gemini-2.5-flash
    IMAGEPROMPT_SERVER_PORT=7860
    IMAGEPROMPT_COPY_FEEDBACK_SECONDS=2

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
The credential is optional at this level so that importing the package never
fails; the entry point calls :func:`require_api_key` (through
``PromptGenerationClient.from_config``) before serving anything, and a missing
key aborts startup with :class:`~imageprompt.core.exceptions.ConfigurationError`.

Usage Example
-------------
    from imageprompt.core.config import config, require_api_key

    print(config.model_id)
    api_key = require_api_key(config)
"""

import tempfile
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_MODEL_ID = "gemini-2.5-flash"


class ImagePromptConfig(BaseSettings):
    """Main configuration for Image to Prompt.

    Attributes
    ----------
    Gemini Settings:
        api_key : SecretStr | None
            Gemini API key, read from API_KEY (or IMAGEPROMPT_API_KEY)
        model_id : str
            Gemini model used to describe images

    Interaction Settings:
        copy_feedback_seconds : float
            How long the "Copied!" confirmation stays visible
        feedback_poll_seconds : float
            Interval of the UI timer that refreshes transient feedback
        preview_dir : Path
            Directory holding temporary preview files for uploaded images
        cache_max_age_seconds : int
            Age after which Gradio deletes the copies it caches for display

    Server Settings:
        server_host : str
            Bind address for the uvicorn server
        server_port : int
            Server port (1024-65535)
        log_level : str
            Root logging level used by the entry point

    Notes
    -----
    - preview_dir is created automatically if it doesn't exist
    - Configuration is immutable after initialization
    - The API key is masked in ``model_dump()`` output and logs

    Examples
    --------
        >>> custom_config = ImagePromptConfig(
        ...     api_key="test-key",
        ...     model_id="gemini-2.5-pro",
        ... )
        >>> custom_config.api_key.get_secret_value()
        'test-key'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IMAGEPROMPT_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Gemini settings
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("API_KEY", "IMAGEPROMPT_API_KEY", "api_key"),
        description="Gemini API key (required at startup)",
    )
    model_id: str = Field(
        default=DEFAULT_MODEL_ID,
        description="Gemini model identifier used for prompt generation",
    )

    # Interaction settings
    copy_feedback_seconds: float = Field(
        default=2.0,
        description="Seconds the copy confirmation stays visible",
        ge=0.0,
    )
    feedback_poll_seconds: float = Field(
        default=0.5,
        description="UI timer interval for refreshing transient feedback",
        gt=0.0,
    )
    preview_dir: Path = Field(
        default=Path(tempfile.gettempdir()) / "imageprompt-previews",
        description="Directory for temporary image preview files",
    )
    cache_max_age_seconds: int = Field(
        default=3600,
        description="Age (and sweep interval) for deleting Gradio cached files",
        ge=60,
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for the application",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the preview directory."""
        super().__init__(**kwargs)

        self.preview_dir.mkdir(parents=True, exist_ok=True)


def require_api_key(settings: ImagePromptConfig) -> str:
    """Return the configured API key or fail startup.

    Args:
        settings: Configuration to read the credential from

    Returns:
        The plain-text API key

    Raises:
        ConfigurationError: If no non-empty API_KEY is configured
    """
    if settings.api_key is None:
        raise ConfigurationError("API_KEY environment variable not set")

    api_key = settings.api_key.get_secret_value().strip()
    if not api_key:
        raise ConfigurationError("API_KEY environment variable not set")
    return api_key


# Global configuration instance
# Loaded from environment variables (IMAGEPROMPT_* prefix, API_KEY) and .env file.
config = ImagePromptConfig()
