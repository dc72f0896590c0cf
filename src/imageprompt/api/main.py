"""Image to Prompt — FastAPI Application.

This module is the single entry point for the web application. It builds the
FastAPI app, mounts the Gradio UI at ``/``, exposes a health route, and
defines the ``main()`` CLI function that launches the uvicorn server.

Startup
-------
The Gemini client is built once, before the server starts, from the global
configuration. A missing ``API_KEY`` raises
:class:`~imageprompt.core.exceptions.ConfigurationError`; ``main()`` logs it
and exits with status 1 instead of serving a UI that can never generate.

Endpoints
---------
========  ====================  ====================================
Method    Path                  Purpose
========  ====================  ====================================
GET       ``/``                 Gradio UI
GET       ``/api/health``       Version and configured model
========  ====================  ====================================

Usage
-----
CLI (installed entry point)::

    imageprompt

Direct invocation::

    python -m imageprompt.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import gradio as gr
from fastapi import FastAPI

from imageprompt import __version__
from imageprompt.api.models import HealthResponse
from imageprompt.core.config import ImagePromptConfig, config
from imageprompt.core.exceptions import ConfigurationError
from imageprompt.core.prompt_client import PromptGenerationClient, PromptGenerator
from imageprompt.ui.app import create_ui
from imageprompt.ui.display import clear_preview_dir

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def create_app(
    settings: ImagePromptConfig | None = None,
    generator: PromptGenerator | None = None,
) -> FastAPI:
    """Build the FastAPI application with the Gradio UI mounted.

    Args:
        settings: Configuration (default: global config)
        generator: Prompt generation client (default: built from settings)

    Returns:
        Configured FastAPI application

    Raises:
        ConfigurationError: If no generator is given and API_KEY is missing
    """
    settings = settings or config
    if generator is None:
        generator = PromptGenerationClient.from_config(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Clear preview files left by earlier runs and by this one."""
        # --- Startup -------------------------------------------------------
        clear_preview_dir(settings.preview_dir)
        logger.info(f"Serving prompts with model {settings.model_id}")

        yield  # Application runs here.

        # --- Shutdown ------------------------------------------------------
        clear_preview_dir(settings.preview_dir)
        logger.info("Preview directory cleared on shutdown.")

    app = FastAPI(
        title="Image to Prompt",
        description="Let AI craft the perfect prompt for your image.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.generator = generator

    # Routes must be registered before the UI is mounted at "/".
    @app.get("/api/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Report that the server is up and which model it uses."""
        return HealthResponse(version=__version__, model_id=settings.model_id)

    blocks = create_ui(generator, settings)
    app = gr.mount_gradio_app(
        app,
        blocks,
        path="/",
        allowed_paths=[str(settings.preview_dir)],
    )
    return app


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~imageprompt.core.config.config` (which
    loads from ``IMAGEPROMPT_SERVER_HOST`` and ``IMAGEPROMPT_SERVER_PORT``
    environment variables). Defaults to ``0.0.0.0:7860``.

    This function is registered as the ``imageprompt`` console script in
    ``pyproject.toml``.
    """
    logging.basicConfig(level=config.log_level.upper(), format=LOG_FORMAT)
    logger.info("Starting Image to Prompt...")
    logger.info(f"Configuration: {config.model_dump()}")

    try:
        app = create_app(config)
    except ConfigurationError as e:
        logger.error(f"Startup failed: {e}")
        raise SystemExit(1) from e

    import uvicorn

    logger.info(f"Launching on {config.server_host}:{config.server_port}")
    uvicorn.run(
        app,
        host=config.server_host,
        port=config.server_port,
    )


if __name__ == "__main__":
    main()
