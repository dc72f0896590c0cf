"""Session management utilities for the Image to Prompt UI.

Each browser session gets its own :class:`InteractionController`, created
lazily on the first event and released when Gradio drops the session.
"""

import logging

from imageprompt.core.config import ImagePromptConfig, config
from imageprompt.core.prompt_client import PromptGenerator

from .controller import InteractionController

logger = logging.getLogger(__name__)


def initialize_session(
    controller: InteractionController | None,
    generator: PromptGenerator,
    settings: ImagePromptConfig | None = None,
) -> InteractionController:
    """Initialize or return the session's controller.

    Args:
        controller: Existing controller or None for a new session
        generator: Shared prompt generation client
        settings: Configuration (default: global config)

    Returns:
        Controller for this session
    """
    if controller is not None:
        return controller

    settings = settings or config
    logger.info("Creating new session controller")
    return InteractionController(
        generator,
        copy_feedback_seconds=settings.copy_feedback_seconds,
        preview_dir=settings.preview_dir,
    )


def cleanup_session(controller: InteractionController | None) -> None:
    """Clean up session resources.

    Registered as the ``gr.State`` delete callback so preview files are
    removed when a session expires.

    Args:
        controller: Session controller to clean up
    """
    if controller is None:
        return

    logger.info(f"Cleaning up session: {controller!r}")
    try:
        controller.close()
    except Exception as e:
        logger.error(f"Error during session cleanup: {e}", exc_info=True)
