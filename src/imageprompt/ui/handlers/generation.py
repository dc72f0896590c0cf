"""Prompt generation handlers."""

import logging
from collections.abc import AsyncIterator

from imageprompt.core.config import ImagePromptConfig
from imageprompt.core.prompt_client import PromptGenerator

from ..components import render_view
from ..controller import InteractionController
from ..state import initialize_session

logger = logging.getLogger(__name__)


async def generate_prompt(
    controller: InteractionController | None,
    generator: PromptGenerator,
    settings: ImagePromptConfig | None = None,
) -> AsyncIterator[tuple]:
    """Generate (or regenerate) a prompt for the session's image.

    Yields twice: once after entering the generating state so the spinner
    shows while the request is pending, and once with the outcome. Without
    an image only the error view is yielded.

    Args:
        controller: Session controller (None for a new session)
        generator: Shared prompt generation client
        settings: Configuration for new sessions

    Yields:
        Tuples of (*view_updates, controller)
    """
    controller = initialize_session(controller, generator, settings)

    ticket = controller.begin_generation()
    yield (*render_view(controller.view()), controller)

    if ticket is None:
        logger.warning("Generation requested without an image")
        return

    await controller.complete_generation(ticket)
    yield (*render_view(controller.view()), controller)
