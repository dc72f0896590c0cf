"""Copy-to-clipboard handlers."""

import logging

import gradio as gr

from imageprompt.core.config import ImagePromptConfig
from imageprompt.core.prompt_client import PromptGenerator

from ..clipboard import ClipboardBuffer
from ..components import render_copy_feedback
from ..controller import InteractionController
from ..state import initialize_session

logger = logging.getLogger(__name__)


async def copy_prompt(
    controller: InteractionController | None,
    generator: PromptGenerator,
    settings: ImagePromptConfig | None = None,
) -> tuple[dict, str, InteractionController]:
    """Copy the generated prompt.

    The returned payload is handed to the browser-side clipboard call that
    is chained after this handler. An empty payload means nothing is copied.

    Returns:
        Tuple of (copy_feedback_update, clipboard_payload, controller)
    """
    controller = initialize_session(controller, generator, settings)

    payload = ""
    if controller.copy_to_clipboard() and isinstance(controller.clipboard, ClipboardBuffer):
        payload = controller.clipboard.take() or ""
        logger.info(f"Copied prompt ({len(payload)} characters)")

    return render_copy_feedback(controller.view()), payload, controller


async def refresh_copy_feedback(controller: InteractionController | None) -> dict:
    """Re-render the copy confirmation on each UI timer tick."""
    if controller is None:
        return gr.update(visible=False)
    return render_copy_feedback(controller.view())
