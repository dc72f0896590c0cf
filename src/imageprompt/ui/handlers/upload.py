"""Image upload and reset handlers."""

import logging

from imageprompt.core.config import ImagePromptConfig
from imageprompt.core.prompt_client import PromptGenerator

from ..adapters import upload_from_path
from ..components import render_upload_hint, render_view
from ..controller import InteractionController
from ..state import initialize_session

logger = logging.getLogger(__name__)


async def upload_image(
    file_path: str | None,
    controller: InteractionController | None,
    generator: PromptGenerator,
    settings: ImagePromptConfig | None = None,
) -> tuple:
    """Handle a file chosen with the picker or dropped on the upload zone.

    Args:
        file_path: Temporary path of the uploaded file
        controller: Session controller (None for a new session)
        generator: Shared prompt generation client
        settings: Configuration for new sessions

    Returns:
        Tuple of (*view_updates, controller)
    """
    controller = initialize_session(controller, generator, settings)

    if not file_path:
        # Upload component cleared without a new file
        return (*render_view(controller.view()), controller)

    try:
        upload = upload_from_path(file_path)
    except OSError as e:
        logger.error(f"Could not read uploaded file {file_path}: {e}", exc_info=True)
        upload = None

    if upload is None:
        # An unreadable file is rejected like a file without an image media type
        controller.submit_image(None)
    else:
        # Picker and drop uploads both land here; drop also ends any drag
        controller.drop(upload)
    return (*render_view(controller.view()), controller)


async def reset_session(
    controller: InteractionController | None,
    generator: PromptGenerator,
    settings: ImagePromptConfig | None = None,
) -> tuple:
    """Handle the "Remove Image" button.

    Returns:
        Tuple of (*view_updates, controller)
    """
    controller = initialize_session(controller, generator, settings)
    controller.reset()
    return (*render_view(controller.view()), controller)


async def drag_enter_zone(
    controller: InteractionController | None,
    generator: PromptGenerator,
    settings: ImagePromptConfig | None = None,
) -> tuple[dict, InteractionController]:
    """Handle a file drag entering the upload zone.

    The browser only fires this for drags that carry files.

    Returns:
        Tuple of (upload_hint_update, controller)
    """
    controller = initialize_session(controller, generator, settings)
    controller.drag_enter(has_items=True)
    return render_upload_hint(controller.view()), controller


async def drag_leave_zone(
    controller: InteractionController | None,
    generator: PromptGenerator,
    settings: ImagePromptConfig | None = None,
) -> tuple[dict, InteractionController]:
    """Handle a drag leaving the upload zone or being dropped.

    Returns:
        Tuple of (upload_hint_update, controller)
    """
    controller = initialize_session(controller, generator, settings)
    controller.drag_leave()
    return render_upload_hint(controller.view()), controller
