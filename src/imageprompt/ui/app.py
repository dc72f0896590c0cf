"""Gradio UI for Image to Prompt."""

import logging

import gradio as gr

from imageprompt.core.config import ImagePromptConfig, config
from imageprompt.core.prompt_client import PromptGenerator

from .clipboard import COPY_TO_CLIPBOARD_JS
from .components import DRAG_TRACKING_JS, SessionView
from .handlers import (
    copy_prompt,
    drag_enter_zone,
    drag_leave_zone,
    generate_prompt,
    refresh_copy_feedback,
    reset_session,
    upload_image,
)
from .state import cleanup_session

logger = logging.getLogger(__name__)


def create_ui(generator: PromptGenerator, settings: ImagePromptConfig | None = None) -> gr.Blocks:
    """Create the Gradio UI.

    Args:
        generator: Shared prompt generation client, built once at startup
        settings: Configuration (default: global config)

    Returns:
        Gradio Blocks app
    """
    settings = settings or config

    # Gradio copies every preview it serves into its own cache; sweep those
    # copies on the same schedule as their maximum age
    cache_age = settings.cache_max_age_seconds
    app = gr.Blocks(title="Image to Prompt", delete_cache=(cache_age, cache_age))

    with app:
        # Session state - one controller per user, released when the session ends
        session = gr.State(None, delete_callback=cleanup_session)

        gr.Markdown(
            """
            # Image to Prompt
            ### Let AI craft the perfect prompt for your image.
            """
        )

        view = SessionView()
        view_outputs = [*view.outputs, session]

        # Polls copy feedback so the confirmation disappears on its own
        feedback_timer = gr.Timer(settings.feedback_poll_seconds)

        async def on_drag_enter(controller):
            return await drag_enter_zone(controller, generator, settings)

        async def on_drag_leave(controller):
            return await drag_leave_zone(controller, generator, settings)

        async def on_upload(file_path, controller):
            return await upload_image(file_path, controller, generator, settings)

        async def on_reset(controller):
            return await reset_session(controller, generator, settings)

        async def on_generate(controller):
            async for update in generate_prompt(controller, generator, settings):
                yield update

        async def on_copy(controller):
            return await copy_prompt(controller, generator, settings)

        view.upload_input.upload(
            fn=on_upload,
            inputs=[view.upload_input, session],
            outputs=view_outputs,
        )

        # Drag hint updates bypass the queue
        view.drag_enter_trigger.click(
            fn=on_drag_enter,
            inputs=[session],
            outputs=[view.upload_hint, session],
            queue=False,
            show_progress="hidden",
        )
        view.drag_leave_trigger.click(
            fn=on_drag_leave,
            inputs=[session],
            outputs=[view.upload_hint, session],
            queue=False,
            show_progress="hidden",
        )

        view.remove_btn.click(
            fn=on_reset,
            inputs=[session],
            outputs=view_outputs,
        )

        # Generate and Regenerate share the same flow
        for button in (view.generate_btn, view.regenerate_btn):
            button.click(
                fn=on_generate,
                inputs=[session],
                outputs=view_outputs,
                concurrency_limit=None,
            )

        view.copy_btn.click(
            fn=on_copy,
            inputs=[session],
            outputs=[view.copy_feedback, view.copy_payload, session],
        ).then(
            fn=None,
            inputs=[view.copy_payload],
            outputs=[view.copy_payload],
            js=COPY_TO_CLIPBOARD_JS,
        )

        feedback_timer.tick(
            fn=refresh_copy_feedback,
            inputs=[session],
            outputs=[view.copy_feedback],
            show_progress="hidden",
            concurrency_limit=None,
        )

        app.load(fn=None, js=DRAG_TRACKING_JS)

    return app
