"""Reusable UI components for the Image to Prompt Gradio interface."""

import gradio as gr

from .models import UPLOAD_HINT, ViewModel

GENERATING_MESSAGE = "⏳ **Generating creative prompt...**\n\nThis may take a moment."
COPIED_MESSAGE = "✅ Copied!"

UPLOAD_ZONE_ID = "upload-zone"
DRAG_ENTER_TRIGGER_ID = "drag-enter-trigger"
DRAG_LEAVE_TRIGGER_ID = "drag-leave-trigger"

# Runs once on page load. Browser drag events over the upload zone click the
# hidden trigger buttons, which feed the session controller.
DRAG_TRACKING_JS = f"""
() => {{
    const triggers = ["{DRAG_ENTER_TRIGGER_ID}", "{DRAG_LEAVE_TRIGGER_ID}"];
    triggers.forEach((id) => {{
        const el = document.getElementById(id);
        if (el) el.style.display = "none";
    }});
    const press = (id) => document.getElementById(id)?.click();
    const zoneOf = (el) => (el instanceof Element ? el.closest("#{UPLOAD_ZONE_ID}") : null);
    let active = false;
    document.addEventListener("dragenter", (e) => {{
        const types = e.dataTransfer ? Array.from(e.dataTransfer.types) : [];
        if (!active && zoneOf(e.target) && types.includes("Files")) {{
            active = true;
            press("{DRAG_ENTER_TRIGGER_ID}");
        }}
    }});
    document.addEventListener("dragleave", (e) => {{
        const zone = zoneOf(e.target);
        if (active && zone && !zone.contains(e.relatedTarget)) {{
            active = false;
            press("{DRAG_LEAVE_TRIGGER_ID}");
        }}
    }});
    document.addEventListener("drop", () => {{
        if (active) {{
            active = false;
            press("{DRAG_LEAVE_TRIGGER_ID}");
        }}
    }});
}}
"""


class SessionView:
    """All components that render one session's view model.

    The components are created inside the current ``gr.Blocks`` context.
    :attr:`outputs` lists them in the order produced by :func:`render_view`,
    so any handler returning ``render_view(...)`` can target ``outputs``.
    """

    def __init__(self):
        # Upload zone (shown while no image is held)
        self.upload_hint = gr.Markdown(value=UPLOAD_HINT)
        # No file_types filter: the controller is the only media-type gate, so
        # a dropped non-image reaches it and shows the invalid-file error.
        self.upload_input = gr.File(
            label="Image",
            type="filepath",
            file_count="single",
            elem_id=UPLOAD_ZONE_ID,
        )
        # Clicked by DRAG_TRACKING_JS; hidden by the same script once loaded
        self.drag_enter_trigger = gr.Button("drag enter", elem_id=DRAG_ENTER_TRIGGER_ID)
        self.drag_leave_trigger = gr.Button("drag leave", elem_id=DRAG_LEAVE_TRIGGER_ID)

        # Preview of the accepted image
        self.preview = gr.Image(
            label="Uploaded preview",
            type="filepath",
            interactive=False,
            visible=False,
            height=360,
        )
        self.remove_btn = gr.Button("Remove Image", variant="stop", visible=False)

        self.generate_btn = gr.Button("✨ Generate Prompt", variant="primary", visible=False)
        self.spinner = gr.Markdown(value=GENERATING_MESSAGE, visible=False)
        self.error_box = gr.Markdown(value="", visible=False)

        # Result panel
        with gr.Group(visible=False) as self.result_group:
            self.prompt_output = gr.Textbox(
                label="Generated Prompt",
                interactive=False,
                lines=5,
            )
            with gr.Row():
                self.copy_btn = gr.Button("📋 Copy", size="sm")
                self.regenerate_btn = gr.Button("✨ Regenerate", size="sm")
            self.copy_feedback = gr.Markdown(value=COPIED_MESSAGE, visible=False)

        # Carries copied text to the browser-side clipboard call
        self.copy_payload = gr.Textbox(visible=False)

    @property
    def outputs(self) -> list:
        """Components updated by :func:`render_view`, in order."""
        return [
            self.upload_hint,
            self.upload_input,
            self.preview,
            self.remove_btn,
            self.generate_btn,
            self.spinner,
            self.error_box,
            self.result_group,
            self.prompt_output,
            self.copy_feedback,
            self.regenerate_btn,
        ]


def render_view(view: ViewModel) -> tuple:
    """Convert a view model into component updates.

    Args:
        view: Derived state from the session controller

    Returns:
        Tuple of gr.update values matching ``SessionView.outputs``
    """
    has_preview = view.preview_path is not None
    return (
        gr.update(value=view.upload_hint, visible=view.show_upload),
        gr.update(value=None, visible=view.show_upload, interactive=not view.inputs_disabled),
        gr.update(value=view.preview_path, visible=has_preview),
        gr.update(visible=has_preview),
        gr.update(visible=view.show_generate, interactive=not view.inputs_disabled),
        gr.update(visible=view.show_spinner),
        gr.update(
            value=f"❌ {view.error_message}" if view.error_message else "",
            visible=bool(view.error_message),
        ),
        gr.update(visible=view.show_result),
        gr.update(value=view.generated_text),
        gr.update(visible=view.copy_feedback_active),
        gr.update(interactive=not view.inputs_disabled),
    )


def render_upload_hint(view: ViewModel) -> dict:
    """Update for the upload zone label only (used by drag events)."""
    return gr.update(value=view.upload_hint)


def render_copy_feedback(view: ViewModel) -> dict:
    """Update for the copy confirmation only (used by the UI timer)."""
    return gr.update(visible=view.copy_feedback_active)
