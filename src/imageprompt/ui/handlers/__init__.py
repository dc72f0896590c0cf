"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events, organized into logical modules:
- upload: Image upload, drag and drop, and reset
- generation: Prompt generation and regeneration
- clipboard: Copy-to-clipboard and copy feedback refresh
"""

from .clipboard import copy_prompt, refresh_copy_feedback
from .generation import generate_prompt
from .upload import drag_enter_zone, drag_leave_zone, reset_session, upload_image

__all__ = [
    # Upload handlers
    "drag_enter_zone",
    "drag_leave_zone",
    "reset_session",
    "upload_image",
    # Generation handlers
    "generate_prompt",
    # Clipboard handlers
    "copy_prompt",
    "refresh_copy_feedback",
]
