"""Gradio user interface for Image to Prompt.

Modules
-------
controller
    Interaction state machine for one session.
models
    Session state, view model, and user-facing messages.
handlers
    Gradio event handlers that adapt events to controller operations.
components
    Session view components and view-model rendering.
app
    Gradio Blocks assembly.
"""

from .app import create_ui
from .controller import InteractionController

__all__ = ["InteractionController", "create_ui"]
