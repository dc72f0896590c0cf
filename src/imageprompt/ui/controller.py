"""Interaction controller for the Image to Prompt UI.

The controller owns one session's :class:`~imageprompt.ui.models.SessionState`
and is the only thing that mutates it. View handlers translate Gradio events
into controller operations and render :meth:`InteractionController.view`.

State Machine
-------------
    idle ──upload ok──▶ previewing ──generate──▶ generating ──ok──▶ success
      │                                             │                  │
      └──upload bad──▶ error ◀────────fail──────────┘    regenerate ◀──┘

- Any upload re-enters previewing (valid) or error (invalid), whatever the
  current status.
- Reset returns to idle from anywhere.
- Generate without an image yields error "Please select an image first."
- Generate with an image is accepted from any status, including error, so a
  failed attempt can be retried. The UI hides the buttons while generating;
  the controller itself does not block re-entrance.

Stale Responses
---------------
Every generation request, upload, and reset increments ``request_id``. A
response whose ticket no longer matches is discarded, so a slow reply cannot
overwrite a newer image or an idle session.
"""

import logging
from pathlib import Path

from imageprompt.core.exceptions import GenerationError
from imageprompt.core.prompt_client import PromptGenerator

from .clipboard import ClipboardBuffer, ClipboardWriter
from .display import DisplayHandle
from .feedback import FeedbackTimer
from .models import (
    DEFAULT_COPY_FEEDBACK_SECONDS,
    DROP_HINT,
    GENERATION_FAILED_PREFIX,
    UNKNOWN_ERROR_MESSAGE,
    UPLOAD_HINT,
    GenerationTicket,
    ImageUpload,
    SessionState,
    SessionStatus,
    ViewModel,
)
from .validation import ValidationError, require_image, validate_image_upload

logger = logging.getLogger(__name__)


class InteractionController:
    """State machine behind the upload / generate / copy / reset flow.

    Args:
        generator: Prompt generation client (shared across sessions)
        clipboard: Destination for copied text (default: ClipboardBuffer)
        feedback_timer: Scheduler for clearing copy feedback
        copy_feedback_seconds: How long copy feedback stays active
        preview_dir: Directory for preview files (default: system temp dir)
    """

    def __init__(
        self,
        generator: PromptGenerator,
        clipboard: ClipboardWriter | None = None,
        feedback_timer: FeedbackTimer | None = None,
        copy_feedback_seconds: float = DEFAULT_COPY_FEEDBACK_SECONDS,
        preview_dir: Path | None = None,
    ):
        self.generator = generator
        self.clipboard = clipboard if clipboard is not None else ClipboardBuffer()
        self.feedback_timer = feedback_timer if feedback_timer is not None else FeedbackTimer()
        self.copy_feedback_seconds = copy_feedback_seconds
        self.preview_dir = preview_dir
        self.state = SessionState()

    # ------------------------------------------------------------------
    # Upload
    # ------------------------------------------------------------------

    def submit_image(self, upload: ImageUpload | None) -> SessionState:
        """Validate and accept a candidate image.

        A valid image replaces any existing one and clears previous output.
        An invalid file leaves no image stored and sets the error state.

        Args:
            upload: Candidate file

        Returns:
            Updated session state
        """
        state = self.state
        state.request_id += 1  # in-flight responses are now stale

        try:
            validate_image_upload(upload)
        except ValidationError as e:
            self._release_display_handle()
            state.image = None
            state.generated_text = ""
            state.error_message = str(e)
            state.status = SessionStatus.ERROR
            return state

        self._release_display_handle()
        state.display_handle = DisplayHandle.acquire(upload, self.preview_dir)
        state.image = upload
        state.generated_text = ""
        state.error_message = ""
        state.status = SessionStatus.PREVIEWING
        logger.info(f"Accepted image {upload!r}")
        return state

    # ------------------------------------------------------------------
    # Drag and drop
    # ------------------------------------------------------------------

    def drag_enter(self, has_items: bool = True) -> None:
        """Mark the upload zone active when a drag carrying items enters it."""
        if has_items:
            self.state.drag_active = True

    def drag_leave(self) -> None:
        self.state.drag_active = False

    def drop(self, upload: ImageUpload | None) -> SessionState:
        """Finish a drag and submit the dropped file, if any."""
        self.state.drag_active = False
        if upload is None:
            return self.state
        return self.submit_image(upload)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def begin_generation(self) -> GenerationTicket | None:
        """Enter the generating state for the current image.

        Returns:
            Ticket for :meth:`complete_generation`, or None if no image is
            held (the session is then in the error state)
        """
        state = self.state
        try:
            image = require_image(state.image)
        except ValidationError as e:
            state.generated_text = ""
            state.error_message = str(e)
            state.status = SessionStatus.ERROR
            return None

        state.request_id += 1
        state.status = SessionStatus.GENERATING
        state.error_message = ""
        state.generated_text = ""
        logger.info(f"Starting generation request {state.request_id} for {image!r}")
        return GenerationTicket(request_id=state.request_id, image=image)

    async def complete_generation(self, ticket: GenerationTicket) -> SessionState:
        """Call the generator once and apply its outcome.

        The outcome is dropped if the session moved on (new upload, reset, or
        another request) while the call was pending.
        """
        image = ticket.image
        text = ""
        error_message = ""
        try:
            text = await self.generator.generate(image.to_base64(), image.media_type)
        except GenerationError as e:
            logger.error(f"Prompt generation failed: {e}")
            error_message = f"{GENERATION_FAILED_PREFIX}{e}"
        except Exception as e:
            logger.error(f"Unexpected error during prompt generation: {e}", exc_info=True)
            error_message = f"{GENERATION_FAILED_PREFIX}{str(e) or UNKNOWN_ERROR_MESSAGE}"

        state = self.state
        if ticket.request_id != state.request_id:
            logger.info(
                f"Discarding stale response for request {ticket.request_id} "
                f"(current request is {state.request_id})"
            )
            return state

        if error_message:
            state.generated_text = ""
            state.error_message = error_message
            state.status = SessionStatus.ERROR
        else:
            state.error_message = ""
            state.generated_text = text.strip()
            state.status = SessionStatus.SUCCESS
        return state

    async def request_generation(self) -> SessionState:
        """Generate a prompt for the current image.

        Without an image the session moves to the error state and the
        generator is not called. Otherwise the generator is called exactly
        once; there is no timeout and no cancellation.
        """
        ticket = self.begin_generation()
        if ticket is None:
            return self.state
        return await self.complete_generation(ticket)

    # ------------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------------

    def copy_to_clipboard(self) -> bool:
        """Copy the generated prompt and show copy feedback.

        Returns:
            True if text was copied, False if there was nothing to copy
        """
        text = self.state.generated_text
        if not text:
            return False

        self.clipboard.write(text)
        self.state.copy_feedback_active = True
        self.feedback_timer.schedule(self.copy_feedback_seconds, self._clear_copy_feedback)
        return True

    def _clear_copy_feedback(self) -> None:
        self.state.copy_feedback_active = False

    # ------------------------------------------------------------------
    # Reset and teardown
    # ------------------------------------------------------------------

    def reset(self) -> SessionState:
        """Return to idle, discarding the image and its preview file."""
        state = self.state
        state.request_id += 1
        self._release_display_handle()
        state.image = None
        state.generated_text = ""
        state.error_message = ""
        state.status = SessionStatus.IDLE
        logger.info("Session reset")
        return state

    def close(self) -> None:
        """Release every resource held by the session."""
        self.feedback_timer.cancel()
        self._release_display_handle()

    def _release_display_handle(self) -> None:
        handle = self.state.display_handle
        if handle is not None:
            handle.release()
            self.state.display_handle = None

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    def view(self) -> ViewModel:
        """Derive what the view should show from the current state."""
        state = self.state
        status = state.status
        handle = state.display_handle
        return ViewModel(
            status=status,
            show_upload=not state.has_image(),
            drag_active=state.drag_active,
            preview_path=str(handle.path) if handle is not None else None,
            show_generate=status == SessionStatus.PREVIEWING,
            show_spinner=status == SessionStatus.GENERATING,
            error_message=state.error_message if status == SessionStatus.ERROR else "",
            show_result=status == SessionStatus.SUCCESS and bool(state.generated_text),
            generated_text=state.generated_text if status == SessionStatus.SUCCESS else "",
            copy_feedback_active=state.copy_feedback_active,
            inputs_disabled=status == SessionStatus.GENERATING,
            upload_hint=DROP_HINT if state.drag_active else UPLOAD_HINT,
        )

    def __repr__(self) -> str:
        return f"InteractionController({self.state!r})"
