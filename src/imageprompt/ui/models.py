"""Data models for the Image to Prompt session state and view."""

import base64
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .display import DisplayHandle

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Status of the interaction state machine.

    UPLOADING is kept as a label only: upload validation is synchronous, so
    the controller moves straight from IDLE to PREVIEWING or ERROR.
    """

    IDLE = "idle"
    UPLOADING = "uploading"
    PREVIEWING = "previewing"
    GENERATING = "generating"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ImageUpload:
    """A candidate file handed to the controller.

    Attributes
    ----------
    data : bytes
        Raw file contents
    media_type : str
        Declared media type (e.g. "image/png"); never sniffed from content
    filename : str
        Original file name, for logging and preview suffixes
    """

    data: bytes
    media_type: str
    filename: str = ""

    def to_base64(self) -> str:
        """Encode the file contents for the generation request."""
        return base64.b64encode(self.data).decode("ascii")

    def __repr__(self) -> str:
        return (
            f"ImageUpload(filename={self.filename!r}, "
            f"media_type={self.media_type!r}, size={len(self.data)})"
        )


@dataclass
class SessionState:
    """Per-session state owned by the interaction controller.

    Attributes
    ----------
    status : SessionStatus
        Current state machine status
    image : ImageUpload | None
        Accepted image, if any
    generated_text : str
        Last generated prompt (non-empty only in SUCCESS)
    error_message : str
        User-facing error (non-empty only in ERROR)
    copy_feedback_active : bool
        Whether the "Copied!" confirmation is showing
    drag_active : bool
        Whether a drag is hovering the upload zone
    display_handle : DisplayHandle | None
        DisplayHandle bound to the current image
    request_id : int
        Monotonic counter identifying the latest generation request
    """

    status: SessionStatus = SessionStatus.IDLE
    image: ImageUpload | None = None
    generated_text: str = ""
    error_message: str = ""
    copy_feedback_active: bool = False
    drag_active: bool = False
    display_handle: "DisplayHandle | None" = None
    request_id: int = 0

    def has_image(self) -> bool:
        """Check if an image is currently held."""
        return self.image is not None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"SessionState(status={self.status.value}, "
            f"image={self.image!r}, "
            f"request_id={self.request_id})"
        )


@dataclass(frozen=True)
class GenerationTicket:
    """Identifies one generation request and the image it was issued for."""

    request_id: int
    image: ImageUpload


@dataclass(frozen=True)
class ViewModel:
    """Derived state handed to the view layer.

    Every field is computed from SessionState; the view only renders it.
    """

    status: SessionStatus
    show_upload: bool
    drag_active: bool
    preview_path: str | None
    show_generate: bool
    show_spinner: bool
    error_message: str
    show_result: bool
    generated_text: str
    copy_feedback_active: bool
    inputs_disabled: bool = False
    upload_hint: str = ""


# User-facing messages
INVALID_IMAGE_MESSAGE = "Please select a valid image file."
NO_IMAGE_MESSAGE = "Please select an image first."
GENERATION_FAILED_PREFIX = "Failed to generate prompt: "
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."

# Upload zone labels
UPLOAD_HINT = "**Upload an Image**\n\nDrag & drop or click to select a file"
DROP_HINT = "**Drop to Upload**\n\nRelease the image to begin"

# Copy confirmation delay (seconds) when no configuration is supplied
DEFAULT_COPY_FEEDBACK_SECONDS = 2.0
