"""Validation utilities for Image to Prompt inputs."""

import logging

from imageprompt.core.exceptions import ImagePromptError

from .models import INVALID_IMAGE_MESSAGE, NO_IMAGE_MESSAGE, ImageUpload

logger = logging.getLogger(__name__)


class ValidationError(ImagePromptError):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


class InvalidImageTypeError(ValidationError):
    """Raised when a submitted file does not declare an image media type."""

    def __init__(self, message: str = INVALID_IMAGE_MESSAGE):
        super().__init__(message)


class NoImageSelectedError(ValidationError):
    """Raised when generation is requested before an image is accepted."""

    def __init__(self, message: str = NO_IMAGE_MESSAGE):
        super().__init__(message)


def validate_image_upload(upload: ImageUpload | None) -> ImageUpload:
    """Validate that a candidate file declares an image media type.

    Only the declared media type prefix is checked. There is no content
    sniffing and no size or dimension limit.

    Args:
        upload: Candidate file

    Returns:
        The same upload if valid

    Raises:
        InvalidImageTypeError: If the file is missing or not an image/* type
    """
    if upload is None or not (upload.media_type or "").startswith("image/"):
        media_type = upload.media_type if upload is not None else None
        logger.warning(f"Rejected upload with media type: {media_type!r}")
        raise InvalidImageTypeError()
    return upload


def require_image(image: ImageUpload | None) -> ImageUpload:
    """Ensure an image is present before generation.

    Raises:
        NoImageSelectedError: If no image is held
    """
    if image is None:
        raise NoImageSelectedError()
    return image
