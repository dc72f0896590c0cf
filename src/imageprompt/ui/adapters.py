"""Adapter functions for converting between UI values and business objects."""

import logging
import mimetypes
from pathlib import Path

from .models import ImageUpload

logger = logging.getLogger(__name__)

UNKNOWN_MEDIA_TYPE = "application/octet-stream"


def guess_media_type(filename: str) -> str:
    """Return the declared media type for a file name.

    The type comes from the file extension only, the same way a browser
    fills ``File.type``. File contents are never inspected.
    """
    media_type, _ = mimetypes.guess_type(filename)
    return media_type or UNKNOWN_MEDIA_TYPE


def upload_from_path(path: str | Path | None) -> ImageUpload | None:
    """Convert a Gradio upload file path to an ImageUpload.

    Args:
        path: Temporary path of the uploaded file, or None if cleared

    Returns:
        ImageUpload with the file's bytes and declared media type, or None
    """
    if not path:
        return None

    file_path = Path(path)
    upload = ImageUpload(
        data=file_path.read_bytes(),
        media_type=guess_media_type(file_path.name),
        filename=file_path.name,
    )
    logger.debug(f"Read upload {upload!r}")
    return upload
