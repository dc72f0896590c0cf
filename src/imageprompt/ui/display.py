"""Temporary preview files for uploaded images.

Gradio renders images from file paths, so an accepted upload is written to a
temporary file for the lifetime of the image. A :class:`DisplayHandle` owns
that file: it is acquired when an image is accepted and released when the
image is replaced, rejected, reset, or the session ends.
"""

import logging
import mimetypes
import tempfile
from pathlib import Path

from .models import ImageUpload

logger = logging.getLogger(__name__)


class DisplayHandle:
    """Owner of one temporary preview file.

    Release is idempotent.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._released = False

    @classmethod
    def acquire(cls, upload: ImageUpload, directory: Path | None = None) -> "DisplayHandle":
        """Write the upload to a new temporary file and return its handle.

        Args:
            upload: Accepted image
            directory: Directory for the preview file (default: system temp dir)

        Returns:
            Handle owning the new preview file
        """
        if directory is not None:
            directory = Path(directory)
            directory.mkdir(parents=True, exist_ok=True)

        suffix = Path(upload.filename).suffix or mimetypes.guess_extension(upload.media_type) or ""
        with tempfile.NamedTemporaryFile(
            delete=False, dir=directory, prefix="preview-", suffix=suffix
        ) as tmp:
            tmp.write(upload.data)
            path = Path(tmp.name)

        logger.debug(f"Acquired display handle {path} for {upload!r}")
        return cls(path)

    @property
    def path(self) -> Path:
        """Location of the preview file."""
        return self._path

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Delete the preview file. Safe to call more than once."""
        if self._released:
            return
        self._released = True
        try:
            self._path.unlink(missing_ok=True)
            logger.debug(f"Released display handle {self._path}")
        except OSError as e:
            logger.warning(f"Could not remove preview file {self._path}: {e}")

    def __repr__(self) -> str:
        return f"DisplayHandle(path={str(self._path)!r}, released={self._released})"


def clear_preview_dir(directory: Path) -> int:
    """Remove leftover preview files from a directory.

    Args:
        directory: Preview directory to clean

    Returns:
        Number of files removed
    """
    directory = Path(directory)
    if not directory.is_dir():
        return 0

    removed = 0
    for preview in directory.glob("preview-*"):
        if not preview.is_file():
            continue
        try:
            preview.unlink()
            removed += 1
        except OSError as e:
            logger.warning(f"Could not remove preview file {preview}: {e}")

    if removed:
        logger.info(f"Removed {removed} leftover preview file(s) from {directory}")
    return removed
