"""Shared pytest fixtures for Image to Prompt tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from imageprompt.core.config import ImagePromptConfig
from imageprompt.ui.controller import InteractionController
from imageprompt.ui.models import ImageUpload

# PNG signature followed by placeholder bytes; nothing decodes it
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"fake-image-data"


class FakeGenerator:
    """Prompt generator double that records calls.

    Returns ``result`` or raises ``error``. When ``gate`` is set, each call
    waits on it before answering, so tests can interleave other actions.
    """

    def __init__(self, result: str = "A generated prompt", error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.gate = None

    async def generate(self, image_base64: str, media_type: str) -> str:
        self.calls.append((image_base64, media_type))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.result


class FakeTimer:
    """Feedback timer double that lets tests fire the callback by hand."""

    def __init__(self):
        self.scheduled: list[tuple[float, object]] = []
        self.cancelled = 0

    @property
    def pending(self) -> bool:
        return bool(self.scheduled)

    def schedule(self, delay, callback) -> None:
        self.scheduled = [(delay, callback)]

    def fire(self) -> None:
        _, callback = self.scheduled.pop()
        callback()

    def cancel(self) -> None:
        self.cancelled += 1
        self.scheduled = []


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def preview_dir(temp_dir: Path) -> Path:
    return temp_dir / "previews"


@pytest.fixture
def test_config(preview_dir: Path) -> ImagePromptConfig:
    """Create a test configuration with a temporary preview directory."""
    return ImagePromptConfig(
        _env_file=None,
        api_key="test-key",
        model_id="gemini-test",
        preview_dir=preview_dir,
        copy_feedback_seconds=2.0,
    )


@pytest.fixture
def png_upload() -> ImageUpload:
    return ImageUpload(data=PNG_BYTES, media_type="image/png", filename="photo.png")


@pytest.fixture
def text_upload() -> ImageUpload:
    return ImageUpload(data=b"shopping list", media_type="text/plain", filename="notes.txt")


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def fake_timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def controller(fake_generator, fake_timer, preview_dir) -> InteractionController:
    """Create a controller wired to test doubles."""
    return InteractionController(
        fake_generator,
        feedback_timer=fake_timer,
        copy_feedback_seconds=2.0,
        preview_dir=preview_dir,
    )
