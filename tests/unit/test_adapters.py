"""Unit tests for UI value adapters."""

import pytest

from imageprompt.ui.adapters import guess_media_type, upload_from_path


class TestGuessMediaType:
    """Tests for guess_media_type."""

    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("photo.png", "image/png"),
            ("photo.jpg", "image/jpeg"),
            ("anim.gif", "image/gif"),
            ("notes.txt", "text/plain"),
        ],
    )
    def test_known_extensions(self, filename, expected):
        assert guess_media_type(filename) == expected

    def test_unknown_extension(self):
        assert guess_media_type("mystery") == "application/octet-stream"


class TestUploadFromPath:
    """Tests for upload_from_path."""

    def test_reads_file(self, temp_dir):
        path = temp_dir / "photo.png"
        path.write_bytes(b"png-bytes")

        upload = upload_from_path(str(path))

        assert upload.data == b"png-bytes"
        assert upload.media_type == "image/png"
        assert upload.filename == "photo.png"

    def test_type_comes_from_name_not_content(self, temp_dir):
        path = temp_dir / "notes.txt"
        path.write_bytes(b"\x89PNG\r\n\x1a\n")

        upload = upload_from_path(path)

        assert upload.media_type == "text/plain"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_value(self, value):
        assert upload_from_path(value) is None

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(OSError):
            upload_from_path(temp_dir / "gone.png")
