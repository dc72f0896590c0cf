"""Clipboard writers for the interaction controller.

The server cannot reach the user's clipboard directly. The controller writes
into a :class:`ClipboardBuffer`; the copy event handler takes the buffered text
and hands it to a browser-side ``navigator.clipboard.writeText`` call.
"""

from typing import Protocol

# Browser-side half of the copy action, chained after the Python handler.
COPY_TO_CLIPBOARD_JS = """
(text) => {
    if (text) {
        navigator.clipboard.writeText(text);
    }
    return text;
}
"""


class ClipboardWriter(Protocol):
    def write(self, text: str) -> None: ...


class ClipboardBuffer:
    """Holds the most recent text written by the controller until taken."""

    def __init__(self):
        self._pending: str | None = None

    def write(self, text: str) -> None:
        self._pending = text

    def take(self) -> str | None:
        """Return and clear the pending text."""
        text, self._pending = self._pending, None
        return text
