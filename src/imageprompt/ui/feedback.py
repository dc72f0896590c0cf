"""Scheduled auto-clear for transient UI feedback."""

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class FeedbackTimer:
    """Runs one delayed callback at a time on the running event loop.

    Scheduling a new callback cancels the pending one, so a stale timer can
    never clear feedback that a later action turned on.
    """

    def __init__(self):
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        """Whether a callback is scheduled and not yet run or cancelled."""
        return self._handle is not None and not self._handle.cancelled()

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        """Schedule ``callback`` after ``delay`` seconds.

        Must be called from a coroutine or callback running on an event loop.

        Raises:
            RuntimeError: If no event loop is running
        """
        loop = asyncio.get_running_loop()
        self.cancel()
        self._handle = loop.call_later(delay, self._fire, callback)

    def _fire(self, callback: Callable[[], None]) -> None:
        self._handle = None
        callback()

    def cancel(self) -> None:
        """Cancel the pending callback, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
