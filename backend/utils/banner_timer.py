"""Cancellable one-shot timer used to auto-hide the success banner."""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class BannerTimer:
    """
    Schedules a single callback on the running event loop.

    Starting the timer again replaces any callback still pending, so a stale
    hide from an earlier success never fires after a newer one.
    """

    def __init__(self, timeout: float = 5.0):
        """
        Initialize banner timer.

        Args:
            timeout: Seconds between start() and the callback
        """
        if timeout < 0:
            raise ValueError(f"timeout must not be negative, got {timeout}")
        self.timeout = timeout
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        """Whether a callback is scheduled and has not fired or been cancelled."""
        return self._handle is not None

    def start(self, callback: Callable[[], None]):
        """Schedule callback after the timeout, replacing any pending one."""
        self.cancel()
        loop = asyncio.get_running_loop()
        logger.debug(f"Banner timer: hiding in {self.timeout:.1f}s")
        self._handle = loop.call_later(self.timeout, self._fire, callback)

    def cancel(self) -> bool:
        """Cancel the pending callback. Returns True if one was pending."""
        if self._handle is None:
            return False

        self._handle.cancel()
        self._handle = None
        logger.debug("Banner timer: cancelled")
        return True

    def _fire(self, callback: Callable[[], None]):
        self._handle = None
        callback()
