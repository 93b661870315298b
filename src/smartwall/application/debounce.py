"""Trailing-edge debounce on top of the asyncio event loop.

Each trigger cancels whatever is pending and schedules the callback again,
so only the last value in a burst of keystrokes is committed. A delay of zero
runs the callback immediately, which is what synchronous callers (the CLI,
tests without a loop) use.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.25


class Debouncer:
    """Cancel-and-restart deferred call.

    Example:
        >>> async def main():
        ...     seen = []
        ...     debouncer = Debouncer(0.05, seen.append)
        ...     for text in ("5", "5.", "5.7", "5.7m"):
        ...         debouncer.trigger(text)
        ...     await asyncio.sleep(0.1)
        ...     return seen
        >>> asyncio.run(main())
        ['5.7m']
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[..., Any],
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if delay < 0:
            raise ValueError("Debounce delay cannot be negative")
        self.delay = delay
        self._callback = callback
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._pending_args: tuple[Any, ...] | None = None
        self._closed = False

    @property
    def pending(self) -> bool:
        """True while a call is scheduled and has not run yet."""
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def trigger(self, *args: Any) -> None:
        """Schedule the callback with args, replacing any pending call.

        Raises:
            RuntimeError: If the debouncer is closed, or if a non-zero delay
                is used with no running event loop and none was given.
        """
        if self._closed:
            raise RuntimeError("Debouncer is closed")
        self.cancel()

        if self.delay == 0:
            self._callback(*args)
            return

        loop = self._loop or asyncio.get_running_loop()
        self._pending_args = args
        self._handle = loop.call_later(self.delay, self._fire)

    def _fire(self) -> None:
        args = self._pending_args or ()
        self._handle = None
        self._pending_args = None
        self._callback(*args)

    def cancel(self) -> bool:
        """Drop the pending call. Returns True if one was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        self._pending_args = None
        return True

    def flush(self) -> bool:
        """Run the pending call now. Returns True if one was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def close(self) -> None:
        """Cancel the pending call and refuse further triggers."""
        if self.cancel():
            logger.debug("Discarded pending debounced call on close")
        self._closed = True
