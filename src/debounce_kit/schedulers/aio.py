"""Scheduler running on an asyncio event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from .base import clamp_delay


class AsyncioScheduler:
    """
    Schedule callbacks with ``loop.call_later``.

    Use from code running on the loop; ``call_later`` is not thread-safe.
    Exceptions raised by the debounced callable from a timer go to the loop's
    exception handler.

    Args:
        loop: Loop to schedule on. If None, the running loop at the time of
              each ``schedule`` call is used.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(clamp_delay(delay_ms) / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()
