"""Millisecond timer backed by ``threading.Timer``."""

from __future__ import annotations

import threading
from collections.abc import Callable

from .base import clamp_delay


class ThreadingTimerScheduler:
    """
    Run callbacks on daemon ``threading.Timer`` threads.

    This is the default when no toolkit main loop is driving the process.
    Callbacks run on the timer thread, so the debounced callable may be
    invoked from a thread other than the one that called it. Exceptions it
    raises there reach ``threading.excepthook``.
    """

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> threading.Timer:
        timer = threading.Timer(clamp_delay(delay_ms) / 1000.0, callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()
