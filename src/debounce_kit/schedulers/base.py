"""Scheduler capability consumed by debounced callables."""

from __future__ import annotations

import math
import threading
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

# Longest delay the stdlib timers accept, in milliseconds.
MAX_DELAY_MS = threading.TIMEOUT_MAX * 1000.0


@runtime_checkable
class Scheduler(Protocol):
    """
    Schedule-after-delay / cancel-scheduled pair.

    ``schedule`` must return immediately and run ``callback`` later as a
    separate event, never synchronously from inside ``schedule``.
    """

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> Any:
        """Run ``callback`` roughly ``delay_ms`` from now and return a handle."""
        ...

    def cancel(self, handle: Any) -> None:
        """Cancel a handle previously returned by ``schedule``."""
        ...


def clamp_delay(delay_ms: float) -> float:
    """Clamp a delay into the range the underlying timers accept."""
    if math.isnan(delay_ms) or delay_ms < 0:
        return 0.0
    return min(delay_ms, MAX_DELAY_MS)


class CallableScheduler:
    """
    Adapt a bare pair of functions to the ``Scheduler`` protocol.

    Args:
        schedule_after: Function taking ``(callback, delay_ms)`` and
                        returning a handle (e.g. a wrapper around a toolkit's
                        timeout function).
        cancel_scheduled: Function cancelling such a handle.
    """

    def __init__(
        self,
        schedule_after: Callable[[Callable[[], None], float], Any],
        cancel_scheduled: Callable[[Any], None],
    ) -> None:
        self._schedule_after = schedule_after
        self._cancel_scheduled = cancel_scheduled

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> Any:
        return self._schedule_after(callback, clamp_delay(delay_ms))

    def cancel(self, handle: Any) -> None:
        self._cancel_scheduled(handle)
