"""Timer strategies for debounced callables."""

from . import glib
from .aio import AsyncioScheduler
from .base import CallableScheduler, Scheduler
from .glib import GLibIdleScheduler, GLibTimeoutScheduler
from .timers import ThreadingTimerScheduler


def select_scheduler(wait_given: bool) -> Scheduler:
    """
    Pick the scheduler for a new debounced callable.

    Without an explicit wait, a running GLib main loop is used
    frame-synchronized; otherwise callbacks go through ``threading.Timer``.
    """
    if not wait_given and glib.frame_scheduler_available():
        return GLibIdleScheduler()
    return ThreadingTimerScheduler()


__all__ = [
    "AsyncioScheduler",
    "CallableScheduler",
    "GLibIdleScheduler",
    "GLibTimeoutScheduler",
    "Scheduler",
    "ThreadingTimerScheduler",
    "select_scheduler",
]
