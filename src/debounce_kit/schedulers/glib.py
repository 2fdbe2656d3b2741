"""GLib main loop schedulers (requires PyGObject)."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from .base import clamp_delay

# GLib.timeout_add takes a guint interval.
_MAX_GLIB_INTERVAL = 2**32 - 1


def _glib() -> Any:
    from gi.repository import GLib

    return GLib


def frame_scheduler_available() -> bool:
    """
    Check if a frame-synchronized primitive can be used.

    True when PyGObject is importable and the default GLib main context is
    owned by the current thread, i.e. we are running inside the main loop.
    """
    try:
        GLib = _glib()
    except ImportError:
        return False
    return bool(GLib.MainContext.default().is_owner())


def _once(callback: Callable[[], None]) -> Callable[[], bool]:
    """Wrap a callback for GLib. Returns False to not repeat."""

    def _on_timer() -> bool:
        callback()
        return False

    return _on_timer


def _timeout(callback: Callable[[], None], delay_ms: float) -> int:
    interval = min(math.ceil(clamp_delay(delay_ms)), _MAX_GLIB_INTERVAL)
    return _glib().timeout_add(interval, _once(callback))


class GLibTimeoutScheduler:
    """Millisecond timer on the GLib main loop (``GLib.timeout_add``)."""

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> int:
        return _timeout(callback, delay_ms)

    def cancel(self, handle: int) -> None:
        _glib().source_remove(handle)


class GLibIdleScheduler:
    """
    Frame-synchronized scheduler.

    A zero delay runs the callback on the next idle iteration of the main
    loop (``GLib.idle_add``), after pending redraws. Non-zero delays, such as
    the remaining wait after a window was extended, use ``GLib.timeout_add``.
    """

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> int:
        if clamp_delay(delay_ms) == 0:
            return _glib().idle_add(_once(callback))
        return _timeout(callback, delay_ms)

    def cancel(self, handle: int) -> None:
        _glib().source_remove(handle)
