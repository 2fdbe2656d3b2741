"""Mutable timing state owned by one debounced callable."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PendingCall = tuple[tuple[Any, ...], dict[str, Any]]


@dataclass(slots=True)
class DebounceState:
    """
    Everything a debounced callable remembers between events.

    ``timer_handle`` is the only signal that a trailing invocation is pending.
    ``timer_seq`` numbers the armed timers so that an expiry belonging to a
    superseded or cancelled timer can be recognised and dropped.
    ``generation`` changes on every reset so that a trailing call taken just
    before a cancel can be dropped.
    """

    last_args: tuple[Any, ...] | None = None
    last_kwargs: dict[str, Any] | None = None
    last_call_time: float | None = None
    last_invoke_time: float = 0.0
    timer_handle: Any = None
    timer_seq: int = 0
    generation: int = 0
    result: Any = None

    def record_call(self, args: tuple[Any, ...], kwargs: dict[str, Any], time: float) -> None:
        """Remember the most recent call request."""
        self.last_args = args
        self.last_kwargs = kwargs
        self.last_call_time = time

    def take_pending(self, time: float) -> PendingCall:
        """Consume the recorded call for an invocation happening at ``time``."""
        args = self.last_args or ()
        kwargs = self.last_kwargs or {}
        self.clear_pending()
        self.last_invoke_time = time
        return args, kwargs

    def clear_pending(self) -> None:
        self.last_args = None
        self.last_kwargs = None

    def reset(self) -> None:
        """Return to the quiescent state. The last result is kept."""
        self.clear_pending()
        self.last_call_time = None
        self.last_invoke_time = 0.0
        self.timer_handle = None
        self.generation += 1
