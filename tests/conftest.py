"""Shared fixtures: a fake millisecond clock and a manually driven scheduler."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


class ManualScheduler:
    """Scheduler whose timers fire only when the test advances the clock."""

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.timers: dict[int, tuple[float, Callable[[], None]]] = {}
        self.scheduled_delays: list[float] = []
        self._next_id = 0

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> int:
        self._next_id += 1
        self.timers[self._next_id] = (self.clock.now + delay_ms, callback)
        self.scheduled_delays.append(delay_ms)
        return self._next_id

    def cancel(self, handle: int) -> None:
        self.timers.pop(handle, None)

    def advance_to(self, target: float) -> None:
        """Move the clock to ``target``, firing due timers in order on the way."""
        while True:
            due = [(when, handle) for handle, (when, _) in self.timers.items() if when <= target]
            if not due:
                break
            when, handle = min(due)
            _, callback = self.timers.pop(handle)
            self.clock.now = max(self.clock.now, when)
            callback()
        self.clock.now = max(self.clock.now, target)

    def advance(self, ms: float) -> None:
        self.advance_to(self.clock.now + ms)


class Recorder:
    """Callable that records its calls and returns a value derived from them."""

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.calls: list[tuple[float, tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((self.clock.now, args, kwargs))
        return args[0] if args else None

    @property
    def args(self) -> list[Any]:
        return [args[0] if args else None for _, args, _ in self.calls]

    @property
    def times(self) -> list[float]:
        return [when for when, _, _ in self.calls]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> ManualScheduler:
    return ManualScheduler(clock)


@pytest.fixture
def recorder(clock: FakeClock) -> Recorder:
    return Recorder(clock)
