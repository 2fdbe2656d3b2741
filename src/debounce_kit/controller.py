"""Debounce a callable with leading/trailing edges and an optional ceiling."""

from __future__ import annotations

import functools
import logging
import threading
import types
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .errors import InvalidArgumentError
from .models import DebounceOptions
from .schedulers import Scheduler, select_scheduler
from .state import DebounceState, PendingCall
from .utils.clock import monotonic_ms

logger = logging.getLogger(__name__)

R = TypeVar("R")


class Debounced(Generic[R]):
    """
    Collapses bursts of calls to a function into at most one invocation.

    Calls arriving less than ``wait`` milliseconds apart are treated as one
    burst. The wrapped function runs with the arguments of the most recent
    call, at the start of the burst (``leading``), after it has been quiet
    for ``wait`` (``trailing``), or both. With ``max_wait`` set, a steady
    stream of calls still produces an invocation at least every ``max_wait``.

    Calling the wrapper returns the result of the last real invocation,
    which may come from an earlier call.

    Thread-safe: state changes happen under a lock and the wrapped function
    is called outside it. Re-entrant calls from inside the wrapped function
    are not supported.
    """

    def __init__(
        self,
        func: Callable[..., R],
        wait: Any = None,
        options: Any = None,
        *,
        leading: Any = None,
        trailing: Any = None,
        max_wait: Any = None,
        scheduler: Scheduler | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """
        Initialize the debounced callable.

        Args:
            func: Function to debounce.
            wait: Milliseconds of quiet before the trailing edge. Coerced to a
                  number; junk becomes 0. When omitted and a GLib main loop
                  is running, invocations are frame-synchronized instead.
            options: Mapping with ``leading``, ``trailing`` and ``maxWait``
                     (or ``max_wait``), or a ``DebounceOptions``.
            leading: Invoke at the start of a burst. Overrides ``options``.
            trailing: Invoke after a burst settles. Overrides ``options``.
            max_wait: Longest time an invocation may be deferred while calls
                      keep arriving. Overrides ``options``.
            scheduler: Timer strategy. If None, one is picked once here.
            clock: Millisecond clock. Defaults to the monotonic clock.

        Raises:
            InvalidArgumentError: ``func`` is not callable.
        """
        if not callable(func):
            raise InvalidArgumentError(
                f"Expected a callable, got {type(func).__name__}", reason="not_callable"
            )

        self._func = func
        self._options = DebounceOptions.from_any(
            options, wait=wait, leading=leading, trailing=trailing, max_wait=max_wait
        )
        self._scheduler = scheduler or select_scheduler(
            wait_given="wait" in self._options.model_fields_set
        )
        self._clock = clock or monotonic_ms

        self._lock = threading.Lock()
        # Held while a timer-driven invocation runs; cancel() waits on it.
        self._timer_call_lock = threading.RLock()
        self._state = DebounceState()
        functools.update_wrapper(self, func, updated=())

    @property
    def options(self) -> DebounceOptions:
        """Effective options after coercion."""
        return self._options

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    def __call__(self, *args: Any, **kwargs: Any) -> R | None:
        """Request a call to the wrapped function (debounced)."""
        state = self._state
        pending: PendingCall | None = None

        with self._lock:
            time = self._clock()
            is_invoking = self._should_invoke(time)
            state.record_call(args, kwargs, time)

            if is_invoking:
                if state.timer_handle is None:
                    pending = self._leading_edge(time)
                elif self._options.maxing:
                    # Calls keep landing inside the window; enforce the ceiling.
                    logger.debug("Max wait reached for %s, invoking", self._name)
                    self._start_timer(self._options.wait)
                    pending = state.take_pending(time)
            elif state.timer_handle is None:
                self._start_timer(self._options.wait)

            if pending is None:
                return state.result

        return self._invoke(pending)

    def cancel(self) -> None:
        """
        Cancel the pending invocation, if any, and reset timing state.

        Once this returns, no invocation from the cancelled window runs. A
        timer-driven invocation already executing is waited for.
        """
        with self._timer_call_lock, self._lock:
            self._cancel_timer()
            self._state.reset()
        logger.debug("Cancelled %s", self._name)

    def flush(self) -> R | None:
        """
        Run the pending trailing invocation now.

        Returns the result of that invocation, or the previous result if
        nothing was pending.
        """
        with self._lock:
            if self._state.timer_handle is None:
                return self._state.result
            self._cancel_timer()
            logger.debug("Flushing %s", self._name)
            pending = self._trailing_edge(self._clock())
            if pending is None:
                return self._state.result

        return self._invoke(pending)

    def pending(self) -> bool:
        """Check if a trailing invocation is scheduled."""
        with self._lock:
            return self._state.timer_handle is not None

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        # Decorated methods share one debounced state across instances.
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __repr__(self) -> str:
        opts = self._options
        return (
            f"Debounced({self._name}, wait={opts.wait}, leading={opts.leading}, "
            f"trailing={opts.trailing}, max_wait={opts.effective_max_wait}, "
            f"pending={self.pending()})"
        )

    @property
    def _name(self) -> str:
        return getattr(self._func, "__qualname__", None) or repr(self._func)

    def _should_invoke(self, time: float) -> bool:
        """Decide whether a call or an expiry at ``time`` reaches an edge. Lock held."""
        state = self._state
        if state.last_call_time is None:
            return True

        since_last_call = time - state.last_call_time
        since_last_invoke = time - state.last_invoke_time
        max_wait = self._options.effective_max_wait

        return (
            since_last_call >= self._options.wait
            # Clock went backwards.
            or since_last_call < 0
            or (max_wait is not None and since_last_invoke >= max_wait)
        )

    def _remaining_wait(self, time: float) -> float:
        """Time left until the next edge. Lock held."""
        state = self._state
        assert state.last_call_time is not None
        time_waiting = self._options.wait - (time - state.last_call_time)

        max_wait = self._options.effective_max_wait
        if max_wait is None:
            return time_waiting
        return min(time_waiting, max_wait - (time - state.last_invoke_time))

    def _leading_edge(self, time: float) -> PendingCall | None:
        """Start a new burst. Lock held."""
        self._state.last_invoke_time = time
        self._start_timer(self._options.wait)
        logger.debug("Leading edge for %s", self._name)
        if self._options.leading:
            return self._state.take_pending(time)
        return None

    def _trailing_edge(self, time: float) -> PendingCall | None:
        """End the burst. Timer must already be cleared. Lock held."""
        state = self._state
        logger.debug("Trailing edge for %s", self._name)
        if self._options.trailing and state.last_args is not None:
            return state.take_pending(time)
        state.clear_pending()
        return None

    def _timer_expired(self, seq: int) -> None:
        """Scheduler callback."""
        state = self._state
        with self._lock:
            if seq != state.timer_seq or state.timer_handle is None:
                return  # superseded or cancelled
            state.timer_handle = None

            time = self._clock()
            if not self._should_invoke(time):
                remaining = self._remaining_wait(time)
                logger.debug("Window extended for %s, re-arming in %.1f ms", self._name, remaining)
                self._start_timer(remaining)
                return

            pending = self._trailing_edge(time)
            if pending is None:
                return
            generation = state.generation

        with self._timer_call_lock:
            with self._lock:
                if generation != state.generation:
                    return  # cancelled after the trailing edge was taken
            self._invoke(pending)

    def _start_timer(self, delay_ms: float) -> None:
        """Cancel any outstanding timer and arm a new one. Lock held."""
        self._cancel_timer()
        state = self._state
        seq = state.timer_seq
        state.timer_handle = self._scheduler.schedule(
            functools.partial(self._timer_expired, seq), delay_ms
        )

    def _cancel_timer(self) -> None:
        """Cancel the outstanding timer, if any. Lock held."""
        state = self._state
        if state.timer_handle is not None:
            self._scheduler.cancel(state.timer_handle)
            state.timer_handle = None
        state.timer_seq += 1

    def _invoke(self, pending: PendingCall) -> R:
        """Call the wrapped function outside the lock and remember its result."""
        args, kwargs = pending
        result = self._func(*args, **kwargs)
        with self._lock:
            self._state.result = result
        return result


def debounce(
    func: Callable[..., R],
    wait: Any = None,
    options: Any = None,
    **kwargs: Any,
) -> Debounced[R]:
    """
    Create a debounced version of ``func``.

    See ``Debounced`` for the arguments.

    Example:
        save = debounce(write_settings, 250, {"maxWait": 1000})
    """
    return Debounced(func, wait, options, **kwargs)


def debounced(wait: Any = None, options: Any = None, **kwargs: Any) -> Any:
    """
    Decorator form of ``debounce``.

    Usable bare (``@debounced``) or with arguments
    (``@debounced(100, leading=True)``).
    """
    if callable(wait) and options is None and not kwargs:
        return Debounced(wait)

    def decorator(func: Callable[..., R]) -> Debounced[R]:
        return Debounced(func, wait, options, **kwargs)

    return decorator
