"""Tests for debounced callables on real threading timers."""

import threading
import time
from unittest.mock import MagicMock

from debounce_kit import Debounced, debounce


class TestDebouncedRealTime:
    """Exercise the default ThreadingTimerScheduler with real sleeps."""

    def test_single_call_fires_after_delay(self) -> None:
        """A single call should fire after the delay."""
        results: list[str] = []
        fn = debounce(results.append, 50)

        fn("item1")
        assert fn.pending() is True

        # Wait for debounce to fire
        time.sleep(0.15)

        assert results == ["item1"]
        assert fn.pending() is False

    def test_multiple_calls_fire_once_with_last_args(self) -> None:
        """Multiple rapid calls should result in one invocation."""
        results: list[str] = []
        fn = debounce(results.append, 100)

        fn("item1")
        fn("item2")
        fn("item3")

        assert results == []  # Not fired yet

        time.sleep(0.25)

        assert results == ["item3"]

    def test_timer_resets_on_new_calls(self) -> None:
        """New calls should push the trailing edge back."""
        counter = {"value": 0}
        fn = debounce(lambda: counter.__setitem__("value", counter["value"] + 1), 100)

        fn()
        time.sleep(0.05)  # Half the delay
        fn()
        time.sleep(0.05)  # Half the delay again
        fn()

        # ~100ms have passed but the window keeps being extended
        assert counter["value"] == 0

        time.sleep(0.25)
        assert counter["value"] == 1

    def test_leading_fires_immediately(self) -> None:
        results: list[str] = []
        fn = debounce(results.append, 100, leading=True, trailing=False)

        fn("first")
        fn("second")

        assert results == ["first"]
        time.sleep(0.2)
        assert results == ["first"]

    def test_max_wait_under_continuous_calls(self) -> None:
        """A steady stream still produces invocations every max_wait."""
        results: list[int] = []
        fn = debounce(results.append, 50, max_wait=100)

        for i in range(20):
            fn(i)
            time.sleep(0.02)

        # ~400ms of calls with a 100ms ceiling
        assert len(results) >= 2

        time.sleep(0.15)
        assert results[-1] == 19

    def test_flush_fires_immediately(self) -> None:
        """flush() should fire immediately."""
        callback = MagicMock(return_value="done")
        fn = debounce(callback, 1000)  # Long delay

        fn(1)
        assert fn.flush() == "done"

        callback.assert_called_once_with(1)
        assert fn.pending() is False

    def test_flush_with_no_pending_is_noop(self) -> None:
        """flush() with no pending call should do nothing."""
        callback = MagicMock()
        fn = debounce(callback, 50)

        assert fn.flush() is None
        callback.assert_not_called()

    def test_cancel_prevents_callback(self) -> None:
        """cancel() should prevent the callback from firing."""
        callback = MagicMock()
        fn = debounce(callback, 50)

        fn(1)
        fn.cancel()

        assert fn.pending() is False

        time.sleep(0.1)
        callback.assert_not_called()

    def test_results_carry_across_bursts(self) -> None:
        """Each burst leads with its own args; callers see the latest result."""
        seen: list[str] = []

        def shout(word: str) -> str:
            seen.append(word)
            return word.upper()

        fn = debounce(shout, 50, leading=True)

        assert fn("a") == "A"
        assert fn("b") == "A"  # still inside the window
        time.sleep(0.15)
        assert fn.flush() == "B"  # trailing edge already ran

        assert fn("c") == "C"
        time.sleep(0.15)
        assert seen == ["a", "b", "c"]

    def test_last_call_wins_across_threads(self) -> None:
        """Calls from worker threads are folded into the caller's final call."""
        calls: list[tuple[object, str]] = []
        fn: Debounced[None] = debounce(
            lambda value: calls.append((value, threading.current_thread().name)), 100
        )

        workers = [threading.Thread(target=fn, args=(i,), name=f"worker-{i}") for i in range(8)]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()
        fn("final")

        time.sleep(0.25)

        assert [value for value, _ in calls] == ["final"]
        assert not calls[0][1].startswith("worker-")
