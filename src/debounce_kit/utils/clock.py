"""Clock used for all elapsed-time math."""

from __future__ import annotations

import time


def monotonic_ms() -> float:
    """Current reading of the monotonic clock in milliseconds."""
    return time.monotonic() * 1000.0
