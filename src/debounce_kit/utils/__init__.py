"""Small helpers shared across debounce-kit."""

from .clock import monotonic_ms
from .coerce import to_delay, to_flag, to_number

__all__ = ["monotonic_ms", "to_delay", "to_flag", "to_number"]
