"""debounce-kit - debounce callables with leading/trailing edges and a max-wait ceiling."""

__version__ = "0.1.0"
__app_id__ = "debounce-kit"

from .controller import Debounced, debounce, debounced
from .errors import DebounceError, InvalidArgumentError
from .models import DebounceOptions
from .schedulers import (
    AsyncioScheduler,
    CallableScheduler,
    GLibIdleScheduler,
    GLibTimeoutScheduler,
    Scheduler,
    ThreadingTimerScheduler,
)

__all__ = [
    "AsyncioScheduler",
    "CallableScheduler",
    "DebounceError",
    "DebounceOptions",
    "Debounced",
    "GLibIdleScheduler",
    "GLibTimeoutScheduler",
    "InvalidArgumentError",
    "Scheduler",
    "ThreadingTimerScheduler",
    "debounce",
    "debounced",
]
