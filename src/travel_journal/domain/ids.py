"""Time-based identifier generation."""

import threading
import time

_lock = threading.Lock()
_last_ms = 0


def new_id(prefix: str = "") -> str:
    """Return a millisecond timestamp id, strictly increasing per process."""
    global _last_ms  # noqa: PLW0603
    with _lock:
        now_ms = time.time_ns() // 1_000_000
        _last_ms = max(now_ms, _last_ms + 1)
        value = _last_ms
    return f"{prefix}{value}"
