"""Clock-derived record identifiers."""

from __future__ import annotations

import threading
import time

_lock = threading.Lock()
_last_id = 0


def new_id() -> int:
    """Return a millisecond timestamp id, strictly increasing within the process.

    Two records created in the same millisecond get consecutive ids instead of
    colliding.
    """
    global _last_id
    with _lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return candidate
