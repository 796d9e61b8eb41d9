"""Time-windowed gate that suppresses repeated notifications."""

from __future__ import annotations

import threading
import time
from typing import Callable

from kube_errors.contracts.diagnostics import ThrottleEntry
from kube_errors.contracts.errors import ErrorDetails

THROTTLE_WINDOW_MS = 5000

Clock = Callable[[], float]


class NotificationThrottle:
    """
    Keyed on ``"<kind>:<message>"``.

    Only gates display; callers log and count before asking. Entries are
    overwritten on every shown occurrence and never evicted.
    """

    def __init__(self, clock: Clock = time.monotonic):
        self._clock = clock
        self._window_s = THROTTLE_WINDOW_MS / 1000.0
        self._last_seen: dict[str, float] = {}
        self._lock = threading.Lock()

    @property
    def window_ms(self) -> int:
        return THROTTLE_WINDOW_MS

    def should_throttle(self, details: ErrorDetails) -> bool:
        """
        Check and record in one step.

        Returns True when the same key was shown less than the window ago.
        Otherwise stores the current time for the key and returns False.
        """
        key = details.throttle_key
        now = self._clock()
        with self._lock:
            last = self._last_seen.get(key)
            if last is not None and now - last < self._window_s:
                return True
            self._last_seen[key] = now
            return False

    def entries(self) -> list[ThrottleEntry]:
        with self._lock:
            return [ThrottleEntry(key=k, last_seen_at=v) for k, v in self._last_seen.items()]

    def clear(self) -> None:
        with self._lock:
            self._last_seen.clear()

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._last_seen)
