"""Per-kind error occurrence counters."""

from __future__ import annotations

import threading
from typing import ClassVar, Optional

from kube_errors.contracts.errors import ErrorKind


class ErrorMetrics:
    """
    Process-wide error counters.

    Counts every handled error by kind, including throttled ones.
    Use get_instance() for the shared counter and reset() to drop it.
    """

    _instance: ClassVar[Optional["ErrorMetrics"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._counts: dict[ErrorKind, int] = {}
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "ErrorMetrics":
        """Return the shared counter, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared counter. Used primarily for test isolation."""
        with cls._instance_lock:
            cls._instance = None

    def record_error(self, kind: ErrorKind) -> None:
        with self._lock:
            self._counts[kind] = self._counts.get(kind, 0) + 1

    def get_error_count(self, kind: ErrorKind) -> int:
        """Count for one kind; 0 if it was never recorded."""
        with self._lock:
            return self._counts.get(kind, 0)

    def get_total_errors(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def get_summary(self) -> dict[str, int]:
        """Snapshot keyed by kind value, only kinds seen so far."""
        with self._lock:
            return {kind.value: count for kind, count in self._counts.items()}

    def clear(self) -> None:
        """Zero all counters."""
        with self._lock:
            self._counts.clear()
