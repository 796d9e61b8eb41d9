"""Append-only diagnostic log of every handled error."""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import ClassVar, Literal, Optional

from kube_errors.contracts.diagnostics import DiagnosticEntry
from kube_errors.contracts.errors import ErrorDetails, ErrorSeverity
from kube_errors.errors import ConfigurationError
from kube_errors.host import InMemoryLogChannel, LogChannel
from kube_errors.logging_config import get_logger

logger = get_logger(__name__)

LogLevel = Literal["info", "warn", "error", "debug"]


class DiagnosticLogSink:
    """
    Writes structured error blocks to the host output channel.

    Every entry is also kept in memory and mirrored to structlog, so the
    record survives even when the host channel is never revealed. Entries
    are never rotated or capped.
    """

    _instance: ClassVar[Optional["DiagnosticLogSink"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, channel: LogChannel | None = None) -> None:
        self._owns_channel = channel is None
        self._channel: LogChannel = channel or InMemoryLogChannel()
        self._entries: list[DiagnosticEntry] = []
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls, channel: LogChannel | None = None) -> "DiagnosticLogSink":
        """
        Return the shared sink, creating it on first use.

        A channel passed after creation must be the one already in use;
        call reset() first to rewire.
        """
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls(channel)
            elif channel is not None and channel is not cls._instance.channel:
                raise ConfigurationError(
                    "DiagnosticLogSink is already writing to a different channel",
                    context={"hint": "call DiagnosticLogSink.reset() first"},
                )
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Dispose and drop the shared sink. Used primarily for test isolation."""
        with cls._instance_lock:
            if cls._instance is not None:
                cls._instance.dispose()
            cls._instance = None

    @property
    def channel(self) -> LogChannel:
        return self._channel

    @property
    def entries(self) -> list[DiagnosticEntry]:
        with self._lock:
            return list(self._entries)

    def append(self, details: ErrorDetails) -> DiagnosticEntry:
        """Record one error and write its block to the channel."""
        entry = DiagnosticEntry.from_details(details)
        with self._lock:
            self._entries.append(entry)
            for line in entry.render():
                self._channel.append_line(line)

        log = {
            ErrorSeverity.ERROR: logger.error,
            ErrorSeverity.WARNING: logger.warning,
            ErrorSeverity.INFO: logger.info,
        }[details.severity]
        log(
            "error_logged",
            kind=details.kind.value,
            message=details.message,
            status_code=details.status_code,
        )
        return entry

    def log(self, message: str, level: LogLevel = "info") -> None:
        """Write a single timestamped line."""
        timestamp = datetime.now(timezone.utc).isoformat()
        with self._lock:
            self._channel.append_line(f"[{timestamp}] [{level.upper()}] {message}")

    def reveal(self) -> None:
        """Bring the output channel to the foreground."""
        self._channel.show()

    def dispose(self) -> None:
        """Dispose the channel, unless it was supplied by the caller."""
        if self._owns_channel:
            self._channel.dispose()
