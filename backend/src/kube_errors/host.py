"""Capabilities the host application provides to the error pipeline."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import Protocol

from pydantic import BaseModel

from kube_errors.contracts.errors import ErrorSeverity


class NotificationSurface(Protocol):
    """Shows a notification and resolves with the chosen label (or None)."""
    async def show(
        self, severity: ErrorSeverity, message: str, labels: list[str]
    ) -> str | None: ...


class LogChannel(Protocol):
    """Host output panel the diagnostic log is written to."""
    def append_line(self, line: str) -> None: ...
    def show(self) -> None: ...
    def dispose(self) -> None: ...


class Clipboard(Protocol):
    async def write(self, text: str) -> None: ...


class ExternalOpener(Protocol):
    async def open(self, uri: str) -> None: ...


class CommandRunner(Protocol):
    async def run(self, command_id: str, *args: str) -> None: ...


class HostMetadata(BaseModel):
    """Read-only facts about the running host, used in bug reports."""
    package_version: str = "unknown"
    host_version: str = "unknown"
    platform: str = sys.platform


class InMemoryLogChannel:
    """Log channel that keeps lines in a list."""

    def __init__(self, name: str = "kube9") -> None:
        self.name = name
        self._lines: list[str] = []
        self.shown = 0
        self.disposed = False
        self._lock = threading.Lock()

    def append_line(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)

    def show(self) -> None:
        self.shown += 1

    def dispose(self) -> None:
        self.disposed = True

    @property
    def lines(self) -> list[str]:
        with self._lock:
            return list(self._lines)


class SilentNotificationSurface:
    """Notification surface for non-interactive runs: nothing is ever selected."""

    async def show(
        self, severity: ErrorSeverity, message: str, labels: list[str]
    ) -> str | None:
        return None


class NullClipboard:
    async def write(self, text: str) -> None:
        return None


class NullExternalOpener:
    async def open(self, uri: str) -> None:
        return None


class NullCommandRunner:
    async def run(self, command_id: str, *args: str) -> None:
        return None


@dataclass
class HostServices:
    """Everything the dispatcher and classifiers need from the host."""

    notifications: NotificationSurface
    log_channel: LogChannel
    clipboard: Clipboard
    opener: ExternalOpener
    commands: CommandRunner
    metadata: HostMetadata = field(default_factory=HostMetadata)

    @classmethod
    def headless(cls, metadata: HostMetadata | None = None) -> "HostServices":
        """Build a host with no user interaction."""
        return cls(
            notifications=SilentNotificationSurface(),
            log_channel=InMemoryLogChannel(),
            clipboard=NullClipboard(),
            opener=NullExternalOpener(),
            commands=NullCommandRunner(),
            metadata=metadata or HostMetadata(),
        )
