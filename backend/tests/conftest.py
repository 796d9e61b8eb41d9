"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest
import structlog

import kube_errors.logging_config as logging_config_module
from kube_errors.config import get_settings
from kube_errors.contracts.errors import ErrorSeverity
from kube_errors.host import HostMetadata, HostServices, InMemoryLogChannel
from kube_errors.logging_config import configure_logging
from kube_errors.orchestration.dispatcher import ErrorDispatcher
from kube_errors.services.throttle import NotificationThrottle

FIXED_TIMESTAMP = "2024-05-01T12:00:00+00:00"


class RecordingNotificationSurface:
    """Test double for the host notification surface.

    Records every call and answers with queued choices (None once empty).
    """

    def __init__(self) -> None:
        self.calls: list[tuple[ErrorSeverity, str, list[str]]] = []
        self.choices: list[str | None] = []

    async def show(self, severity: ErrorSeverity, message: str, labels: list[str]) -> str | None:
        self.calls.append((severity, message, list(labels)))
        if self.choices:
            return self.choices.pop(0)
        return None

    def shown(self, severity: ErrorSeverity | None = None) -> list[tuple[ErrorSeverity, str, list[str]]]:
        return [c for c in self.calls if severity is None or c[0] == severity]


class RecordingClipboard:
    def __init__(self) -> None:
        self.writes: list[str] = []

    async def write(self, text: str) -> None:
        self.writes.append(text)


class RecordingOpener:
    def __init__(self) -> None:
        self.opened: list[str] = []

    async def open(self, uri: str) -> None:
        self.opened.append(uri)


class RecordingCommandRunner:
    def __init__(self) -> None:
        self.commands: list[tuple[str, tuple[str, ...]]] = []

    async def run(self, command_id: str, *args: str) -> None:
        self.commands.append((command_id, args))


class FakeClock:
    """Monotonic clock advanced by hand, in seconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000.0


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure structlog once for the test session."""
    configure_logging(log_level="DEBUG")


@pytest.fixture(autouse=True)
def reset_state():
    """Reset process-wide singletons and cached settings around each test."""
    logging_config_module._CONFIGURED = False
    get_settings.cache_clear()
    ErrorDispatcher.reset()
    structlog.contextvars.clear_contextvars()
    yield
    ErrorDispatcher.reset()
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def notifications() -> RecordingNotificationSurface:
    return RecordingNotificationSurface()


@pytest.fixture
def host(notifications: RecordingNotificationSurface) -> HostServices:
    return HostServices(
        notifications=notifications,
        log_channel=InMemoryLogChannel(),
        clipboard=RecordingClipboard(),
        opener=RecordingOpener(),
        commands=RecordingCommandRunner(),
        metadata=HostMetadata(package_version="1.2.3", host_version="1.90.0", platform="linux"),
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def dispatcher(host: HostServices, clock: FakeClock) -> ErrorDispatcher:
    return ErrorDispatcher(
        host,
        throttle=NotificationThrottle(clock=clock),
        timestamp=lambda: FIXED_TIMESTAMP,
    )
