"""Dependency injection helpers."""

from __future__ import annotations

from dataclasses import dataclass

from kube_errors.classifiers import (
    APIErrorClassifier,
    ConnectionErrorClassifier,
    NotFoundErrorClassifier,
    RBACErrorClassifier,
    TimeoutErrorClassifier,
    UnexpectedErrorClassifier,
    ValidationErrorClassifier,
)
from kube_errors.config import Settings, get_settings
from kube_errors.host import (
    Clipboard,
    CommandRunner,
    ExternalOpener,
    HostMetadata,
    HostServices,
    InMemoryLogChannel,
    LogChannel,
    NotificationSurface,
    NullClipboard,
    NullCommandRunner,
    NullExternalOpener,
    SilentNotificationSurface,
)
from kube_errors.logging_config import configure_logging
from kube_errors.orchestration.dispatcher import ErrorDispatcher


@dataclass
class Classifiers:
    """One classifier per error domain, all sharing a dispatcher."""
    connection: ConnectionErrorClassifier
    rbac: RBACErrorClassifier
    not_found: NotFoundErrorClassifier
    timeout: TimeoutErrorClassifier
    api: APIErrorClassifier
    unexpected: UnexpectedErrorClassifier
    validation: ValidationErrorClassifier


def create_host_services(
    notifications: NotificationSurface | None = None,
    log_channel: LogChannel | None = None,
    clipboard: Clipboard | None = None,
    opener: ExternalOpener | None = None,
    commands: CommandRunner | None = None,
    metadata: HostMetadata | None = None,
    settings: Settings | None = None,
) -> HostServices:
    """Bundle host capabilities, filling gaps with non-interactive defaults."""
    _settings = settings or get_settings()
    return HostServices(
        notifications=notifications or SilentNotificationSurface(),
        log_channel=log_channel or InMemoryLogChannel(_settings.output_channel_name),
        clipboard=clipboard or NullClipboard(),
        opener=opener or NullExternalOpener(),
        commands=commands or NullCommandRunner(),
        metadata=metadata or HostMetadata(),
    )


def create_dispatcher(host: HostServices | None = None) -> ErrorDispatcher:
    """Configure logging and return the process-wide dispatcher."""
    configure_logging(get_settings().log_level)
    return ErrorDispatcher.get_instance(host)


def create_classifiers(
    dispatcher: ErrorDispatcher | None = None,
    settings: Settings | None = None,
) -> Classifiers:
    """Create every classifier bound to one dispatcher."""
    _settings = settings or get_settings()
    return Classifiers(
        connection=ConnectionErrorClassifier(dispatcher, _settings),
        rbac=RBACErrorClassifier(dispatcher, _settings),
        not_found=NotFoundErrorClassifier(dispatcher, _settings),
        timeout=TimeoutErrorClassifier(dispatcher, _settings),
        api=APIErrorClassifier(dispatcher, _settings),
        unexpected=UnexpectedErrorClassifier(dispatcher, _settings),
        validation=ValidationErrorClassifier(dispatcher, _settings),
    )
