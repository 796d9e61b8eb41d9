"""
ErrorDispatcher: the single entry point every subsystem reports failures to.

Usage:
    from kube_errors.orchestration.dispatcher import ErrorDispatcher

    dispatcher = ErrorDispatcher.get_instance(host)
    await dispatcher.handle_error(details)

Pipeline for each ErrorDetails:
    1. append to the diagnostic log sink
    2. count by kind
    3. throttle check (same kind and message within 5 s are not shown again)
    4. format the message with cluster/namespace/resource context
    5. assemble action labels
    6. show through the host notification surface at the error's severity
    7. run whichever action the user picked

Steps 1-3 never await, so concurrent callers on one event loop cannot
interleave between the throttle check and its update.
"""

from __future__ import annotations

import inspect
import threading
from datetime import datetime, timezone
from typing import Callable, ClassVar, Optional

from kube_errors.config import Settings, get_settings
from kube_errors.contracts.errors import (
    ErrorContext,
    ErrorDetails,
    ErrorKind,
    ErrorSeverity,
)
from kube_errors.errors import ActionExecutionError, ConfigurationError
from kube_errors.host import HostServices
from kube_errors.logging_config import ERROR_CONTEXT_KEYS, error_context, get_logger
from kube_errors.services.issue_report import IssueTemplateBuilder
from kube_errors.services.log_sink import DiagnosticLogSink
from kube_errors.services.metrics import ErrorMetrics
from kube_errors.services.throttle import NotificationThrottle

logger = get_logger(__name__)

VIEW_LOGS = "View Logs"
REPORT_ISSUE = "Report Issue"
COPY_ERROR_DETAILS = "Copy Error Details"

COPIED_CONFIRMATION = "Error details copied to clipboard"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def format_error_message(details: ErrorDetails) -> str:
    """Append "(Cluster: x, Namespace: y, Resource: T/N)" for whatever context is present."""
    ctx = details.context
    if ctx is None:
        return details.message

    parts: list[str] = []
    if ctx.cluster:
        parts.append(f"Cluster: {ctx.cluster}")
    if ctx.namespace:
        parts.append(f"Namespace: {ctx.namespace}")
    if ctx.resource_type and ctx.resource_name:
        parts.append(f"Resource: {ctx.resource_type}/{ctx.resource_name}")

    if not parts:
        return details.message
    return f"{details.message} ({', '.join(parts)})"


def assemble_action_labels(details: ErrorDetails) -> list[str]:
    """Custom labels first, then View Logs, Report Issue (unexpected only), Copy Error Details."""
    labels = [action.label for action in details.actions]
    labels.append(VIEW_LOGS)
    if details.kind == ErrorKind.UNEXPECTED:
        labels.append(REPORT_ISSUE)
    labels.append(COPY_ERROR_DETAILS)
    return labels


class ErrorDispatcher:
    """Logs, counts, throttles, displays and resolves ErrorDetails."""

    _instance: ClassVar[Optional["ErrorDispatcher"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        host: HostServices | None = None,
        *,
        settings: Settings | None = None,
        throttle: NotificationThrottle | None = None,
        timestamp: Callable[[], str] = _utc_timestamp,
    ) -> None:
        self.host = host or HostServices.headless()
        self.settings = settings or get_settings()
        self.log_sink = DiagnosticLogSink.get_instance(self.host.log_channel)
        self.metrics = ErrorMetrics.get_instance()
        self.throttle = throttle or NotificationThrottle()
        self.issues = IssueTemplateBuilder(self.host.metadata, self.settings)
        self._timestamp = timestamp

    @classmethod
    def get_instance(cls, host: HostServices | None = None) -> "ErrorDispatcher":
        """
        Return the process-wide dispatcher, creating it on first use.

        A host passed after creation must be the one already in use;
        call reset() first to rewire.
        """
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls(host)
            elif host is not None and host is not cls._instance.host:
                raise ConfigurationError(
                    "ErrorDispatcher is already initialized with a different host",
                    context={"hint": "call ErrorDispatcher.reset() first"},
                )
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """
        Drop the dispatcher together with its metrics and log sink.

        The host's log channel is left open for the next dispatcher.
        """
        with cls._instance_lock:
            cls._instance = None
        ErrorMetrics.reset()
        DiagnosticLogSink.reset()

    async def handle_error(self, details: ErrorDetails) -> None:
        fields = (
            details.context.model_dump(include=set(ERROR_CONTEXT_KEYS), exclude_none=True)
            if details.context is not None
            else {}
        )
        with error_context(**fields):
            self.log_sink.append(details)
            self.metrics.record_error(details.kind)

            if self.throttle.should_throttle(details):
                self.log_sink.log("Error throttled - not showing notification", "debug")
                logger.debug("error_throttled", key=details.throttle_key)
                return

            await self._display(details)

    async def _display(self, details: ErrorDetails) -> None:
        message = format_error_message(details)
        labels = assemble_action_labels(details)
        choice = await self.host.notifications.show(details.severity, message, labels)
        await self._resolve(choice, details)

    async def _resolve(self, choice: str | None, details: ErrorDetails) -> None:
        if not choice:
            return

        custom = details.find_action(choice)
        try:
            if custom is not None:
                result = custom.side_effect()
                if inspect.isawaitable(result):
                    await result
            elif choice == VIEW_LOGS:
                self.log_sink.reveal()
            elif choice == REPORT_ISSUE:
                await self.report_issue(details)
            elif choice == COPY_ERROR_DETAILS:
                await self.copy_error_details(details)
            else:
                logger.warning("unknown_action_selected", label=choice)
        except Exception as exc:
            await self._report_action_failure(choice, exc, details)

    async def _report_action_failure(
        self, label: str, exc: Exception, details: ErrorDetails
    ) -> None:
        logger.error(
            "error_action_failed",
            label=label,
            kind=details.kind.value,
            error_type=type(exc).__name__,
            error=str(exc),
        )

        # A failing action on a secondary error is only logged
        if details.context is not None and getattr(details.context, "failed_action", None):
            self.log_sink.log(
                f"Action '{label}' failed while handling '{details.message}': {exc}",
                "error",
            )
            return

        failure = ActionExecutionError(f"Action '{label}' failed: {exc}", label=label)
        failure.__cause__ = exc
        ctx = details.context
        secondary = ErrorDetails(
            kind=ErrorKind.UNEXPECTED,
            severity=ErrorSeverity.WARNING,
            message=failure.message,
            technical_details=f"While handling: {details.message}",
            context=ErrorContext(
                cluster=ctx.cluster if ctx else None,
                namespace=ctx.namespace if ctx else None,
                operation=ctx.operation if ctx else None,
                failed_action=label,
            ),
            causing_error=failure,
        )
        await self.handle_error(secondary)

    async def report_issue(self, details: ErrorDetails) -> None:
        """Open the issue tracker with a pre-filled report."""
        await self.host.opener.open(self.issues.build_url(details))

    async def copy_error_details(self, details: ErrorDetails) -> None:
        await self.host.clipboard.write(self.format_details_for_copy(details))
        await self.host.notifications.show(ErrorSeverity.INFO, COPIED_CONFIRMATION, [])

    def format_details_for_copy(self, details: ErrorDetails) -> str:
        lines = [
            f"Error Type: {details.kind.value}",
            f"Severity: {details.severity.value}",
            f"Message: {details.message}",
            f"Timestamp: {self._timestamp()}",
        ]
        if details.status_code:
            lines.append(f"Status Code: {details.status_code}")
        if details.context is not None:
            lines.extend(["", "Context:", details.context.to_json()])
        if details.technical_details:
            lines.extend(["", "Technical Details:", details.technical_details])
        if details.causing_error is not None and details.causing_error.stack:
            lines.extend(["", "Stack Trace:", details.causing_error.stack])
        return "\n".join(lines)


async def handle_error(details: ErrorDetails) -> None:
    """Hand details to the process-wide dispatcher."""
    await ErrorDispatcher.get_instance().handle_error(details)
