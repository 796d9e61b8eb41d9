"""Operations that exceeded their time limit."""

from __future__ import annotations

import math

from kube_errors.classifiers.base import Classifier
from kube_errors.contracts.errors import (
    ErrorAction,
    ErrorContext,
    ErrorDetails,
    ErrorKind,
    ErrorSeverity,
    SideEffect,
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_duration(ms: float) -> str:
    """
    Human-readable duration.

    >>> format_duration(500)
    '500ms'
    >>> format_duration(5000)
    '5 seconds'
    >>> format_duration(120000)
    '2 minutes'
    """
    if ms < 1000:
        shown = int(ms) if float(ms).is_integer() else ms
        return f"{shown}ms"
    if ms < 60000:
        return f"{_round_half_up(ms / 1000)} seconds"
    return f"{_round_half_up(ms / 60000)} minutes"


class TimeoutErrorClassifier(Classifier):

    def build_timeout(
        self,
        operation: str,
        duration_ms: float,
        on_retry: SideEffect | None = None,
    ) -> ErrorDetails:
        actions: list[ErrorAction] = []
        if on_retry is not None:
            actions.append(ErrorAction(label="Retry", side_effect=on_retry))
        actions.append(
            self.command_action(
                "Increase Timeout",
                self.settings.open_settings_command,
                self.settings.timeout_setting_key,
            )
        )

        return ErrorDetails(
            kind=ErrorKind.TIMEOUT,
            severity=ErrorSeverity.WARNING,
            message=f"Operation timed out after {format_duration(duration_ms)}",
            context=ErrorContext(operation=operation, timeout_ms=duration_ms),
            suggestions=[
                "The cluster may be slow to respond",
                "Check your network connection",
                "Consider increasing the timeout in settings",
            ],
            actions=actions,
        )

    async def handle_timeout(
        self,
        operation: str,
        duration_ms: float,
        on_retry: SideEffect | None = None,
    ) -> None:
        await self.dispatch(self.build_timeout(operation, duration_ms, on_retry))
