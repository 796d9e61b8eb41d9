"""
Exceptions raised by kube_errors itself.

These are distinct from the user-facing ErrorDetails values the dispatcher
consumes: they describe failures of the error pipeline (bad wiring, a broken
remediation callback), not failures of the cluster operations it reports.

Each error class implements:
- code: String identifier for the error type
- message: Human-readable description
- context: Dict containing additional contextual information
- retry_hint: Boolean indicating if retry might succeed
"""
from __future__ import annotations
from typing import Any


class KubeErrorsError(Exception):
    """Base exception for all kube_errors failures."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "UNKNOWN_ERROR",
        context: dict[str, Any] | None = None,
        retry_hint: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context) if context else {}
        self.retry_hint = retry_hint

    def to_dict(self) -> dict[str, Any]:
        """Serialize to structured dict."""
        return {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
            "retry_hint": self.retry_hint,
        }


class ConfigurationError(KubeErrorsError):
    """Missing or inconsistent wiring of the error pipeline."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "CONFIGURATION_ERROR",
        context: dict[str, Any] | None = None,
        retry_hint: bool = False,
    ) -> None:
        super().__init__(message, code=code, context=context, retry_hint=retry_hint)


class ActionExecutionError(KubeErrorsError):
    """A remediation action's side effect raised."""

    def __init__(
        self,
        message: str,
        *,
        label: str,
        code: str = "ACTION_FAILED",
        context: dict[str, Any] | None = None,
        retry_hint: bool = True,
    ) -> None:
        ctx = dict(context) if context else {}
        ctx["label"] = label
        super().__init__(message, code=code, context=ctx, retry_hint=retry_hint)
        self.label = label
