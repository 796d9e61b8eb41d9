"""Kubernetes API failures, routed by HTTP status code."""

from __future__ import annotations

import json
from typing import Any

from kube_errors.classifiers.base import Classifier, ContextLike, coerce_context
from kube_errors.classifiers.not_found import NotFoundErrorClassifier
from kube_errors.classifiers.raw import (
    as_exception,
    body_message,
    body_of,
    error_message,
    header,
    status_code_of,
)
from kube_errors.classifiers.rbac import RBACErrorClassifier
from kube_errors.config import Settings
from kube_errors.contracts.errors import (
    ErrorAction,
    ErrorDetails,
    ErrorKind,
    ErrorSeverity,
    SideEffect,
)
from kube_errors.orchestration.dispatcher import ErrorDispatcher

DEFAULT_RETRY_AFTER = "60"


class APIErrorClassifier(Classifier):
    """
    Status router.

    401 unauthorized, 403 RBAC, 404 not found, 409 conflict, 429 rate limit,
    5xx server error; anything else becomes a generic API error carrying the
    raw status and response body.
    """

    def __init__(
        self,
        dispatcher: ErrorDispatcher | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(dispatcher, settings)
        self.rbac = RBACErrorClassifier(dispatcher, self.settings)
        self.not_found = NotFoundErrorClassifier(dispatcher, self.settings)

    def classify(
        self,
        error: Any,
        operation: str,
        context: ContextLike = None,
        on_retry: SideEffect | None = None,
        on_refresh: SideEffect | None = None,
    ) -> ErrorDetails:
        status = status_code_of(error)
        ctx = coerce_context(context)

        if status == 401:
            return self.build_unauthorized(error)
        if status == 403:
            return self.rbac.build_permission_denied(
                error,
                resource=ctx.resource_type or "resources",
                verb=operation,
                namespace=ctx.namespace,
            )
        if status == 404:
            return self.not_found.build_resource_not_found(
                ctx.resource_type or "Resource",
                ctx.resource_name or "unknown",
                ctx.namespace,
                on_refresh,
            )
        if status == 409:
            return self.build_conflict(error, context, on_refresh)
        if status == 429:
            return self.build_rate_limit(error)
        if status is not None and status >= 500:
            return self.build_server_error(error, operation, context, on_retry)
        return self.build_generic(error, operation, context)

    def build_unauthorized(self, error: Any) -> ErrorDetails:
        return ErrorDetails(
            kind=ErrorKind.API,
            severity=ErrorSeverity.ERROR,
            message="Authentication failed: Invalid or expired credentials",
            technical_details=body_message(error),
            status_code=401,
            causing_error=as_exception(error),
            suggestions=[
                "Check your kubeconfig authentication settings",
                "You may need to refresh your cluster credentials",
                "Verify your authentication token is valid",
            ],
            actions=[self.open_kubeconfig_action()],
        )

    def build_conflict(
        self,
        error: Any,
        context: ContextLike = None,
        on_refresh: SideEffect | None = None,
    ) -> ErrorDetails:
        return ErrorDetails(
            kind=ErrorKind.API,
            severity=ErrorSeverity.WARNING,
            message="Resource conflict: Resource already exists or has been modified",
            technical_details=body_message(error),
            status_code=409,
            context=coerce_context(context) if context else None,
            causing_error=as_exception(error),
            suggestions=[
                "The resource may have been updated by another user",
                "Try refreshing and retrying the operation",
            ],
            actions=[self.refresh_action("Refresh", on_refresh)],
        )

    def build_rate_limit(self, error: Any) -> ErrorDetails:
        retry_after = header(error, "retry-after") or DEFAULT_RETRY_AFTER
        return ErrorDetails(
            kind=ErrorKind.API,
            severity=ErrorSeverity.WARNING,
            message="API rate limit exceeded",
            technical_details=f"Retry after {retry_after} seconds",
            status_code=429,
            causing_error=as_exception(error),
            suggestions=[
                "Too many requests sent to the cluster",
                f"Wait {retry_after} seconds before retrying",
            ],
        )

    def build_server_error(
        self,
        error: Any,
        operation: str,
        context: ContextLike = None,
        on_retry: SideEffect | None = None,
    ) -> ErrorDetails:
        actions: list[ErrorAction] = []
        if on_retry is not None:
            actions.append(ErrorAction(label="Retry", side_effect=on_retry))

        return ErrorDetails(
            kind=ErrorKind.API,
            severity=ErrorSeverity.ERROR,
            message="Cluster internal error: The Kubernetes API encountered an error",
            technical_details=body_message(error),
            status_code=status_code_of(error),
            context=coerce_context(context, operation=operation),
            causing_error=as_exception(error),
            suggestions=[
                "This may be a temporary cluster issue",
                "Check cluster health or contact administrator",
            ],
            actions=actions,
        )

    def build_generic(
        self,
        error: Any,
        operation: str,
        context: ContextLike = None,
    ) -> ErrorDetails:
        status = status_code_of(error)
        body = body_of(error)
        if body:
            technical = body if isinstance(body, str) else json.dumps(body, indent=2, default=str)
        else:
            technical = str(error)

        return ErrorDetails(
            kind=ErrorKind.API,
            severity=ErrorSeverity.ERROR,
            message=f"API Error ({status if status is not None else 'unknown'}): {error_message(error)}",
            technical_details=technical,
            status_code=status,
            context=coerce_context(context, operation=operation),
            causing_error=as_exception(error),
            documentation_url=self.settings.api_docs_url,
        )

    async def handle_api_error(
        self,
        error: Any,
        operation: str,
        context: ContextLike = None,
        on_retry: SideEffect | None = None,
        on_refresh: SideEffect | None = None,
    ) -> None:
        await self.dispatch(self.classify(error, operation, context, on_retry, on_refresh))
