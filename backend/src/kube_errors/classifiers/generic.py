"""Unexpected failures and invalid input."""

from __future__ import annotations

from typing import Any

from kube_errors.classifiers.base import Classifier, ContextLike, coerce_context
from kube_errors.classifiers.raw import as_exception, error_message
from kube_errors.contracts.errors import ErrorDetails, ErrorKind, ErrorSeverity


class UnexpectedErrorClassifier(Classifier):
    """Catch-all; notifications for these offer Report Issue."""

    def build_unexpected(
        self,
        error: Any,
        operation: str,
        context: ContextLike = None,
    ) -> ErrorDetails:
        return ErrorDetails(
            kind=ErrorKind.UNEXPECTED,
            severity=ErrorSeverity.ERROR,
            message=f"Unexpected error during {operation}",
            technical_details=error_message(error),
            context=coerce_context(context, operation=operation),
            causing_error=as_exception(error),
            suggestions=[
                "Check the logs for more details",
                "Report the issue if it keeps happening",
            ],
        )

    async def handle_unexpected(
        self,
        error: Any,
        operation: str,
        context: ContextLike = None,
    ) -> None:
        await self.dispatch(self.build_unexpected(error, operation, context))


class ValidationErrorClassifier(Classifier):

    def build_invalid_input(
        self,
        message: str,
        field: str | None = None,
        reason: str | None = None,
        context: ContextLike = None,
    ) -> ErrorDetails:
        text = f"Invalid {field}: {message}" if field else message
        return ErrorDetails(
            kind=ErrorKind.VALIDATION,
            severity=ErrorSeverity.WARNING,
            message=text,
            technical_details=reason,
            context=coerce_context(context) if context else None,
            suggestions=["Correct the highlighted value and try again"],
        )

    async def handle_invalid_input(
        self,
        message: str,
        field: str | None = None,
        reason: str | None = None,
        context: ContextLike = None,
    ) -> None:
        await self.dispatch(self.build_invalid_input(message, field, reason, context))
