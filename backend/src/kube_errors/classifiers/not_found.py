"""Resources that disappeared (HTTP 404)."""

from __future__ import annotations

from kube_errors.classifiers.base import Classifier
from kube_errors.contracts.errors import (
    ErrorContext,
    ErrorDetails,
    ErrorKind,
    ErrorSeverity,
    SideEffect,
)


class NotFoundErrorClassifier(Classifier):

    def build_resource_not_found(
        self,
        resource_type: str,
        resource_name: str,
        namespace: str | None = None,
        on_refresh: SideEffect | None = None,
    ) -> ErrorDetails:
        scope = f" in namespace '{namespace}'" if namespace else ""
        return ErrorDetails(
            kind=ErrorKind.NOT_FOUND,
            severity=ErrorSeverity.WARNING,
            message=f"Resource {resource_type}/{resource_name} not found{scope}",
            status_code=404,
            context=ErrorContext(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            ),
            suggestions=[
                "The resource may have been deleted by another user or process",
                "Try refreshing the tree view",
            ],
            actions=[self.refresh_action("Refresh Tree View", on_refresh)],
        )

    async def handle_resource_not_found(
        self,
        resource_type: str,
        resource_name: str,
        namespace: str | None = None,
        on_refresh: SideEffect | None = None,
    ) -> None:
        await self.dispatch(
            self.build_resource_not_found(resource_type, resource_name, namespace, on_refresh)
        )
