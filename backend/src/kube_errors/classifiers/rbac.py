"""RBAC permission denials."""

from __future__ import annotations

from typing import Any

from kube_errors.classifiers.base import Classifier
from kube_errors.classifiers.raw import as_exception, body_message, error_message
from kube_errors.contracts.errors import ErrorContext, ErrorDetails, ErrorKind, ErrorSeverity


def can_i_command(verb: str, resource: str, namespace: str | None = None) -> str:
    """The kubectl command that checks the denied permission."""
    command = f"kubectl auth can-i {verb} {resource}"
    if namespace:
        command += f" -n {namespace}"
    return command


class RBACErrorClassifier(Classifier):
    """Builds ``Permission denied: Cannot <verb> <resource> ...`` errors."""

    def build_permission_denied(
        self,
        error: Any,
        resource: str,
        verb: str,
        namespace: str | None = None,
    ) -> ErrorDetails:
        scope = f" in namespace '{namespace}'" if namespace else " (cluster-scoped)"
        required = f"Required permission: {resource}.{verb}"
        if namespace:
            required += f" in namespace '{namespace}'"

        return ErrorDetails(
            kind=ErrorKind.RBAC,
            severity=ErrorSeverity.ERROR,
            message=f"Permission denied: Cannot {verb} {resource}{scope}",
            technical_details=body_message(error) or error_message(error),
            status_code=403,
            context=ErrorContext(resource_type=resource, operation=verb, namespace=namespace),
            causing_error=as_exception(error),
            suggestions=[
                required,
                "Check your ServiceAccount permissions",
                "Contact your cluster administrator for access",
                can_i_command(verb, resource, namespace),
            ],
            actions=[self.link_action("RBAC Documentation", self.settings.rbac_docs_url)],
            documentation_url=self.settings.rbac_docs_url,
        )

    async def handle_permission_denied(
        self,
        error: Any,
        resource: str,
        verb: str,
        namespace: str | None = None,
    ) -> None:
        await self.dispatch(self.build_permission_denied(error, resource, verb, namespace))
