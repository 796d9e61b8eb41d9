"""Cluster connection failures and a missing kubectl binary."""

from __future__ import annotations

from typing import Any

from kube_errors.classifiers.base import Classifier
from kube_errors.classifiers.raw import as_exception, error_message
from kube_errors.contracts.errors import (
    ErrorAction,
    ErrorContext,
    ErrorDetails,
    ErrorKind,
    ErrorSeverity,
    SideEffect,
)


class ConnectionErrorClassifier(Classifier):

    def build_connection_error(
        self,
        error: Any,
        cluster: str,
        kubeconfig_path: str | None = None,
        on_retry: SideEffect | None = None,
    ) -> ErrorDetails:
        path = kubeconfig_path or self.settings.kubeconfig

        actions: list[ErrorAction] = []
        if on_retry is not None:
            actions.append(ErrorAction(label="Retry", side_effect=on_retry))
        actions.append(self.open_kubeconfig_action(path))
        actions.append(self.link_action("Troubleshooting Guide", self.settings.connection_docs_url))

        return ErrorDetails(
            kind=ErrorKind.CONNECTION,
            severity=ErrorSeverity.ERROR,
            message=f"Cannot connect to cluster '{cluster}'",
            technical_details=error_message(error),
            context=ErrorContext(cluster=cluster, operation="connect"),
            causing_error=as_exception(error),
            suggestions=[
                "Check your network connection",
                f"Verify cluster endpoint in kubeconfig ({path})",
                "Ensure kubectl is installed and accessible",
            ],
            actions=actions,
            documentation_url=self.settings.connection_docs_url,
        )

    def build_kubectl_not_found(self) -> ErrorDetails:
        return ErrorDetails(
            kind=ErrorKind.CONNECTION,
            severity=ErrorSeverity.ERROR,
            message="kubectl executable not found",
            suggestions=[
                "Install kubectl and add it to your system PATH",
                "Restart the editor after installing kubectl",
            ],
            actions=[self.link_action("Installation Guide", self.settings.kubectl_install_url)],
            documentation_url=self.settings.kubectl_install_url,
        )

    async def handle_connection_error(
        self,
        error: Any,
        cluster: str,
        kubeconfig_path: str | None = None,
        on_retry: SideEffect | None = None,
    ) -> None:
        await self.dispatch(self.build_connection_error(error, cluster, kubeconfig_path, on_retry))

    async def handle_kubectl_not_found(self) -> None:
        await self.dispatch(self.build_kubectl_not_found())
