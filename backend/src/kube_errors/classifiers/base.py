"""Shared plumbing for the domain classifiers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Union

from kube_errors.config import Settings, get_settings
from kube_errors.contracts.errors import ErrorAction, ErrorContext, ErrorDetails, SideEffect
from kube_errors.host import HostServices
from kube_errors.orchestration.dispatcher import ErrorDispatcher

ContextLike = Union[ErrorContext, Mapping[str, Any], None]


def coerce_context(context: ContextLike, **overrides: Any) -> ErrorContext:
    """Build an ErrorContext from a model or mapping, applying non-null overrides."""
    if isinstance(context, ErrorContext):
        data = context.model_dump(exclude_none=True)
    elif context:
        data = {k: v for k, v in dict(context).items() if v is not None}
    else:
        data = {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ErrorContext(**data)


def kubeconfig_uri(path: str) -> str:
    """file:// URI of the first entry of a KUBECONFIG-style path list."""
    first = path.split(os.pathsep)[0] if path else "~/.kube/config"
    return Path(first).expanduser().resolve().as_uri()


class Classifier:
    """
    Base for classifiers.

    Builders are pure: they return ErrorDetails whose actions look up the
    host only when run. The handle_* coroutines build and then dispatch.
    """

    def __init__(
        self,
        dispatcher: ErrorDispatcher | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self.settings = settings or get_settings()

    @property
    def dispatcher(self) -> ErrorDispatcher:
        return self._dispatcher or ErrorDispatcher.get_instance()

    @property
    def host(self) -> HostServices:
        return self.dispatcher.host

    async def dispatch(self, details: ErrorDetails) -> None:
        await self.dispatcher.handle_error(details)

    def link_action(self, label: str, url: str) -> ErrorAction:
        async def _open() -> None:
            await self.host.opener.open(url)

        return ErrorAction(label=label, side_effect=_open)

    def command_action(self, label: str, command_id: str, *args: str) -> ErrorAction:
        async def _run() -> None:
            await self.host.commands.run(command_id, *args)

        return ErrorAction(label=label, side_effect=_run)

    def open_kubeconfig_action(self, path: str | None = None) -> ErrorAction:
        return self.link_action("Open Kubeconfig", kubeconfig_uri(path or self.settings.kubeconfig))

    def refresh_action(self, label: str, on_refresh: SideEffect | None) -> ErrorAction:
        """Caller callback when given, otherwise the host's refresh command."""
        if on_refresh is not None:
            return ErrorAction(label=label, side_effect=on_refresh)
        return self.command_action(label, self.settings.refresh_command)
