"""Pre-filled bug reports for the external issue tracker."""

from __future__ import annotations

from urllib.parse import quote

from kube_errors.config import Settings, get_settings
from kube_errors.contracts.errors import ErrorDetails
from kube_errors.host import HostMetadata

# Characters encodeURIComponent leaves untouched, beyond quote()'s defaults
_URI_COMPONENT_SAFE = "!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


class IssueTemplateBuilder:
    """Turns an ErrorDetails into a "new issue" URL with title and body."""

    def __init__(self, metadata: HostMetadata | None = None, settings: Settings | None = None):
        self.metadata = metadata or HostMetadata()
        self.settings = settings or get_settings()

    def build_title(self, details: ErrorDetails) -> str:
        excerpt = details.message[: self.settings.issue_title_max_chars]
        return f"[Bug] {details.kind.value}: {excerpt}..."

    def build_body(self, details: ErrorDetails) -> str:
        ctx = details.context
        stack = details.causing_error.stack if details.causing_error else None

        def _field(value: str | None) -> str:
            return value or "N/A"

        lines = [
            "## Bug Report",
            "",
            f"**Error Type:** {details.kind.value}",
            f"**Severity:** {details.severity.value}",
            "",
            "### Description",
            details.message,
            "",
            "### Technical Details",
            "```",
            _field(details.technical_details),
            "```",
            "",
            "### Context",
            f"- Cluster: {_field(ctx.cluster if ctx else None)}",
            f"- Namespace: {_field(ctx.namespace if ctx else None)}",
            f"- Resource: {_field(ctx.resource_type if ctx else None)}/{_field(ctx.resource_name if ctx else None)}",
            f"- Operation: {_field(ctx.operation if ctx else None)}",
            "",
            "### Environment",
            f"- Extension Version: {self.metadata.package_version}",
            f"- Host Version: {self.metadata.host_version}",
            f"- Platform: {self.metadata.platform}",
            "",
            "### Stack Trace",
            "```",
            _field(stack),
            "```",
        ]
        return "\n".join(lines)

    def build_url(self, details: ErrorDetails) -> str:
        title = encode_uri_component(self.build_title(details))
        body = encode_uri_component(self.build_body(details))
        return f"{self.settings.issue_tracker_url}?title={title}&body={body}"
