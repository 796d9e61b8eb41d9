"""Records kept by the diagnostic log sink and the notification throttle."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from kube_errors.contracts.errors import ErrorDetails, ErrorKind, ErrorSeverity

SEPARATOR = "=" * 80


class ThrottleEntry(BaseModel):
    """Last time a given (kind, message) pair was shown."""

    key: str
    last_seen_at: float


class DiagnosticEntry(BaseModel):
    """Structured record of one handled error."""

    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    kind: ErrorKind
    severity: ErrorSeverity
    message: str
    status_code: int | None = None
    context_json: str | None = None
    technical_details: str | None = None
    stack: str | None = None

    @classmethod
    def from_details(cls, details: ErrorDetails) -> "DiagnosticEntry":
        return cls(
            kind=details.kind,
            severity=details.severity,
            message=details.message,
            status_code=details.status_code,
            context_json=details.context.to_json() if details.context is not None else None,
            technical_details=details.technical_details,
            stack=details.causing_error.stack if details.causing_error else None,
        )

    def render(self) -> list[str]:
        """Lines of the block written to the output channel."""
        lines = [
            "",
            SEPARATOR,
            f"ERROR: {self.message}",
            SEPARATOR,
            f"Timestamp: {self.timestamp}",
            f"Type: {self.kind.value}",
            f"Severity: {self.severity.value}",
        ]
        if self.status_code:
            lines.append(f"Status Code: {self.status_code}")
        if self.context_json is not None:
            lines.append("Context:")
            lines.append(self.context_json)
        if self.technical_details:
            lines.append("Technical Details:")
            lines.append(self.technical_details)
        if self.stack:
            lines.append("Stack Trace:")
            lines.append(self.stack)
        lines.extend([SEPARATOR, ""])
        return lines
