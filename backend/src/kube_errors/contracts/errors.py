"""Error taxonomy shared by classifiers and the dispatcher."""

from __future__ import annotations

import json
import traceback
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorKind(str, Enum):
    """Closed classification of where a failure originated."""
    CONNECTION = "CONNECTION"    # Cluster unreachable, kubectl missing
    RBAC = "RBAC"                # Permission denied
    NOT_FOUND = "NOT_FOUND"      # Requested resource does not exist
    API = "API"                  # Kubernetes API returned an error status
    TIMEOUT = "TIMEOUT"          # Operation exceeded its time limit
    VALIDATION = "VALIDATION"    # Invalid input or configuration
    UNEXPECTED = "UNEXPECTED"    # Anything unclassified


class ErrorSeverity(str, Enum):
    """Presentation priority; selects the notification channel."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


SideEffect = Callable[[], Union[Awaitable[None], None]]


class ErrorContext(BaseModel):
    """Where the error occurred. Extra keys are kept for logging."""

    model_config = ConfigDict(extra="allow", frozen=True)

    cluster: str | None = None
    namespace: str | None = None
    resource_type: str | None = None
    resource_name: str | None = None
    operation: str | None = None

    def to_json(self) -> str:
        """Render the populated fields as indented JSON."""
        return json.dumps(self.model_dump(exclude_none=True), indent=2, default=str)


class ErrorAction(BaseModel):
    """A named remediation step offered alongside a notification."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1)
    side_effect: SideEffect


class CausingError(BaseModel):
    """Serializable stand-in for the exception behind an error."""

    model_config = ConfigDict(frozen=True)

    type_name: str = "Error"
    message: str
    stack: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "CausingError":
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip()
        return cls(type_name=type(exc).__name__, message=str(exc), stack=stack or None)


class ErrorDetails(BaseModel):
    """The single unit of work handed to the dispatcher."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    severity: ErrorSeverity
    message: str

    technical_details: Optional[str] = None
    context: Optional[ErrorContext] = None
    causing_error: Optional[CausingError] = None
    status_code: Optional[int] = None
    suggestions: list[str] = Field(default_factory=list)
    actions: list[ErrorAction] = Field(default_factory=list)
    documentation_url: Optional[str] = None

    @field_validator("causing_error", mode="before")
    @classmethod
    def _wrap_exception(cls, v: Any) -> Any:
        if isinstance(v, BaseException):
            return CausingError.from_exception(v)
        return v

    @property
    def throttle_key(self) -> str:
        """Key identifying repeats of the same error."""
        return f"{self.kind.value}:{self.message}"

    def find_action(self, label: str) -> ErrorAction | None:
        """Return the custom action with the given label, if any."""
        for action in self.actions:
            if action.label == label:
                return action
        return None
