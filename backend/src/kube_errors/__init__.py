"""Centralized error classification, throttling and remediation for kube9."""

from kube_errors.contracts import (
    CausingError,
    ErrorAction,
    ErrorContext,
    ErrorDetails,
    ErrorKind,
    ErrorSeverity,
)
from kube_errors.orchestration import ErrorDispatcher, handle_error

__all__ = [
    "CausingError",
    "ErrorAction",
    "ErrorContext",
    "ErrorDetails",
    "ErrorDispatcher",
    "ErrorKind",
    "ErrorSeverity",
    "handle_error",
]
