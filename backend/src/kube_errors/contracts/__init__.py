"""Contracts package - export key models."""

from kube_errors.contracts.errors import (
    CausingError,
    ErrorAction,
    ErrorContext,
    ErrorDetails,
    ErrorKind,
    ErrorSeverity,
    SideEffect,
)
from kube_errors.contracts.diagnostics import DiagnosticEntry, ThrottleEntry

__all__ = [
    "CausingError",
    "DiagnosticEntry",
    "ErrorAction",
    "ErrorContext",
    "ErrorDetails",
    "ErrorKind",
    "ErrorSeverity",
    "SideEffect",
    "ThrottleEntry",
]
