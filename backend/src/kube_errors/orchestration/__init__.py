"""Orchestration package - export the error dispatcher."""

from kube_errors.orchestration.dispatcher import (
    COPY_ERROR_DETAILS,
    REPORT_ISSUE,
    VIEW_LOGS,
    ErrorDispatcher,
    assemble_action_labels,
    format_error_message,
    handle_error,
)

__all__ = [
    "COPY_ERROR_DETAILS",
    "ErrorDispatcher",
    "REPORT_ISSUE",
    "VIEW_LOGS",
    "assemble_action_labels",
    "format_error_message",
    "handle_error",
]
