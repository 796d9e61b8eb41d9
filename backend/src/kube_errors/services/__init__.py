"""Services package - export the stateful pieces of the error pipeline."""

from kube_errors.services.metrics import ErrorMetrics
from kube_errors.services.log_sink import DiagnosticLogSink
from kube_errors.services.throttle import THROTTLE_WINDOW_MS, NotificationThrottle
from kube_errors.services.issue_report import IssueTemplateBuilder, encode_uri_component

__all__ = [
    "DiagnosticLogSink",
    "ErrorMetrics",
    "IssueTemplateBuilder",
    "NotificationThrottle",
    "THROTTLE_WINDOW_MS",
    "encode_uri_component",
]
