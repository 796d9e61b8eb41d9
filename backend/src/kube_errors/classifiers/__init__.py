"""Classifiers package - builders that turn raw failures into ErrorDetails."""

from kube_errors.classifiers.base import Classifier, coerce_context, kubeconfig_uri
from kube_errors.classifiers.connection import ConnectionErrorClassifier
from kube_errors.classifiers.rbac import RBACErrorClassifier, can_i_command
from kube_errors.classifiers.not_found import NotFoundErrorClassifier
from kube_errors.classifiers.timeout import TimeoutErrorClassifier, format_duration
from kube_errors.classifiers.api import APIErrorClassifier
from kube_errors.classifiers.generic import UnexpectedErrorClassifier, ValidationErrorClassifier

__all__ = [
    "APIErrorClassifier",
    "Classifier",
    "ConnectionErrorClassifier",
    "NotFoundErrorClassifier",
    "RBACErrorClassifier",
    "TimeoutErrorClassifier",
    "UnexpectedErrorClassifier",
    "ValidationErrorClassifier",
    "can_i_command",
    "coerce_context",
    "format_duration",
    "kubeconfig_uri",
]
