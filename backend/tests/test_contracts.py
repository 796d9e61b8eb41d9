"""Tests for the error taxonomy models."""

import json

import pytest
from pydantic import ValidationError

from kube_errors.contracts.diagnostics import SEPARATOR, DiagnosticEntry
from kube_errors.contracts.errors import (
    CausingError,
    ErrorAction,
    ErrorContext,
    ErrorDetails,
    ErrorKind,
    ErrorSeverity,
)


def _raise_and_catch() -> ValueError:
    try:
        raise ValueError("bad value")
    except ValueError as exc:
        return exc


class TestEnums:

    def test_kinds_are_closed_set(self):
        assert {k.value for k in ErrorKind} == {
            "CONNECTION", "RBAC", "NOT_FOUND", "API", "TIMEOUT", "VALIDATION", "UNEXPECTED",
        }

    def test_severity_values(self):
        assert [s.value for s in ErrorSeverity] == ["error", "warning", "info"]


class TestErrorContext:

    def test_to_json_skips_missing_fields(self):
        ctx = ErrorContext(cluster="prod", namespace="default")
        assert json.loads(ctx.to_json()) == {"cluster": "prod", "namespace": "default"}

    def test_extra_keys_are_kept(self):
        ctx = ErrorContext(operation="connect", timeout_ms=3000)
        assert ctx.timeout_ms == 3000
        assert json.loads(ctx.to_json()) == {"operation": "connect", "timeout_ms": 3000}

    def test_to_json_is_indented(self):
        assert ErrorContext(cluster="a").to_json() == '{\n  "cluster": "a"\n}'


class TestCausingError:

    def test_from_exception_captures_stack(self):
        causing = CausingError.from_exception(_raise_and_catch())
        assert causing.type_name == "ValueError"
        assert causing.message == "bad value"
        assert "Traceback" in causing.stack
        assert "ValueError: bad value" in causing.stack

    def test_from_unraised_exception(self):
        causing = CausingError.from_exception(RuntimeError("never raised"))
        assert causing.stack == "RuntimeError: never raised"


class TestErrorDetails:

    def test_minimal(self):
        details = ErrorDetails(kind=ErrorKind.TIMEOUT, severity=ErrorSeverity.WARNING, message="slow")
        assert details.technical_details is None
        assert details.context is None
        assert details.suggestions == []
        assert details.actions == []

    def test_required_fields(self):
        with pytest.raises(ValidationError):
            ErrorDetails(kind=ErrorKind.API, message="no severity")

    def test_is_immutable(self):
        details = ErrorDetails(kind=ErrorKind.API, severity=ErrorSeverity.ERROR, message="x")
        with pytest.raises(ValidationError):
            details.message = "y"

    def test_exception_becomes_causing_error(self):
        details = ErrorDetails(
            kind=ErrorKind.UNEXPECTED,
            severity=ErrorSeverity.ERROR,
            message="boom",
            causing_error=_raise_and_catch(),
        )
        assert isinstance(details.causing_error, CausingError)
        assert details.causing_error.message == "bad value"

    def test_context_from_mapping(self):
        details = ErrorDetails(
            kind=ErrorKind.API,
            severity=ErrorSeverity.ERROR,
            message="x",
            context={"cluster": "prod", "resource_type": "Pod"},
        )
        assert details.context.cluster == "prod"
        assert details.context.resource_type == "Pod"

    def test_throttle_key(self):
        details = ErrorDetails(kind=ErrorKind.TIMEOUT, severity=ErrorSeverity.WARNING, message="Operation timed out")
        assert details.throttle_key == "TIMEOUT:Operation timed out"

    def test_find_action(self):
        retry = ErrorAction(label="Retry", side_effect=lambda: None)
        details = ErrorDetails(
            kind=ErrorKind.CONNECTION, severity=ErrorSeverity.ERROR, message="x", actions=[retry]
        )
        assert details.find_action("Retry") is retry
        assert details.find_action("View Logs") is None

    def test_action_requires_callable(self):
        with pytest.raises(ValidationError):
            ErrorAction(label="Retry", side_effect="not callable")


class TestDiagnosticEntry:

    def test_render_minimal_block(self):
        details = ErrorDetails(kind=ErrorKind.TIMEOUT, severity=ErrorSeverity.WARNING, message="slow")
        entry = DiagnosticEntry.from_details(details)
        lines = entry.render()

        assert lines[0] == ""
        assert lines[1] == SEPARATOR
        assert lines[2] == "ERROR: slow"
        assert lines[3] == SEPARATOR
        assert lines[4].startswith("Timestamp: ")
        assert lines[5] == "Type: TIMEOUT"
        assert lines[6] == "Severity: warning"
        assert lines[7:] == [SEPARATOR, ""]

    def test_render_full_block(self):
        details = ErrorDetails(
            kind=ErrorKind.API,
            severity=ErrorSeverity.ERROR,
            message="server error",
            status_code=500,
            context=ErrorContext(cluster="prod"),
            technical_details="etcd timeout",
            causing_error=RuntimeError("etcd"),
        )
        lines = DiagnosticEntry.from_details(details).render()

        assert "Status Code: 500" in lines
        assert lines.index("Context:") < lines.index("Technical Details:") < lines.index("Stack Trace:")
        assert '{\n  "cluster": "prod"\n}' in lines
        assert "etcd timeout" in lines
        assert "RuntimeError: etcd" in lines
