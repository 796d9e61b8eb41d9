"""Tests for the diagnostic log sink."""

import pytest

from kube_errors.contracts.diagnostics import SEPARATOR
from kube_errors.contracts.errors import ErrorContext, ErrorDetails, ErrorKind, ErrorSeverity
from kube_errors.errors import ConfigurationError
from kube_errors.host import InMemoryLogChannel
from kube_errors.services.log_sink import DiagnosticLogSink


def _details(**overrides) -> ErrorDetails:
    fields = {"kind": ErrorKind.RBAC, "severity": ErrorSeverity.ERROR, "message": "Permission denied"}
    fields.update(overrides)
    return ErrorDetails(**fields)


class TestAppend:

    def test_block_is_bounded_by_separators(self):
        channel = InMemoryLogChannel()
        sink = DiagnosticLogSink(channel)

        sink.append(_details())

        lines = channel.lines
        assert lines[0] == ""
        assert lines[1] == SEPARATOR
        assert lines[2] == "ERROR: Permission denied"
        assert lines[-2] == SEPARATOR
        assert lines[-1] == ""
        assert "Type: RBAC" in lines
        assert "Severity: error" in lines

    def test_optional_fields_written_when_present(self):
        channel = InMemoryLogChannel()
        sink = DiagnosticLogSink(channel)

        sink.append(
            _details(
                status_code=403,
                context=ErrorContext(namespace="default"),
                technical_details="pods is forbidden",
            )
        )

        lines = channel.lines
        assert "Status Code: 403" in lines
        assert "Context:" in lines
        assert "Technical Details:" in lines
        assert "pods is forbidden" in lines
        assert "Stack Trace:" not in lines

    def test_entries_are_kept_in_order(self):
        sink = DiagnosticLogSink(InMemoryLogChannel())
        sink.append(_details(message="first"))
        sink.append(_details(message="second"))

        assert [e.message for e in sink.entries] == ["first", "second"]

    def test_entries_returns_copy(self):
        sink = DiagnosticLogSink(InMemoryLogChannel())
        sink.append(_details())
        sink.entries.clear()
        assert len(sink.entries) == 1


class TestLogLine:

    def test_log_formats_level_and_timestamp(self):
        channel = InMemoryLogChannel()
        sink = DiagnosticLogSink(channel)

        sink.log("Error throttled", "debug")

        line = channel.lines[-1]
        assert line.startswith("[")
        assert "] [DEBUG] Error throttled" in line


class TestLifecycle:

    def test_reveal_shows_channel(self):
        channel = InMemoryLogChannel()
        DiagnosticLogSink(channel).reveal()
        assert channel.shown == 1

    def test_singleton_keeps_its_channel(self):
        channel = InMemoryLogChannel()
        sink = DiagnosticLogSink.get_instance(channel)
        assert DiagnosticLogSink.get_instance(channel) is sink
        assert DiagnosticLogSink.get_instance() is sink
        assert sink.channel is channel

    def test_different_channel_rejected(self):
        DiagnosticLogSink.get_instance()
        with pytest.raises(ConfigurationError) as exc_info:
            DiagnosticLogSink.get_instance(InMemoryLogChannel())
        assert exc_info.value.code == "CONFIGURATION_ERROR"

    def test_reset_leaves_supplied_channel_open(self):
        channel = InMemoryLogChannel()
        first = DiagnosticLogSink.get_instance(channel)
        DiagnosticLogSink.reset()

        assert channel.disposed is False
        assert DiagnosticLogSink.get_instance(channel) is not first

    def test_reset_disposes_own_channel(self):
        sink = DiagnosticLogSink.get_instance()
        DiagnosticLogSink.reset()
        assert sink.channel.disposed is True

    def test_default_channel_is_in_memory(self):
        sink = DiagnosticLogSink()
        assert isinstance(sink.channel, InMemoryLogChannel)
