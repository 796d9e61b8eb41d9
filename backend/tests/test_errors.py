"""
Unit tests for the KubeErrorsError hierarchy.
"""
from kube_errors.errors import ActionExecutionError, ConfigurationError, KubeErrorsError


class TestKubeErrorsErrorBase:
    """Test the base KubeErrorsError class functionality."""

    def test_initialization_minimal(self):
        error = KubeErrorsError("Test message")
        assert error.code == "UNKNOWN_ERROR"
        assert error.message == "Test message"
        assert error.context == {}
        assert not error.retry_hint

    def test_initialization_with_all_params(self):
        context = {"key": "value"}
        error = KubeErrorsError("Test message", code="CUSTOM_CODE", context=context, retry_hint=True)
        assert error.code == "CUSTOM_CODE"
        assert error.context == context
        assert error.retry_hint is True

    def test_context_is_copied(self):
        context = {"key": "value"}
        error = KubeErrorsError("Test message", context=context)
        context["key"] = "changed"
        assert error.context == {"key": "value"}

    def test_to_dict_serialization(self):
        error = KubeErrorsError("Test message", code="SERIALIZE_TEST", context={"a": 1})
        assert error.to_dict() == {
            "code": "SERIALIZE_TEST",
            "message": "Test message",
            "context": {"a": 1},
            "retry_hint": False,
        }

    def test_str_representation(self):
        assert str(KubeErrorsError("Test message")) == "Test message"


class TestConfigurationError:

    def test_defaults(self):
        error = ConfigurationError("Dispatcher already wired")
        assert error.code == "CONFIGURATION_ERROR"
        assert not error.retry_hint
        assert isinstance(error, KubeErrorsError)


class TestActionExecutionError:

    def test_label_is_recorded(self):
        error = ActionExecutionError("Action 'Retry' failed: boom", label="Retry")
        assert error.code == "ACTION_FAILED"
        assert error.label == "Retry"
        assert error.context["label"] == "Retry"
        assert error.retry_hint is True

    def test_label_merged_into_context(self):
        error = ActionExecutionError("failed", label="Refresh", context={"cluster": "prod"})
        assert error.to_dict()["context"] == {"cluster": "prod", "label": "Refresh"}
