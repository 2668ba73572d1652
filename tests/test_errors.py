"""Tests for error helpers."""

from textual_greeting import OperationFailedError, failure_message


class TestOperationFailedError:
    def test_keeps_message(self):
        exc = OperationFailedError("Network error")

        assert exc.message == "Network error"
        assert str(exc) == "Network error"

    def test_message_is_optional(self):
        exc = OperationFailedError()

        assert exc.message is None
        assert str(exc) == ""


class TestFailureMessage:
    def test_uses_exception_text(self):
        assert failure_message(ValueError("bad value")) == "bad value"

    def test_missing_message(self):
        assert failure_message(Exception()) == "Unknown error"
        assert failure_message(OperationFailedError()) == "Unknown error"

    def test_empty_message(self):
        assert failure_message(Exception("")) == "Unknown error"

    def test_custom_default(self):
        assert failure_message(Exception(), "nope") == "nope"
