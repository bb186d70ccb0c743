"""Tests for the context module."""

from unittest.mock import MagicMock

from src.manasoft_sdk.context import InvocationContext, set_context
from src.manasoft_sdk.notifier import SnsNotifier


class TestSetContext:
    """Tests for set_context and InvocationContext."""

    def test_set_context_stores_handles(self, lambda_context: MagicMock) -> None:
        """Test both handles are stored without validation."""
        callback = MagicMock()

        context = set_context(callback, lambda_context)

        assert isinstance(context, InvocationContext)
        assert context.callback is callback
        assert context.lambda_context is lambda_context
        assert context.notifier is None
        assert context.waits_for_empty_event_loop is True

        # Nothing is checked at this point
        empty = set_context(None)
        assert empty.callback is None
        assert empty.lambda_context is None

    def test_set_context_returns_new_object(self) -> None:
        """Test each call gives an independent context."""
        assert set_context(MagicMock(), MagicMock()) is not set_context(MagicMock(), MagicMock())

    def test_clear(self, lambda_context: MagicMock) -> None:
        """Test clear drops both handles."""
        context = set_context(MagicMock(), lambda_context)

        context.clear()

        assert context.callback is None
        assert context.lambda_context is None

    def test_set_context_stores_notifier(self, lambda_context: MagicMock) -> None:
        """Test the notifier for 5xx reports is kept on the context."""
        notifier = SnsNotifier(topic_arn="arn:aws:sns:eu-west-1:123456789012:topic")

        context = set_context(MagicMock(), lambda_context, notifier)

        assert context.notifier is notifier
        context.clear()
        assert context.notifier is notifier
