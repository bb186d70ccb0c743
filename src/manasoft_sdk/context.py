"""Per-invocation context holder.

Each Lambda invocation gets its own InvocationContext holding the completion
callback and the Lambda runtime context. It is passed explicitly into the
response formatter and the notifier, so two invocations never share state.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from .notifier import SnsNotifier

# Called as callback(error, response), once per invocation.
CompletionCallback = Callable[[Optional[Exception], Any], None]


@dataclass
class InvocationContext:
    """Handles for one Lambda invocation."""

    callback: Optional[CompletionCallback] = None
    lambda_context: Optional[Any] = None
    notifier: Optional["SnsNotifier"] = None
    waits_for_empty_event_loop: bool = True

    def clear(self) -> None:
        """Drop both handles once the response has been sent."""
        self.callback = None
        self.lambda_context = None


def set_context(
    callback: Optional[CompletionCallback],
    lambda_context: Optional[Any] = None,
    notifier: Optional["SnsNotifier"] = None,
) -> InvocationContext:
    """Store the completion callback and the Lambda context for one invocation.

    Nothing is validated here; the formatter and the notifier check the
    handles they need.

    Args:
        callback: The completion callback
        lambda_context: The Lambda runtime context object
        notifier: SnsNotifier used for 5xx reports of this invocation

    Returns:
        The invocation context to pass to send_api_response and the notifier
    """
    return InvocationContext(callback=callback, lambda_context=lambda_context, notifier=notifier)
