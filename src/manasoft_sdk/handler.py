"""Decorator wiring a Lambda entry point to the response helpers."""

import functools
import json
import logging
from typing import Any, Callable, Dict, Optional

from .context import InvocationContext, set_context
from .notifier import SnsNotifier
from .response import send_api_response

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

INTERNAL_ERROR_BODY = {"message": "Internal server error", "success": False}


def api_gateway_handler(
    notifier: Optional[SnsNotifier] = None,
) -> Callable[[Callable[..., Any]], Callable[[Dict[str, Any], Any], Any]]:
    """Wrap func(event, invocation) as a Lambda handler(event, context).

    The wrapped function answers with
    send_api_response(invocation, status, body, error_body); the handler then
    returns that envelope. An exception escaping the function before it
    responded is turned into a 500, which also notifies the developers.

    Args:
        notifier: Notifier for 5xx reports, read from the environment if omitted
    """

    def decorator(func: Callable[..., Any]) -> Callable[[Dict[str, Any], Any], Any]:
        @functools.wraps(func)
        def wrapper(event: Dict[str, Any], context: Any) -> Any:
            logger.info(f"Event: {json.dumps(event, default=str)}")

            sent = []

            def completion(error: Optional[Exception], response: Any) -> None:
                sent.append(response)

            active_notifier = notifier if notifier is not None else SnsNotifier.from_env()
            invocation = set_context(completion, context, active_notifier)

            try:
                result = func(event, invocation)
            except Exception as e:
                if sent:
                    raise
                logger.error(f"Unhandled exception: {e!s}")
                return _send_internal_error(invocation, e)

            if sent:
                return sent[0]
            return result

        return wrapper

    return decorator


def _send_internal_error(invocation: InvocationContext, exc: Exception) -> Dict[str, Any]:
    error_body = {"error": str(exc), "type": type(exc).__name__}
    return send_api_response(invocation, 500, INTERNAL_ERROR_BODY, error_body)
