"""API Gateway proxy responses.

send_api_response wraps a status code and a JSON body into the envelope the
Lambda proxy integration expects and hands it to the invocation's completion
callback. 5xx responses are also reported to the developers' SNS topic.
"""

import json
import logging
from typing import Any, Dict, Optional

from .context import InvocationContext
from .errors import (
    InvalidResponseBodyError,
    InvalidStatusCodeError,
    ManasoftSdkError,
    MissingCallbackError,
    MissingLambdaContextError,
    MissingResponseBodyError,
    MissingStatusCodeError,
)
from .notifier import SnsNotifier

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# Constants
CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
SERVER_ERROR_SUBJECT = "Api gateway 5xx error"


def parse_status_code(status_code: Any) -> int:
    """Parse the status code as an integer.

    Args:
        status_code: An int or a numeric string

    Returns:
        The integer status code

    Raises:
        InvalidStatusCodeError: If the value does not parse to an integer
    """
    if isinstance(status_code, bool):
        raise InvalidStatusCodeError(status_code)
    try:
        return int(status_code)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidStatusCodeError(status_code) from e


def serialize(value: Any) -> str:
    """Serialize value the way JSON.stringify does; Decimals and datetimes become strings."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def build_api_response(status_code: int, response_body: Any) -> Dict[str, Any]:
    """Return the proxy response envelope for status_code and response_body."""
    return {
        "headers": dict(CORS_HEADERS),
        "statusCode": status_code,
        "body": serialize(response_body),
    }


def is_server_error(status_code: int) -> bool:
    return str(status_code)[0] == "5"


def build_error_report(error_body: Any, api_response: Dict[str, Any]) -> str:
    """Describe a 5xx error and the response the client received."""
    return (
        "Error : \n"
        f"{serialize(error_body)}"
        "\n\n---------\n"
        "Client received this 5xx api response : \n"
        f"{serialize(api_response)}"
    )


def _validate(context: InvocationContext, status_code: Any, response_body: Any) -> int:
    if context.callback is None:
        raise MissingCallbackError()
    if context.lambda_context is None:
        raise MissingLambdaContextError()
    if not status_code:
        raise MissingStatusCodeError()
    if response_body is None:
        raise MissingResponseBodyError()

    int_status_code = parse_status_code(status_code)

    if not isinstance(response_body, (dict, list)):
        raise InvalidResponseBodyError(response_body)

    return int_status_code


def _notify_server_error(
    context: InvocationContext,
    notifier: SnsNotifier,
    error_body: Any,
    api_response: Dict[str, Any],
) -> None:
    def on_published(error: Optional[ManasoftSdkError], data: Optional[Dict[str, Any]]) -> None:
        if error is not None:
            logger.error(
                "<!>Warning : sns related error, no email notification posted "
                f"to report this 5xx error.<!> {error!s}"
            )
        else:
            logger.info(
                "A notification message was posted to notify the developers "
                "of the occurred api error."
            )

    try:
        notifier.send_sns_notification(
            context,
            build_error_report(error_body, api_response),
            SERVER_ERROR_SUBJECT,
            on_published,
        )
    except Exception as e:
        # The client still gets its 5xx response.
        logger.error(f"Unexpected error while reporting a 5xx response: {e!s}")


def send_api_response(
    context: InvocationContext,
    status_code: Any,
    response_body: Any,
    error_body: Any = None,
    notifier: Optional[SnsNotifier] = None,
) -> Dict[str, Any]:
    """Send the API Gateway proxy response for this invocation.

    The completion callback stored in context is called exactly once with
    (None, envelope) and the context is cleared. For 5xx status
    codes a report built from error_body and the envelope is published first;
    a publish failure is logged and does not change the response.

    Args:
        context: The invocation context returned by set_context
        status_code: HTTP status code, as an int or a numeric string
        response_body: JSON object or array sent to the client
        error_body: Details for the developers, only used for 5xx responses
        notifier: Notifier for 5xx reports; defaults to the context's notifier, then
            to one read from the environment

    Returns:
        The envelope passed to the completion callback

    Raises:
        ContextError: If the callback or the Lambda context is missing
        ResponseError: If the status code or the body is missing or malformed
    """
    int_status_code = _validate(context, status_code, response_body)

    api_response = build_api_response(int_status_code, response_body)

    # Do not wait for callbacks that arrive after the api response.
    context.waits_for_empty_event_loop = False

    if is_server_error(int_status_code):
        if notifier is None:
            notifier = context.notifier or SnsNotifier.from_env()
        _notify_server_error(context, notifier, error_body, api_response)

    callback = context.callback
    context.clear()
    callback(None, api_response)
    return api_response
