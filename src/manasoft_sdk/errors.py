"""Exceptions raised or reported by the manasoft sdk.

The response formatter raises these on misuse; the notifier hands them to its
callback instead of raising, so one hierarchy covers both.
"""

SET_CONTEXT_HINT = "make sure you have initialized the manasoft sdk with set_context function."


class ManasoftSdkError(Exception):
    """Base class for all sdk errors."""

    def __init__(self, message: str) -> None:
        """Initialize ManasoftSdkError.

        Args:
            message: Error description
        """
        self.message = message
        super().__init__(self.message)


class ContextError(ManasoftSdkError):
    """The invocation context is incomplete."""


class MissingCallbackError(ContextError):
    """No completion callback was stored in the invocation context."""

    def __init__(self) -> None:
        super().__init__(f"undefined aws callback function received, {SET_CONTEXT_HINT}")


class MissingLambdaContextError(ContextError):
    """No Lambda context object was stored in the invocation context."""

    def __init__(self) -> None:
        super().__init__(f"undefined aws context object received, {SET_CONTEXT_HINT}")


class ResponseError(ManasoftSdkError):
    """The api response arguments are malformed."""


class MissingStatusCodeError(ResponseError):
    def __init__(self) -> None:
        super().__init__("undefined api response status code received.")


class MissingResponseBodyError(ResponseError):
    def __init__(self) -> None:
        super().__init__("undefined api response body received.")


class InvalidStatusCodeError(ResponseError):
    def __init__(self, status_code: object) -> None:
        super().__init__(f"status code is not parsable integer (received : {status_code})")
        self.status_code = status_code


class InvalidResponseBodyError(ResponseError):
    def __init__(self, response_body: object) -> None:
        super().__init__(f"responseBody is not json, received : {type(response_body).__name__}")


class NotificationError(ManasoftSdkError):
    """A notification could not be published."""


class EmptyMessageError(NotificationError):
    def __init__(self) -> None:
        super().__init__("undefined messageBody received.")


class MissingTopicError(NotificationError):
    def __init__(self, env_var: str) -> None:
        super().__init__(f"undefined {env_var} environment variable.")


class PublishError(NotificationError):
    """SNS rejected the publish call or could not be reached."""
