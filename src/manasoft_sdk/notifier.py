"""SNS notifications for backend errors and warnings.

Messages are posted to the topic configured for the Lambda together with a
short summary of the invocation (remaining time, function name, request id
and log routing).
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .context import InvocationContext
from .errors import (
    EmptyMessageError,
    ManasoftSdkError,
    MissingLambdaContextError,
    MissingTopicError,
    PublishError,
)

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# Constants
SNS_ARN_ENV_VAR = "MANASOFT_SDK_NOTIFICATIONS_SNS_ARN"
SNS_API_VERSION = "2010-03-31"
CONTEXT_UNAVAILABLE = "error : can't fetch the aws context."

NotificationCallback = Callable[[Optional[ManasoftSdkError], Optional[Dict[str, Any]]], None]

_sns = None


def _get_sns() -> Any:
    global _sns
    if _sns is None:
        _sns = boto3.client("sns", api_version=SNS_API_VERSION)
    return _sns


@dataclass
class NotificationResult:
    """Outcome of one publish attempt."""

    error: Optional[ManasoftSdkError] = None
    data: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def describe_lambda_context(lambda_context: Any) -> str:
    """Summarize the Lambda context, one key:value line per field.

    Args:
        lambda_context: The Lambda runtime context object

    Returns:
        The summary, or a fixed placeholder when the context cannot be read
    """
    try:
        return (
            f"remaining time:{lambda_context.get_remaining_time_in_millis()}\n"
            f"functionName:{lambda_context.function_name}\n"
            f"AWSrequestID:{lambda_context.aws_request_id}\n"
            f"logGroupName:{lambda_context.log_group_name}\n"
            f"logStreamName:{lambda_context.log_stream_name}\n"
        )
    except Exception as e:
        logger.warning(f"Could not read the aws context: {e!s}")
        return CONTEXT_UNAVAILABLE


def build_notification_message(lambda_context: Any, message_body: str) -> str:
    """Prefix message_body with the notification banner and context summary."""
    return (
        "This is a manasoft back end notification message.\n"
        "\n-------AWS CONTEXT :----\n"
        f"{describe_lambda_context(lambda_context)}"
        "\n-------MESSAGE :---------\n"
        f"{message_body}"
    )


class SnsNotifier:
    """Publishes notification messages to a single SNS topic."""

    def __init__(self, topic_arn: Optional[str] = None, sns_client: Any = None) -> None:
        """Initialize SnsNotifier.

        Args:
            topic_arn: Destination topic; a missing topic is reported per call
            sns_client: boto3 SNS client, created lazily when omitted
        """
        self.topic_arn = topic_arn
        self._sns_client = sns_client

    @classmethod
    def from_env(cls, sns_client: Any = None) -> "SnsNotifier":
        """Build a notifier for the topic named by MANASOFT_SDK_NOTIFICATIONS_SNS_ARN."""
        return cls(topic_arn=os.environ.get(SNS_ARN_ENV_VAR), sns_client=sns_client)

    @property
    def sns_client(self) -> Any:
        if self._sns_client is None:
            self._sns_client = _get_sns()
        return self._sns_client

    def _check(self, context: InvocationContext, message_body: str) -> Optional[ManasoftSdkError]:
        if context.lambda_context is None:
            return MissingLambdaContextError()
        if not message_body:
            return EmptyMessageError()
        if not self.topic_arn:
            return MissingTopicError(SNS_ARN_ENV_VAR)
        return None

    def send_sns_notification(
        self,
        context: InvocationContext,
        message_body: str,
        title: str,
        callback: Optional[NotificationCallback] = None,
    ) -> NotificationResult:
        """Post message_body to the topic with title as subject.

        Failures are never raised: they are handed to callback and carried in
        the returned result.

        Args:
            context: The current invocation context
            message_body: Free text to publish
            title: SNS subject
            callback: Called as callback(error, data) with the publish outcome

        Returns:
            The publish outcome
        """
        error = self._check(context, message_body)
        if error is not None:
            result = NotificationResult(error=error)
        else:
            message = build_notification_message(context.lambda_context, message_body)
            result = self._publish(message, title)

        if callback is not None:
            callback(result.error, result.data)
        return result

    def _publish(self, message: str, title: str) -> NotificationResult:
        try:
            response = self.sns_client.publish(
                Message=message,
                Subject=title,
                TopicArn=self.topic_arn,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to publish to SNS topic '{self.topic_arn}': {e!s}")
            return NotificationResult(error=PublishError(f"Failed to publish notification: {e!s}"))

        logger.info(f"Published notification {response.get('MessageId')} to {self.topic_arn}")
        return NotificationResult(data=response)
