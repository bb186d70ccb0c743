"""Manasoft sdk for AWS Lambda functions behind API Gateway.

This package formats Lambda proxy responses and reports 5xx errors to the
developers' SNS topic.
"""

__version__ = "1.0.0"

from .context import InvocationContext, set_context
from .errors import (
    ContextError,
    ManasoftSdkError,
    NotificationError,
    ResponseError,
)
from .handler import api_gateway_handler
from .notifier import NotificationResult, SnsNotifier
from .response import send_api_response

__all__ = [
    "ContextError",
    "InvocationContext",
    "ManasoftSdkError",
    "NotificationError",
    "NotificationResult",
    "ResponseError",
    "SnsNotifier",
    "api_gateway_handler",
    "send_api_response",
    "set_context",
]
