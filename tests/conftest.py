"""Shared fixtures for the manasoft sdk tests."""

import os
from unittest.mock import MagicMock

import pytest

from src.manasoft_sdk.notifier import SNS_ARN_ENV_VAR

TEST_TOPIC_ARN = "arn:aws:sns:eu-west-1:123456789012:manasoft-notifications"


@pytest.fixture
def lambda_context() -> MagicMock:
    """Build a Lambda runtime context for testing.

    Returns:
        Mock Lambda context.
    """
    context = MagicMock()
    context.function_name = "f"
    context.aws_request_id = "1"
    context.log_group_name = "g"
    context.log_stream_name = "s"
    context.get_remaining_time_in_millis.return_value = 100
    return context


@pytest.fixture
def sns_client() -> MagicMock:
    """Set up mock SNS client for testing.

    Returns:
        Mock SNS client.
    """
    client = MagicMock()
    client.publish.return_value = {"MessageId": "test-message-id"}
    return client


@pytest.fixture
def set_environment_variables() -> None:
    """Set the notification topic environment variable for a test."""
    os.environ[SNS_ARN_ENV_VAR] = TEST_TOPIC_ARN
    yield
    os.environ.pop(SNS_ARN_ENV_VAR, None)


@pytest.fixture
def unset_environment_variables() -> None:
    """Remove the notification topic environment variable for a test."""
    previous = os.environ.pop(SNS_ARN_ENV_VAR, None)
    yield
    if previous is not None:
        os.environ[SNS_ARN_ENV_VAR] = previous
