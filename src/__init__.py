"""Manasoft sdk package.

This package provides API Gateway response helpers and SNS error
notifications for AWS Lambda functions.
"""

__version__ = "1.0.0"

from src.manasoft_sdk import send_api_response, set_context, SnsNotifier

__all__ = ["send_api_response", "set_context", "SnsNotifier"]
