"""DynamoDB and Cognito client configuration."""

from functools import lru_cache

import boto3
from botocore.config import Config

from artisthub.config import Settings, settings


def _client_config(config: Settings) -> Config:
    return Config(
        region_name=config.AWS_REGION,
        retries={"max_attempts": config.DYNAMODB_MAX_RETRIES, "mode": "standard"},
        connect_timeout=config.DYNAMODB_TIMEOUT_SECONDS,
        read_timeout=config.DYNAMODB_TIMEOUT_SECONDS,
    )


def _credentials(config: Settings) -> dict:
    # Empty strings mean "use the default credential chain" (Lambda role)
    return {
        "aws_access_key_id": config.AWS_ACCESS_KEY_ID or None,
        "aws_secret_access_key": config.AWS_SECRET_ACCESS_KEY or None,
    }


def create_dynamodb_resource(config: Settings = settings):
    """Create a DynamoDB service resource with a short timeout and bounded retries."""
    return boto3.resource(
        "dynamodb",
        endpoint_url=config.DYNAMODB_ENDPOINT_URL or None,
        config=_client_config(config),
        **_credentials(config),
    )


def create_cognito_client(config: Settings = settings):
    """Create a Cognito Identity Provider client."""
    return boto3.client(
        "cognito-idp",
        config=Config(region_name=config.AWS_REGION),
        **_credentials(config),
    )


@lru_cache()
def get_dynamodb_resource():
    """Process-wide DynamoDB resource, reused across warm Lambda invocations."""
    return create_dynamodb_resource(settings)


@lru_cache()
def get_cognito_client():
    """Process-wide Cognito client, reused across warm Lambda invocations."""
    return create_cognito_client(settings)
