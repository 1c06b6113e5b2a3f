"""Application configuration using Pydantic Settings."""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "ArtistHub API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # AWS
    AWS_REGION: str = Field(
        default="ap-south-1",
        validation_alias=AliasChoices("AWS_REGION", "REGION"),
    )
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""

    # DynamoDB
    DYNAMODB_ENDPOINT_URL: Optional[str] = None  # e.g. http://localhost:8001 for DynamoDB Local
    USERS_TABLE: str = "users"
    CASTING_TABLE: str = "casting"
    USERNAME_INDEX: str = "usernameIndex"
    DYNAMODB_MAX_RETRIES: int = 3
    DYNAMODB_TIMEOUT_SECONDS: int = 5

    # Cognito
    USER_POOL_ID: str = ""
    USER_POOL_CLIENT_ID: str = ""

    # API Gateway request authorizer
    AUTHORIZER_TOKEN: str = Field(default="change-this-token-in-production")

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Monitoring
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1


# Create global settings instance
settings = Settings()
