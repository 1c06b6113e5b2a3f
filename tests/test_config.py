"""Settings and AWS client factories."""

from artisthub.config import Settings
from artisthub.db.session import _client_config, create_cognito_client, create_dynamodb_resource


def test_region_falls_back_to_region_variable(monkeypatch):
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.setenv("REGION", "us-east-1")

    assert Settings(_env_file=None).AWS_REGION == "us-east-1"


def test_defaults(monkeypatch):
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("REGION", raising=False)

    config = Settings(_env_file=None)

    assert config.AWS_REGION == "ap-south-1"
    assert config.USERNAME_INDEX == "usernameIndex"
    assert config.DYNAMODB_MAX_RETRIES == 3
    assert config.DYNAMODB_TIMEOUT_SECONDS == 5
    assert config.DEFAULT_PAGE_SIZE == 10
    assert config.MAX_PAGE_SIZE == 100


def test_dynamodb_resource_uses_retry_and_timeout_settings():
    config = Settings(
        _env_file=None,
        AWS_REGION="eu-west-1",
        DYNAMODB_MAX_RETRIES=2,
        DYNAMODB_TIMEOUT_SECONDS=7,
        DYNAMODB_ENDPOINT_URL="http://localhost:8001",
    )

    client = create_dynamodb_resource(config).meta.client

    assert client.meta.region_name == "eu-west-1"
    assert client.meta.endpoint_url == "http://localhost:8001"
    assert client.meta.config.connect_timeout == 7
    assert client.meta.config.read_timeout == 7
    # botocore counts the first call: two retries are three attempts
    assert client.meta.config.retries["total_max_attempts"] == 3
    assert _client_config(config).retries == {"max_attempts": 2, "mode": "standard"}


def test_cognito_client_region():
    config = Settings(_env_file=None, AWS_REGION="eu-west-1")
    assert create_cognito_client(config).meta.region_name == "eu-west-1"
