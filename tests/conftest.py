"""Root conftest: shared test configuration and fixtures."""

import os

# Settings are read at import time; keep tests off real AWS and Sentry
os.environ["AWS_REGION"] = "ap-south-1"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ["USER_POOL_CLIENT_ID"] = "test-client-id"
os.environ["USER_POOL_ID"] = "ap-south-1_TestPool"
os.environ["AUTHORIZER_TOKEN"] = "test-token"
os.environ["LOG_FORMAT"] = "console"
os.environ["SENTRY_DSN"] = ""

import pytest  # noqa: E402

from artisthub.services.casting_service import CastingService  # noqa: E402
from artisthub.services.user_service import UserService  # noqa: E402
from tests.fakes import FakeCastingRepository, FakeUserRepository  # noqa: E402


@pytest.fixture
def user_repo():
    return FakeUserRepository()


@pytest.fixture
def user_service(user_repo):
    return UserService(user_repo)


@pytest.fixture
def casting_repo():
    return FakeCastingRepository()


@pytest.fixture
def casting_service(casting_repo):
    return CastingService(casting_repo)


@pytest.fixture
def new_user(user_service):
    """Create a user through the service and return the stored record."""
    def _create(username="asha", email="asha@example.com", **extra):
        return user_service.create_user({"username": username, "email": email, **extra})
    return _create


@pytest.fixture
def job_payload():
    return {
        "userId": "recruiter-1",
        "jobTitle": "Lead dancer for music video",
        "jobDescription": "Two day shoot in Mumbai",
        "jobCategory": "Dancing",
        "jobType": "Offline",
        "jobLocation": ["Mumbai"],
        "tags": ["music", "video"],
    }


@pytest.fixture
def new_job(casting_service, job_payload):
    def _create(**overrides):
        return casting_service.create_job({**job_payload, **overrides})
    return _create

