"""Request authorizer: bearer token to IAM policy."""

import pytest

from artisthub.handlers.authorizer import handler

ROUTE_ARN = "arn:aws:execute-api:ap-south-1:123456789012:api-id/$default/GET/users"


def statement(policy):
    return policy["policyDocument"]["Statement"][0]


@pytest.mark.parametrize("header", ["Authorization", "authorization"])
def test_valid_token_is_allowed(header):
    policy = handler({"headers": {header: "Bearer test-token"}, "routeArn": ROUTE_ARN}, None)

    assert policy["principalId"] == "user"
    assert policy["policyDocument"]["Version"] == "2012-10-17"
    assert statement(policy) == {
        "Action": "execute-api:Invoke",
        "Effect": "Allow",
        "Resource": ROUTE_ARN,
    }
    assert policy["context"] == {"poweredBy": "Artisthub"}


@pytest.mark.parametrize("headers", [
    {},
    {"Authorization": "test-token"},
    {"Authorization": "Bearer wrong"},
    {"Authorization": "Bearer test-token "},
])
def test_invalid_token_is_denied(headers):
    policy = handler({"headers": headers, "routeArn": ROUTE_ARN}, None)

    assert statement(policy)["Effect"] == "Deny"
    assert statement(policy)["Resource"] == ROUTE_ARN
    assert policy["context"] == {"poweredBy": "Artisthub", "reason": "Invalid token"}


def test_token_can_be_supplied_explicitly():
    event = {"headers": {"Authorization": "Bearer other"}, "routeArn": ROUTE_ARN}
    assert statement(handler(event, None, token="other"))["Effect"] == "Allow"


def test_event_without_headers_is_denied():
    assert statement(handler({"routeArn": ROUTE_ARN}))["Effect"] == "Deny"
