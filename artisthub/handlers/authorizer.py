"""
API Gateway request authorizer.
Allows the route only when the Authorization header carries the shared bearer token.
"""

import hmac
from typing import Any, Dict, Optional

import structlog

from artisthub.config import settings

logger = structlog.get_logger(__name__)

POWERED_BY = "Artisthub"


def generate_policy(principal_id: str, effect: str, resource: str, context: Dict[str, str]) -> Dict[str, Any]:
    return {
        "principalId": principal_id,
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Action": "execute-api:Invoke",
                    "Effect": effect,
                    "Resource": resource,
                }
            ],
        },
        "context": context,
    }


def _authorization_header(event: Dict[str, Any]) -> Optional[str]:
    headers = event.get("headers") or {}
    return headers.get("Authorization") or headers.get("authorization")


def handler(event, context=None, token: Optional[str] = None):
    event = event or {}
    expected = f"Bearer {token if token is not None else settings.AUTHORIZER_TOKEN}"
    supplied = _authorization_header(event) or ""
    resource = event.get("routeArn") or event.get("methodArn")

    if not hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("authorizer_denied", resource=resource)
        return generate_policy("user", "Deny", resource, {
            "poweredBy": POWERED_BY,
            "reason": "Invalid token",
        })
    return generate_policy("user", "Allow", resource, {"poweredBy": POWERED_BY})
