"""Response envelope shared by the Lambda handlers and the FastAPI app."""

import json
from decimal import Decimal
from typing import Any, Dict, Optional

from botocore.exceptions import ClientError

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
}


def _default(obj: Any) -> Any:
    """JSON fallback for values DynamoDB hands back."""
    if isinstance(obj, Decimal):
        # Numbers come back from DynamoDB as Decimal
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    if isinstance(obj, set):
        return sorted(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def describe_error(error: Exception) -> str:
    """Message attached as ``details`` on a 500 response."""
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Message") or str(error)
    return str(error)


def to_json(body: Any) -> str:
    """Serialize a response body, converting DynamoDB Decimals."""
    return json.dumps(body, default=_default)


def to_jsonable(body: Any) -> Any:
    """Return ``body`` as plain JSON types (used by the FastAPI app)."""
    return json.loads(to_json(body))


def success_body(payload: Dict[str, Any], message: Optional[str] = None) -> Dict[str, Any]:
    """Build ``{success: true, message?, ...payload}``."""
    body: Dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    body.update(payload)
    return body


def error_body(message: str, details: Any = None) -> Dict[str, Any]:
    """Build ``{success: false, message, details?}``."""
    body: Dict[str, Any] = {"success": False, "message": message}
    if details:
        body["details"] = details
    return body


def success_response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """API Gateway proxy response for a success envelope."""
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": to_json(body),
    }


def error_response(status_code: int, message: str, details: Any = None) -> Dict[str, Any]:
    """API Gateway proxy response for an error envelope."""
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": to_json(error_body(message, details)),
    }
