"""Event parsing and the error boundary shared by every Lambda handler."""

import base64
import functools
from typing import Any, Callable, Dict, Optional

import sentry_sdk
import structlog
from sentry_sdk.integrations.aws_lambda import AwsLambdaIntegration

from artisthub.config import settings
from artisthub.core.exceptions import AppError, ValidationError
from artisthub.core.logging import setup_logging
from artisthub.core.responses import describe_error, error_response
from artisthub.utils.helpers import load_json_object

setup_logging()
logger = structlog.get_logger(__name__)

if settings.SENTRY_DSN and settings.SENTRY_DSN.startswith("https://"):
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[AwsLambdaIntegration()],
        release=settings.APP_VERSION,
        send_default_pii=False,
    )


def parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """Decode the JSON request body; an absent body is an empty object."""
    raw = event.get("body")
    if raw and event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(raw, validate=True)
        except ValueError:
            raise ValidationError("Invalid JSON body")
    return load_json_object(raw)


def path_param(event: Dict[str, Any], name: str) -> Optional[str]:
    return (event.get("pathParameters") or {}).get(name)


def query_params(event: Dict[str, Any]) -> Dict[str, str]:
    return event.get("queryStringParameters") or {}


def lambda_endpoint(failure_message: str) -> Callable:
    """
    Wrap a handler so every outcome becomes an API Gateway proxy response.

    ``AppError`` subclasses map to their status code; anything else is a 500
    carrying ``failure_message`` and the underlying error as ``details``.
    Extra keyword arguments (e.g. ``service=``) pass through to the handler.
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(event: Optional[Dict[str, Any]], context: Any = None, **kwargs) -> Dict[str, Any]:
            event = event or {}
            try:
                return func(event, context, **kwargs)
            except AppError as e:
                log = logger.error if e.http_status >= 500 else logger.warning
                log(
                    "request_rejected",
                    handler=func.__name__,
                    status=e.http_status,
                    reason=e.message,
                )
                return error_response(e.http_status, e.message, e.details)
            except Exception as e:
                logger.error("handler_failed", handler=func.__name__, error=str(e), exc_info=True)
                return error_response(500, failure_message, describe_error(e))
        return wrapper
    return decorator
