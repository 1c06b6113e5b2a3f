"""Continuation tokens and page-size parsing for scan-based listings."""

import base64
import binascii
import json
from decimal import Decimal
from typing import Any, Dict, Optional

from artisthub.config import settings
from artisthub.core.exceptions import ValidationError
from artisthub.core.responses import to_json


def encode_token(last_key: Optional[Dict[str, Any]]) -> Optional[str]:
    """Encode a DynamoDB ``LastEvaluatedKey`` as an opaque base64 token."""
    if not last_key:
        return None
    return base64.b64encode(to_json(last_key).encode("utf-8")).decode("ascii")


def decode_token(token: Optional[str]) -> Optional[Dict[str, Any]]:
    """Decode a token produced by :func:`encode_token`.

    Raises:
        ValidationError: if the token is not base64-encoded JSON object.
    """
    if not token:
        return None
    try:
        raw = base64.b64decode(token.encode("ascii"), validate=True)
        key = json.loads(raw.decode("utf-8"), parse_float=Decimal)
    except (binascii.Error, UnicodeError, ValueError):
        raise ValidationError("Invalid pagination token: lastKey")
    if not isinstance(key, dict):
        raise ValidationError("Invalid pagination token: lastKey")
    return key


def parse_limit(value: Any, default: int = None, maximum: int = None) -> int:
    """Parse a ``limit`` query parameter into a positive page size."""
    default = default or settings.DEFAULT_PAGE_SIZE
    maximum = maximum or settings.MAX_PAGE_SIZE

    if value is None or value == "":
        return default
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid limit. Must be a positive integer")
    if limit < 1:
        raise ValidationError("Invalid limit. Must be a positive integer")
    return min(limit, maximum)
