"""Helper utilities."""

import json
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Union

from artisthub.core.exceptions import ValidationError


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_id() -> str:
    """Generate a fresh record identifier."""
    return str(uuid.uuid4())


def load_json_object(raw: Union[str, bytes, None]) -> Dict[str, Any]:
    """
    Decode a request body that must be a JSON object; empty means ``{}``.

    Floats are parsed as Decimal, the only non-integer number type DynamoDB accepts.
    """
    if not raw:
        return {}
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        body = json.loads(raw, parse_float=Decimal)
    except ValueError:
        raise ValidationError("Invalid JSON body")
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body
