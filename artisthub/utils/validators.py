"""Validators."""

import re
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from artisthub.core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PHONE_PATTERN = re.compile(r'^\+?[1-9]\d{1,14}$')


def is_truthy(value: Any) -> bool:
    """Presence test for JSON request values.

    None, false, zero and the empty string count as absent; empty lists and
    objects count as present.
    """
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return value != 0
    return True


def missing_fields(data: Dict[str, Any], required: Iterable[str]) -> List[str]:
    """Return the required fields that are absent or falsy in ``data``."""
    return [field for field in required if not is_truthy(data.get(field))]


def require_fields(data: Dict[str, Any], required: Iterable[str]) -> None:
    """Raise ValidationError listing every missing required field."""
    missing = missing_fields(data, required)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def require_choice(value: Any, choices: List[str], message: str) -> None:
    """Raise ValidationError when ``value`` is not one of ``choices``."""
    if value not in choices:
        raise ValidationError(message)


def validate_email(email: str) -> bool:
    """Validate email format."""
    return bool(EMAIL_PATTERN.match(email))


def validate_phone(phone: str) -> bool:
    """Validate an E.164 phone number, ignoring spaces and dashes."""
    return bool(PHONE_PATTERN.match(re.sub(r'[\s-]', '', phone)))


def validate_password_strength(password: str) -> tuple[bool, List[str]]:
    """Validate password strength."""
    errors = []

    if len(password) < 8:
        errors.append("Password must be at least 8 characters")

    if not re.search(r'[A-Z]', password):
        errors.append("Password must contain at least one uppercase letter")

    if not re.search(r'[a-z]', password):
        errors.append("Password must contain at least one lowercase letter")

    if not re.search(r'[0-9]', password):
        errors.append("Password must contain at least one number")

    return len(errors) == 0, errors


def require_strong_password(password: str) -> None:
    """Raise ValidationError with the first failing password rule."""
    ok, errors = validate_password_strength(password)
    if not ok:
        raise ValidationError(errors[0])


def parse_int(value: Any) -> Optional[int]:
    """Leading-integer parse of ``value``; None when it has no integer prefix."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = re.match(r'^\s*([+-]?\d+)', str(value)) if value is not None else None
    return int(match.group(1)) if match else None
