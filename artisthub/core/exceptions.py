"""Application error hierarchy.

Every error a service raises on purpose is an ``AppError``; the Lambda
handlers and the FastAPI exception handlers turn it into the standard
``{success: false, message, details?}`` envelope with ``http_status``.
"""

from typing import Any, Optional


class AppError(Exception):
    """Base exception for expected, client-facing failures."""

    http_status: int = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppError):
    """Missing or invalid input, detected before any side effect."""

    http_status = 400


class AuthenticationError(AppError):
    """Credentials rejected by the identity provider."""

    http_status = 401


class ForbiddenError(AppError):
    """Caller is known but not allowed to perform the action."""

    http_status = 403


class NotFoundError(AppError):
    """Referenced record does not exist."""

    http_status = 404


class ConflictError(AppError):
    """Uniqueness violation or duplicate entry."""

    http_status = 409


class RateLimitError(AppError):
    """Upstream provider is throttling the caller."""

    http_status = 429


class ConditionFailedError(Exception):
    """A DynamoDB conditional write was rejected.

    Raised by repositories only; services translate it into a conflict or
    not-found depending on which condition was attached to the write.
    """

    def __init__(self, key: dict):
        super().__init__(f"Conditional check failed for {key}")
        self.key = key
