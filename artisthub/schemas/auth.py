"""Authentication schemas."""

from typing import Optional

from pydantic import BaseModel


class AuthTokens(BaseModel):
    """Tokens issued by the identity provider on login."""

    accessToken: Optional[str] = None
    idToken: Optional[str] = None
    refreshToken: Optional[str] = None
    expiresIn: Optional[int] = None


class CodeDeliveryDetails(BaseModel):
    """Where a password-reset code was sent."""

    destination: Optional[str] = None
    deliveryMedium: Optional[str] = None
    attributeName: Optional[str] = None


class SignUpResult(BaseModel):
    """Outcome of a successful registration."""

    userId: str
    userConfirmed: bool = False
