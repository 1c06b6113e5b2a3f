"""Authentication endpoints backed by the Cognito user pool."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from artisthub.api.deps import envelope, get_identity_service, json_body
from artisthub.core.responses import success_body
from artisthub.services.identity_service import IdentityService

router = APIRouter()


@router.post("/signup")
def sign_up(
    body: Dict[str, Any] = Depends(json_body),
    service: IdentityService = Depends(get_identity_service),
):
    """Register with `email` or `phone_number`, plus `password` and `name`."""
    result = service.sign_up(body)
    return envelope(201, success_body(
        result.model_dump(),
        "User registered successfully. Check your email/SMS for confirmation code.",
    ))


@router.post("/login")
def sign_in(
    body: Dict[str, Any] = Depends(json_body),
    service: IdentityService = Depends(get_identity_service),
):
    tokens = service.sign_in(body)
    return envelope(200, success_body({"tokens": tokens.model_dump()}, "Login successful"))


@router.post("/confirm")
def confirm_sign_up(
    body: Dict[str, Any] = Depends(json_body),
    service: IdentityService = Depends(get_identity_service),
):
    service.confirm_sign_up(body)
    return envelope(200, success_body({}, "Email/Phone confirmed successfully. You can now login."))


@router.post("/resend-code")
def resend_confirmation_code(
    body: Dict[str, Any] = Depends(json_body),
    service: IdentityService = Depends(get_identity_service),
):
    service.resend_confirmation_code(body)
    return envelope(200, success_body({}, "Confirmation code resent to your email or phone"))


@router.post("/admin-confirm")
def admin_confirm_user(
    body: Dict[str, Any] = Depends(json_body),
    service: IdentityService = Depends(get_identity_service),
):
    """Confirm an account without a code (requires USER_POOL_ID)."""
    username = service.admin_confirm_user(body)
    return envelope(200, success_body(
        {"confirmedUser": username},
        f"User {username} confirmed successfully. They can now login.",
    ))


@router.post("/forgot-password")
def forgot_password(
    body: Dict[str, Any] = Depends(json_body),
    service: IdentityService = Depends(get_identity_service),
):
    delivery = service.forgot_password(body)
    return envelope(200, success_body(
        {"codeDeliveryDetails": delivery.model_dump()},
        "Password reset code has been sent to your email or phone number",
    ))


@router.post("/reset-password")
def reset_password(
    body: Dict[str, Any] = Depends(json_body),
    service: IdentityService = Depends(get_identity_service),
):
    service.reset_password(body)
    return envelope(200, success_body(
        {}, "Password reset successfully. You can now login with your new password.",
    ))
