"""Lambda handlers for /auth, delegating to the Cognito user pool."""

import structlog

from artisthub.api.deps import get_identity_service
from artisthub.core.responses import success_body, success_response
from artisthub.handlers.common import lambda_endpoint, parse_body
from artisthub.services.identity_service import IdentityService

logger = structlog.get_logger(__name__)


@lambda_endpoint("Signup failed")
def sign_up(event, context=None, service: IdentityService = None):
    """POST /auth/signup  Body: { email OR phone_number, password, name }"""
    service = service or get_identity_service()
    result = service.sign_up(parse_body(event))
    logger.info("user_signed_up", user_sub=result.userId)
    return success_response(201, success_body(
        result.model_dump(),
        "User registered successfully. Check your email/SMS for confirmation code.",
    ))


@lambda_endpoint("Login failed")
def sign_in(event, context=None, service: IdentityService = None):
    """POST /auth/login  Body: { email OR phone_number, password }"""
    service = service or get_identity_service()
    tokens = service.sign_in(parse_body(event))
    return success_response(200, success_body({"tokens": tokens.model_dump()}, "Login successful"))


@lambda_endpoint("Email/Phone confirmation failed")
def confirm_sign_up(event, context=None, service: IdentityService = None):
    """POST /auth/confirm  Body: { email OR phone_number, confirmationCode }"""
    service = service or get_identity_service()
    service.confirm_sign_up(parse_body(event))
    return success_response(200, success_body(
        {}, "Email/Phone confirmed successfully. You can now login.",
    ))


@lambda_endpoint("Resend confirmation code failed")
def resend_confirmation_code(event, context=None, service: IdentityService = None):
    """POST /auth/resend-code  Body: { email OR phone_number }"""
    service = service or get_identity_service()
    service.resend_confirmation_code(parse_body(event))
    return success_response(200, success_body({}, "Confirmation code resent to your email or phone"))


@lambda_endpoint("User confirmation failed")
def admin_confirm_user(event, context=None, service: IdentityService = None):
    """POST /auth/admin-confirm  Body: { email OR phone_number }"""
    service = service or get_identity_service()
    username = service.admin_confirm_user(parse_body(event))
    return success_response(200, success_body(
        {"confirmedUser": username},
        f"User {username} confirmed successfully. They can now login.",
    ))


@lambda_endpoint("Failed to initiate password reset")
def forgot_password(event, context=None, service: IdentityService = None):
    """POST /auth/forgot-password  Body: { email OR phone_number }"""
    service = service or get_identity_service()
    delivery = service.forgot_password(parse_body(event))
    return success_response(200, success_body(
        {"codeDeliveryDetails": delivery.model_dump()},
        "Password reset code has been sent to your email or phone number",
    ))


@lambda_endpoint("Password reset failed")
def reset_password(event, context=None, service: IdentityService = None):
    """POST /auth/reset-password  Body: { email OR phone_number, confirmationCode, newPassword }"""
    service = service or get_identity_service()
    service.reset_password(parse_body(event))
    return success_response(200, success_body(
        {}, "Password reset successfully. You can now login with your new password.",
    ))
