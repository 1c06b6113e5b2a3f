"""
Identity provider service (Amazon Cognito).
Signup, login, confirmation and password reset are delegated to a Cognito
user pool; this module validates input, calls the pool and translates the
provider's error codes into application errors.
"""
import logging
from typing import Any, Dict, Optional, Tuple, Type

from botocore.exceptions import ClientError

from artisthub.core.exceptions import (
    AppError,
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from artisthub.schemas.auth import AuthTokens, CodeDeliveryDetails, SignUpResult
from artisthub.utils.validators import (
    is_truthy,
    require_strong_password,
    validate_email,
    validate_phone,
)

logger = logging.getLogger(__name__)

NOT_REGISTERED = "Email or phone number not registered"
ALREADY_CONFIRMED = "User email/phone already confirmed"
INVALID_PARAMETERS = "Invalid parameters"
TOO_MANY_REQUESTS = "Too many requests. Please try again later."

# Cognito error code -> (error class, message, attach provider message as details)
ErrorMap = Dict[str, Tuple[Type[AppError], str, bool]]

SIGN_UP_ERRORS: ErrorMap = {
    "UsernameExistsException": (ConflictError, "Email or phone number already registered", False),
    "InvalidPasswordException": (ValidationError, "Password does not meet requirements", False),
    "InvalidParameterException": (ValidationError, INVALID_PARAMETERS, True),
}

SIGN_IN_ERRORS: ErrorMap = {
    "UserNotFoundException": (AuthenticationError, NOT_REGISTERED, False),
    "NotAuthorizedException": (AuthenticationError, "Invalid credentials", False),
    "UserNotConfirmedException": (
        ForbiddenError,
        "User email or phone not confirmed. Check your email/SMS for confirmation link.",
        False,
    ),
    "InvalidParameterException": (ValidationError, INVALID_PARAMETERS, True),
}

CONFIRM_SIGN_UP_ERRORS: ErrorMap = {
    "UserNotFoundException": (NotFoundError, NOT_REGISTERED, False),
    "CodeMismatchException": (ValidationError, "Invalid confirmation code", False),
    "ExpiredCodeException": (
        ValidationError, "Confirmation code has expired. Please request a new one.", False,
    ),
    "UserAlreadyConfirmedException": (ValidationError, ALREADY_CONFIRMED, False),
    "InvalidParameterException": (ValidationError, INVALID_PARAMETERS, True),
}

RESEND_CODE_ERRORS: ErrorMap = {
    "UserNotFoundException": (NotFoundError, NOT_REGISTERED, False),
    "UserAlreadyConfirmedException": (ValidationError, ALREADY_CONFIRMED, False),
    "InvalidParameterException": (ValidationError, INVALID_PARAMETERS, True),
    "LimitExceededException": (RateLimitError, TOO_MANY_REQUESTS, False),
}

ADMIN_CONFIRM_ERRORS: ErrorMap = {
    "UserNotFoundException": (NotFoundError, NOT_REGISTERED, False),
    "UserAlreadyConfirmedException": (ValidationError, ALREADY_CONFIRMED, False),
    "InvalidParameterException": (ValidationError, INVALID_PARAMETERS, True),
    "NotAuthorizedException": (ForbiddenError, "Not authorized to perform this action", False),
}

FORGOT_PASSWORD_ERRORS: ErrorMap = {
    "UserNotFoundException": (NotFoundError, NOT_REGISTERED, False),
    "UserNotConfirmedException": (
        ForbiddenError,
        "User email or phone not confirmed. Please confirm your account first.",
        False,
    ),
    "InvalidParameterException": (ValidationError, INVALID_PARAMETERS, True),
    "LimitExceededException": (RateLimitError, TOO_MANY_REQUESTS, False),
}

RESET_PASSWORD_ERRORS: ErrorMap = {
    "UserNotFoundException": (NotFoundError, NOT_REGISTERED, False),
    "CodeMismatchException": (ValidationError, "Invalid or expired reset code", False),
    "ExpiredCodeException": (
        ValidationError, "Reset code has expired. Please request a new one.", False,
    ),
    "InvalidPasswordException": (ValidationError, "Password does not meet requirements", False),
    "InvalidParameterException": (ValidationError, INVALID_PARAMETERS, True),
    "LimitExceededException": (RateLimitError, "Too many attempts. Please try again later.", False),
}


def error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


def error_message(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Message", str(error))


def translate_error(error: ClientError, mapping: ErrorMap) -> None:
    """Raise the AppError mapped to ``error``'s code; return if unmapped."""
    entry = mapping.get(error_code(error))
    if entry is None:
        return
    error_class, message, with_details = entry
    raise error_class(message, error_message(error) if with_details else None) from error


def resolve_username(body: Dict[str, Any], required: Tuple[str, ...] = ()) -> str:
    """
    Pick the account identifier: exactly one of ``email`` or ``phone_number``.

    Args:
        body: Request body
        required: Other fields that must be present, named in the error message
    """
    email = body.get("email")
    phone = body.get("phone_number")

    if (not is_truthy(email) and not is_truthy(phone)) or not all(is_truthy(body.get(f)) for f in required):
        if required:
            raise ValidationError(
                f"Missing required fields: (email or phone_number), {', '.join(required)}"
            )
        raise ValidationError("Missing required field: email or phone_number")

    if is_truthy(email) and is_truthy(phone):
        raise ValidationError("Provide either email or phone_number, not both")

    return email if is_truthy(email) else phone


class IdentityService:
    """Typed interface over a Cognito user pool app client."""

    def __init__(self, client, client_id: str, user_pool_id: Optional[str] = None):
        """
        Args:
            client: boto3 ``cognito-idp`` client
            client_id: User pool app client id
            user_pool_id: Needed only for admin operations
        """
        self.client = client
        self.client_id = client_id
        self.user_pool_id = user_pool_id

    def sign_up(self, body: Dict[str, Any]) -> SignUpResult:
        username = resolve_username(body, ("password", "name"))
        email = body.get("email")
        phone = body.get("phone_number")

        if email and not validate_email(str(email)):
            raise ValidationError("Invalid email format")
        if phone and not validate_phone(str(phone)):
            raise ValidationError("Invalid phone number format. Use E.164 format: +country code + number")
        require_strong_password(str(body["password"]))

        attributes = [{"Name": "name", "Value": body["name"]}]
        if email:
            attributes.append({"Name": "email", "Value": email})
        if phone:
            attributes.append({"Name": "phone_number", "Value": phone})

        try:
            result = self.client.sign_up(
                ClientId=self.client_id,
                Username=username,
                Password=body["password"],
                UserAttributes=attributes,
            )
        except ClientError as e:
            translate_error(e, SIGN_UP_ERRORS)
            raise

        logger.info(f"Registered {username} in the user pool")
        return SignUpResult(userId=result["UserSub"], userConfirmed=False)

    def sign_in(self, body: Dict[str, Any]) -> AuthTokens:
        username = resolve_username(body, ("password",))
        try:
            result = self.client.initiate_auth(
                AuthFlow="USER_PASSWORD_AUTH",
                ClientId=self.client_id,
                AuthParameters={"USERNAME": username, "PASSWORD": body["password"]},
            )
        except ClientError as e:
            translate_error(e, SIGN_IN_ERRORS)
            raise

        auth = result.get("AuthenticationResult")
        if not auth:
            # A challenge (MFA, new password) was returned instead of tokens
            raise AuthenticationError("Authentication failed")

        return AuthTokens(
            accessToken=auth.get("AccessToken"),
            idToken=auth.get("IdToken"),
            refreshToken=auth.get("RefreshToken"),
            expiresIn=auth.get("ExpiresIn"),
        )

    def confirm_sign_up(self, body: Dict[str, Any]) -> None:
        username = resolve_username(body, ("confirmationCode",))
        try:
            self.client.confirm_sign_up(
                ClientId=self.client_id,
                Username=username,
                ConfirmationCode=str(body["confirmationCode"]),
            )
        except ClientError as e:
            translate_error(e, CONFIRM_SIGN_UP_ERRORS)
            raise

    def resend_confirmation_code(self, body: Dict[str, Any]) -> None:
        username = resolve_username(body)
        try:
            self.client.resend_confirmation_code(ClientId=self.client_id, Username=username)
        except ClientError as e:
            translate_error(e, RESEND_CODE_ERRORS)
            raise

    def admin_confirm_user(self, body: Dict[str, Any]) -> str:
        """Confirm a user without a code; returns the confirmed username."""
        username = resolve_username(body)

        if not self.user_pool_id:
            logger.error("USER_POOL_ID environment variable not set")
            raise AppError("Server configuration error")

        try:
            self.client.admin_confirm_sign_up(UserPoolId=self.user_pool_id, Username=username)
        except ClientError as e:
            translate_error(e, ADMIN_CONFIRM_ERRORS)
            raise

        logger.info(f"Admin confirmed {username}")
        return username

    def forgot_password(self, body: Dict[str, Any]) -> CodeDeliveryDetails:
        username = resolve_username(body)
        try:
            result = self.client.forgot_password(ClientId=self.client_id, Username=username)
        except ClientError as e:
            translate_error(e, FORGOT_PASSWORD_ERRORS)
            raise

        delivery = result.get("CodeDeliveryDetails") or {}
        return CodeDeliveryDetails(
            destination=delivery.get("Destination"),
            deliveryMedium=delivery.get("DeliveryMedium"),
            attributeName=delivery.get("AttributeName"),
        )

    def reset_password(self, body: Dict[str, Any]) -> None:
        username = resolve_username(body, ("confirmationCode", "newPassword"))
        require_strong_password(str(body["newPassword"]))
        try:
            self.client.confirm_forgot_password(
                ClientId=self.client_id,
                Username=username,
                ConfirmationCode=str(body["confirmationCode"]),
                Password=body["newPassword"],
            )
        except ClientError as e:
            translate_error(e, RESET_PASSWORD_ERRORS)
            raise
