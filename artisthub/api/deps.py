"""
API Dependencies
Service factories shared by the FastAPI routes and the Lambda handlers.
"""

from functools import lru_cache
from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from artisthub.config import settings
from artisthub.core.responses import CORS_HEADERS, to_jsonable
from artisthub.db.session import get_cognito_client, get_dynamodb_resource
from artisthub.repositories import CastingRepository, UserRepository
from artisthub.services.casting_service import CastingService
from artisthub.services.identity_service import IdentityService
from artisthub.services.user_service import UserService
from artisthub.utils.helpers import load_json_object


@lru_cache()
def get_user_service() -> UserService:
    """User service bound to the configured users table."""
    table = get_dynamodb_resource().Table(settings.USERS_TABLE)
    return UserService(UserRepository(table, username_index=settings.USERNAME_INDEX))


@lru_cache()
def get_casting_service() -> CastingService:
    """Casting service bound to the configured casting table."""
    table = get_dynamodb_resource().Table(settings.CASTING_TABLE)
    return CastingService(CastingRepository(table))


@lru_cache()
def get_identity_service() -> IdentityService:
    """Identity service bound to the configured Cognito app client."""
    return IdentityService(
        get_cognito_client(),
        client_id=settings.USER_POOL_CLIENT_ID,
        user_pool_id=settings.USER_POOL_ID or None,
    )


async def json_body(request: Request) -> Dict[str, Any]:
    """Request body as a JSON object, decoded the same way the Lambda handlers do it."""
    return load_json_object(await request.body())


def envelope(status_code: int, body: Dict[str, Any]) -> JSONResponse:
    """Wrap an envelope body with the shared CORS headers."""
    headers = {k: v for k, v in CORS_HEADERS.items() if k != "Content-Type"}
    return JSONResponse(status_code=status_code, content=to_jsonable(body), headers=headers)
