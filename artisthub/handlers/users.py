"""
Lambda handlers for /users.
Each handler accepts an optional ``service`` so tests can inject one backed
by a fake table.
"""

import structlog

from artisthub.api.deps import get_user_service
from artisthub.core.responses import success_body, success_response
from artisthub.handlers.common import lambda_endpoint, parse_body, path_param, query_params
from artisthub.services.user_service import UserService

logger = structlog.get_logger(__name__)


@lambda_endpoint("Failed to create user")
def create_user(event, context=None, service: UserService = None):
    """POST /users"""
    service = service or get_user_service()
    user = service.create_user(parse_body(event))
    logger.info("user_created", user_id=user["userId"])
    return success_response(201, success_body({"user": user}, "User created successfully"))


@lambda_endpoint("Failed to fetch user")
def get_user_by_id(event, context=None, service: UserService = None):
    """GET /users/{userId}"""
    service = service or get_user_service()
    user = service.get_user(path_param(event, "userId"))
    return success_response(200, success_body({"user": user}))


@lambda_endpoint("Failed to fetch user")
def get_user_by_username(event, context=None, service: UserService = None):
    """GET /users/username/{username}"""
    service = service or get_user_service()
    user = service.get_user_by_username(path_param(event, "username"))
    return success_response(200, success_body({"user": user}))


@lambda_endpoint("Failed to update user")
def update_user(event, context=None, service: UserService = None):
    """PUT /users/{userId}"""
    service = service or get_user_service()
    user = service.update_user(path_param(event, "userId"), parse_body(event))
    return success_response(200, success_body({"user": user}, "User updated successfully"))


@lambda_endpoint("Failed to delete user")
def delete_user(event, context=None, service: UserService = None):
    """DELETE /users/{userId}"""
    service = service or get_user_service()
    user_id = service.delete_user(path_param(event, "userId"))
    logger.info("user_deleted", user_id=user_id)
    return success_response(200, success_body({"deletedUserId": user_id}, "User deleted successfully"))


@lambda_endpoint("Failed to fetch users")
def list_users(event, context=None, service: UserService = None):
    """GET /users?limit=10&lastKey={lastKey}"""
    service = service or get_user_service()
    params = query_params(event)
    page = service.list_users(params.get("limit"), params.get("lastKey"))
    return success_response(200, success_body(page))


@lambda_endpoint("Failed to update user view")
def increment_user_view(event, context=None, service: UserService = None):
    """PUT /users/{userId}/view"""
    service = service or get_user_service()
    view = service.increment_view(path_param(event, "userId"))
    return success_response(200, success_body({"view": view}, "User view incremented"))


@lambda_endpoint("Failed to add work experience")
def add_work_experience(event, context=None, service: UserService = None):
    """POST /users/{userId}/work-experience"""
    service = service or get_user_service()
    entry, user = service.add_work_experience(path_param(event, "userId"), parse_body(event))
    return success_response(
        201,
        success_body({"workExperience": entry, "user": user}, "Work experience added"),
    )


@lambda_endpoint("Failed to add portfolio item")
def add_portfolio_item(event, context=None, service: UserService = None):
    """POST /users/{userId}/portfolio"""
    service = service or get_user_service()
    entry, user = service.add_portfolio_item(path_param(event, "userId"), parse_body(event))
    return success_response(
        201,
        success_body({"portfolioItem": entry, "user": user}, "Portfolio item added"),
    )


@lambda_endpoint("Failed to add connection")
def add_connection(event, context=None, service: UserService = None):
    """POST /users/{userId}/connections"""
    service = service or get_user_service()
    entry, user = service.add_connection(path_param(event, "userId"), parse_body(event))
    return success_response(
        201,
        success_body({"connection": entry, "user": user}, "Connection added"),
    )


@lambda_endpoint("Failed to search users")
def search_users(event, context=None, service: UserService = None):
    """GET /users/search?q=query&type=category"""
    service = service or get_user_service()
    params = query_params(event)
    result = service.search_users(params.get("q"), params.get("type"), params.get("limit"))
    return success_response(200, success_body(result))
