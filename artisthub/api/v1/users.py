"""User profile endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from artisthub.api.deps import envelope, get_user_service, json_body
from artisthub.core.responses import success_body
from artisthub.services.user_service import UserService

router = APIRouter()


@router.post("")
def create_user(
    body: Dict[str, Any] = Depends(json_body),
    service: UserService = Depends(get_user_service),
):
    """Create a profile; `username` and `email` are required and the username must be unique."""
    user = service.create_user(body)
    return envelope(201, success_body({"user": user}, "User created successfully"))


@router.get("")
def list_users(
    limit: Optional[str] = Query(None, description="Page size (max 100)"),
    last_key: Optional[str] = Query(None, alias="lastKey", description="Continuation token"),
    service: UserService = Depends(get_user_service),
):
    """One page of users plus the token for the next page."""
    return envelope(200, success_body(service.list_users(limit, last_key)))


@router.get("/search")
def search_users(
    q: Optional[str] = Query(None),
    type: Optional[str] = Query(None, description="category, skills or username"),
    limit: Optional[str] = Query(None),
    service: UserService = Depends(get_user_service),
):
    return envelope(200, success_body(service.search_users(q, type, limit)))


@router.get("/username/{username}")
def get_user_by_username(username: str, service: UserService = Depends(get_user_service)):
    return envelope(200, success_body({"user": service.get_user_by_username(username)}))


@router.get("/{user_id}")
def get_user_by_id(user_id: str, service: UserService = Depends(get_user_service)):
    return envelope(200, success_body({"user": service.get_user(user_id)}))


@router.put("/{user_id}")
def update_user(
    user_id: str,
    body: Dict[str, Any] = Depends(json_body),
    service: UserService = Depends(get_user_service),
):
    """Replace the supplied top-level fields; unknown fields are ignored."""
    user = service.update_user(user_id, body)
    return envelope(200, success_body({"user": user}, "User updated successfully"))


@router.delete("/{user_id}")
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    deleted = service.delete_user(user_id)
    return envelope(200, success_body({"deletedUserId": deleted}, "User deleted successfully"))


@router.put("/{user_id}/view")
def increment_user_view(user_id: str, service: UserService = Depends(get_user_service)):
    view = service.increment_view(user_id)
    return envelope(200, success_body({"view": view}, "User view incremented"))


@router.post("/{user_id}/work-experience")
def add_work_experience(
    user_id: str,
    body: Dict[str, Any] = Depends(json_body),
    service: UserService = Depends(get_user_service),
):
    entry, user = service.add_work_experience(user_id, body)
    return envelope(201, success_body({"workExperience": entry, "user": user}, "Work experience added"))


@router.post("/{user_id}/portfolio")
def add_portfolio_item(
    user_id: str,
    body: Dict[str, Any] = Depends(json_body),
    service: UserService = Depends(get_user_service),
):
    entry, user = service.add_portfolio_item(user_id, body)
    return envelope(201, success_body({"portfolioItem": entry, "user": user}, "Portfolio item added"))


@router.post("/{user_id}/connections")
def add_connection(
    user_id: str,
    body: Dict[str, Any] = Depends(json_body),
    service: UserService = Depends(get_user_service),
):
    entry, user = service.add_connection(user_id, body)
    return envelope(201, success_body({"connection": entry, "user": user}, "Connection added"))
