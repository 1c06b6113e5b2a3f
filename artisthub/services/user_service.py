"""
User profile service.
Business rules for profiles: username uniqueness, partial updates, list
appends and scan-based listing/search.
"""
import logging
from typing import Any, Dict, Optional

from artisthub.core.exceptions import (
    ConditionFailedError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from artisthub.core.pagination import decode_token, encode_token, parse_limit
from artisthub.repositories.users import UserRepository
from artisthub.schemas.user import Connection, PortfolioItem, User, WorkExperience
from artisthub.utils.constants import USER_SEARCH_TYPES, USER_UPDATABLE_FIELDS
from artisthub.utils.helpers import utc_now_iso
from artisthub.utils.validators import require_fields

logger = logging.getLogger(__name__)


class UserService:
    """Operations behind the /users endpoints."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def create_user(self, body: Dict[str, Any]) -> dict:
        """
        Create a profile after checking the username is free.

        The index lookup and the insert are separate calls, so two concurrent
        creates with the same username can both succeed.

        Raises:
            ValidationError: username or email missing
            ConflictError: username taken, or the generated id already exists
        """
        require_fields(body, ["username", "email"])

        if self.repository.find_by_username(body["username"]):
            raise ConflictError("Username already exists")

        user = User.from_payload(body, utc_now_iso()).model_dump()
        try:
            self.repository.put_new_item(user)
        except ConditionFailedError:
            raise ConflictError("User already exists")

        logger.info(f"Created user {user['userId']} ({user['username']})")
        return user

    def get_user(self, user_id: Optional[str]) -> dict:
        if not user_id:
            raise ValidationError("Missing required parameter: userId")
        user = self.repository.get_item(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def get_user_by_username(self, username: Optional[str]) -> dict:
        if not username:
            raise ValidationError("Missing required parameter: username")
        user = self.repository.find_by_username(username)
        if not user:
            raise NotFoundError("User not found")
        return user

    def update_user(self, user_id: Optional[str], body: Dict[str, Any]) -> dict:
        """
        Replace whichever allow-listed top-level fields are present in ``body``.

        Nested objects (``basicDetails``, ``skills``...) are replaced as a
        whole; a partial object drops the keys it omits.
        """
        if not user_id:
            raise ValidationError("Missing required parameter: userId")

        fields = {field: body[field] for field in USER_UPDATABLE_FIELDS if field in body}
        if not fields:
            raise ValidationError("No fields to update")

        existing = self.get_user(user_id)

        new_username = fields.get("username")
        if new_username and new_username != existing.get("username"):
            if self.repository.find_by_username(new_username):
                raise ConflictError("Username already exists")

        try:
            return self.repository.update_fields(user_id, fields, utc_now_iso())
        except ConditionFailedError:
            raise NotFoundError("User not found")

    def delete_user(self, user_id: Optional[str]) -> str:
        self.get_user(user_id)
        try:
            self.repository.delete_item(user_id)
        except ConditionFailedError:
            raise NotFoundError("User not found")
        logger.info(f"Deleted user {user_id}")
        return user_id

    def list_users(self, limit: Any = None, last_key: Optional[str] = None) -> dict:
        """One page of users plus the token for the next page (None at the end)."""
        page_size = parse_limit(limit)
        items, next_key = self.repository.list_page(page_size, decode_token(last_key))
        return {
            "items": items,
            "count": len(items),
            "lastKey": encode_token(next_key),
        }

    def increment_view(self, user_id: Optional[str]) -> Any:
        """Add one to the profile view counter and return the new value."""
        if not user_id:
            raise ValidationError("Missing required parameter: userId")
        try:
            user = self.repository.increment_counter(user_id, "view", utc_now_iso())
        except ConditionFailedError:
            raise NotFoundError("User not found")
        return user.get("view")

    def add_work_experience(self, user_id: Optional[str], body: Dict[str, Any]) -> tuple:
        """
        Returns:
            (new work experience entry, updated user)
        """
        if not user_id:
            raise ValidationError("Missing required parameter: userId")
        require_fields(body, ["workType", "brand"])
        self.get_user(user_id)

        now = utc_now_iso()
        entry = WorkExperience(
            workType=body["workType"],
            brand=body["brand"],
            verified=body.get("verified", False),
            workLink=body.get("workLink") or "",
            createdAt=now,
        ).model_dump()
        return entry, self._append(user_id, "workExperience", entry, now)

    def add_portfolio_item(self, user_id: Optional[str], body: Dict[str, Any]) -> tuple:
        """
        Returns:
            (new portfolio item, updated user)
        """
        if not user_id:
            raise ValidationError("Missing required parameter: userId")
        require_fields(body, ["url", "type"])
        self.get_user(user_id)

        now = utc_now_iso()
        entry = PortfolioItem(
            url=body["url"],
            type=body["type"],
            selected=body.get("selected", False),
            uploadedAt=now,
        ).model_dump()
        return entry, self._append(user_id, "portfolio", entry, now)

    def add_connection(self, user_id: Optional[str], body: Dict[str, Any]) -> tuple:
        """
        Record a pending connection on this user only; the other party's
        record is not touched.

        Returns:
            (new connection, updated user)
        """
        if not user_id:
            raise ValidationError("Missing required parameter: userId")
        require_fields(body, ["senderId", "receiverId"])
        self.get_user(user_id)

        now = utc_now_iso()
        entry = Connection(
            senderId=body["senderId"],
            receiverId=body["receiverId"],
            connectedAt=now,
        ).model_dump()
        return entry, self._append(user_id, "connections", entry, now)

    def search_users(self, query: Optional[str], search_type: Optional[str] = None, limit: Any = None) -> dict:
        """
        Full-table filtered scan. ``limit`` caps the items evaluated, not the
        matches returned.
        """
        if not query:
            raise ValidationError("Missing required parameter: q")
        search_type = search_type or "category"
        if search_type not in USER_SEARCH_TYPES:
            raise ValidationError("Invalid search type. Use: category, skills, or username")

        items = self.repository.search(query, search_type, parse_limit(limit))
        return {
            "query": query,
            "type": search_type,
            "count": len(items),
            "items": items,
        }

    def _append(self, user_id: str, attribute: str, entry: dict, now: str) -> dict:
        try:
            return self.repository.append_to_list(user_id, attribute, entry, now)
        except ConditionFailedError:
            raise NotFoundError("User not found")
