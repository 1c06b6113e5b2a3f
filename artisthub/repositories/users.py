"""Users table: primary key ``userId`` plus a username secondary index."""

from typing import List, Optional, Tuple

from artisthub.services.dynamodb_service import DynamoDBService

# search type -> (FilterExpression, ExpressionAttributeNames)
USER_SEARCH_FILTERS = {
    "category": (
        "contains(basicDetails.#category, :q)",
        {"#category": "category"},
    ),
    "skills": (
        "contains(#skills.#expertise, :q) OR contains(#skills.#languages, :q)",
        {"#skills": "skills", "#expertise": "expertise", "#languages": "languages"},
    ),
    "username": (
        "contains(username, :q)",
        {},
    ),
}


class UserRepository(DynamoDBService):
    """User profile records."""

    key_name = "userId"

    def __init__(self, table, username_index: str = "usernameIndex"):
        super().__init__(table)
        self.username_index = username_index

    def find_by_username(self, username: str) -> Optional[dict]:
        """Exact-match lookup on the username index; first match or None."""
        response = self.table.query(
            IndexName=self.username_index,
            KeyConditionExpression="username = :username",
            ExpressionAttributeValues={":username": username},
        )
        items = response.get("Items", [])
        return items[0] if items else None

    def list_page(self, limit: int, start_key: Optional[dict] = None) -> Tuple[List[dict], Optional[dict]]:
        return self.scan_page(limit, exclusive_start_key=start_key)

    def search(self, query: str, search_type: str, limit: int) -> List[dict]:
        """Single filtered scan page; ``search_type`` must be a USER_SEARCH_FILTERS key."""
        expression, names = USER_SEARCH_FILTERS[search_type]
        items, _ = self.scan_page(
            limit,
            filter_expression=expression,
            attribute_names=names or None,
            attribute_values={":q": query},
        )
        return items
