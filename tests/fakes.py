"""In-memory stand-ins for the DynamoDB repositories.

They keep the repository contract the services rely on:
    - writes on a missing key raise ConditionFailedError (attribute_exists)
    - creates on an existing key raise ConditionFailedError (attribute_not_exists)
    - scans evaluate ``limit`` items in insertion order, then filter
    - every read returns a copy, so callers cannot mutate stored state
"""

import copy
import json
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from artisthub.core.exceptions import ConditionFailedError


def _contains(value: Any, needle: Any) -> bool:
    """DynamoDB ``contains``: substring for strings, membership for lists/sets."""
    if isinstance(value, str):
        return isinstance(needle, str) and needle in value
    if isinstance(value, (list, set, tuple)):
        return needle in value
    return False


class FakeRepository:
    key_name = "id"

    def __init__(self, items: Optional[List[dict]] = None):
        self.items: Dict[str, dict] = {}
        self.calls: List[str] = []
        for item in items or []:
            self.items[item[self.key_name]] = copy.deepcopy(item)

    def _existing(self, key_value: str) -> dict:
        if key_value not in self.items:
            raise ConditionFailedError({self.key_name: key_value})
        return self.items[key_value]

    def get_item(self, key_value: str) -> Optional[dict]:
        self.calls.append("get_item")
        item = self.items.get(key_value)
        return copy.deepcopy(item) if item is not None else None

    def put_new_item(self, item: dict) -> dict:
        self.calls.append("put_new_item")
        key_value = item[self.key_name]
        if key_value in self.items:
            raise ConditionFailedError({self.key_name: key_value})
        self.items[key_value] = copy.deepcopy(item)
        return item

    def delete_item(self, key_value: str) -> None:
        self.calls.append("delete_item")
        self._existing(key_value)
        del self.items[key_value]

    def update_fields(self, key_value: str, fields: Dict[str, Any], updated_at: str) -> dict:
        self.calls.append("update_fields")
        item = self._existing(key_value)
        item.update(copy.deepcopy(fields))
        item["updatedAt"] = updated_at
        return copy.deepcopy(item)

    def append_to_list(self, key_value: str, attribute: str, entry: dict, updated_at: str) -> dict:
        self.calls.append("append_to_list")
        item = self._existing(key_value)
        current = item[attribute] if attribute in item else []
        item[attribute] = current + [copy.deepcopy(entry)]
        item["updatedAt"] = updated_at
        return copy.deepcopy(item)

    def replace_list(self, key_value: str, attribute: str, entries: List[dict], updated_at: str) -> dict:
        self.calls.append("replace_list")
        item = self._existing(key_value)
        item[attribute] = copy.deepcopy(entries)
        item["updatedAt"] = updated_at
        return copy.deepcopy(item)

    def increment_counter(self, key_value: str, attribute: str, updated_at: str) -> dict:
        self.calls.append("increment_counter")
        item = self._existing(key_value)
        item[attribute] = item.get(attribute, 0) + 1
        item["updatedAt"] = updated_at
        return copy.deepcopy(item)

    def _scan(
        self,
        limit: int,
        start_key: Optional[dict] = None,
        predicate: Optional[Callable[[dict], bool]] = None,
    ) -> Tuple[List[dict], Optional[dict]]:
        keys = list(self.items)
        start = keys.index(start_key[self.key_name]) + 1 if start_key else 0
        window = keys[start:start + limit]
        items = [copy.deepcopy(self.items[k]) for k in window]
        if predicate:
            items = [item for item in items if predicate(item)]
        last_key = {self.key_name: window[-1]} if window and start + limit < len(keys) else None
        return items, last_key


class FakeUserRepository(FakeRepository):
    key_name = "userId"

    def find_by_username(self, username: str) -> Optional[dict]:
        self.calls.append("find_by_username")
        for item in self.items.values():
            if item.get("username") == username:
                return copy.deepcopy(item)
        return None

    def list_page(self, limit: int, start_key: Optional[dict] = None):
        return self._scan(limit, start_key)

    def search(self, query: str, search_type: str, limit: int) -> List[dict]:
        predicates = {
            "category": lambda u: _contains((u.get("basicDetails") or {}).get("category"), query),
            "skills": lambda u: (
                _contains((u.get("skills") or {}).get("expertise"), query)
                or _contains((u.get("skills") or {}).get("languages"), query)
            ),
            "username": lambda u: _contains(u.get("username"), query),
        }
        items, _ = self._scan(limit, predicate=predicates[search_type])
        return items


class FakeCastingRepository(FakeRepository):
    key_name = "jobId"

    def list_page(self, limit: int, start_key: Optional[dict] = None, category: Optional[str] = None):
        predicate = (lambda job: job.get("jobCategory") == category) if category else None
        return self._scan(limit, start_key, predicate)

    def search(self, query: str, search_type: str, limit: int) -> List[dict]:
        predicates = {
            "category": lambda job: job.get("jobCategory") == query,
            "title": lambda job: _contains(job.get("jobTitle"), query),
            "location": lambda job: _contains(job.get("jobLocation"), query),
            "tags": lambda job: _contains(job.get("tags"), query),
        }
        items, _ = self._scan(limit, predicate=predicates[search_type])
        return items

    def iter_applications(self) -> Iterator[dict]:
        for job in self.items.values():
            yield {
                key: copy.deepcopy(job[key])
                for key in ("jobId", "jobTitle", "jobCategory", "appliedBy")
                if key in job
            }


def make_event(body=None, path=None, query=None, headers=None):
    """Minimal API Gateway proxy event."""
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    return {
        "body": body,
        "pathParameters": path,
        "queryStringParameters": query,
        "headers": headers or {},
    }


def response_json(response: dict) -> dict:
    return json.loads(response["body"])
