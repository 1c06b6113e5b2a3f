"""
DynamoDB table access shared by the user and casting repositories.
Owns every expression string sent to DynamoDB: conditional puts, partial
SET updates, list appends and paginated scans.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional, Tuple

from botocore.exceptions import ClientError

from artisthub.core.exceptions import ConditionFailedError

logger = logging.getLogger(__name__)

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


def build_set_update(fields: Dict[str, Any], updated_at: str) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
    """
    Build a ``SET`` update expression from a mapping of top-level fields.

    Every field gets its own ``#name``/``:value`` placeholder so reserved words
    (``view``, ``status``...) are safe. ``updatedAt`` is always appended.
    Nested values are assigned as a whole, never merged.

    Args:
        fields: Attribute name -> new value
        updated_at: Timestamp written to ``updatedAt``

    Returns:
        (UpdateExpression, ExpressionAttributeNames, ExpressionAttributeValues)
    """
    clauses = []
    names = {}
    values = {}

    for field, value in fields.items():
        clauses.append(f"#{field} = :{field}")
        names[f"#{field}"] = field
        values[f":{field}"] = value

    clauses.append("#updatedAt = :updatedAt")
    names["#updatedAt"] = "updatedAt"
    values[":updatedAt"] = updated_at

    return f"SET {', '.join(clauses)}", names, values


class DynamoDBService:
    """Operations on one DynamoDB table keyed by a single string attribute."""

    key_name: str = "id"

    def __init__(self, table):
        """
        Args:
            table: boto3 ``dynamodb.Table`` resource
        """
        self.table = table

    @property
    def table_name(self) -> str:
        return self.table.name

    def _key(self, key_value: str) -> Dict[str, str]:
        return {self.key_name: key_value}

    def _exists_condition(self) -> str:
        return f"attribute_exists({self.key_name})"

    def get_item(self, key_value: str) -> Optional[dict]:
        """Point read by primary key; None when absent."""
        response = self.table.get_item(Key=self._key(key_value))
        return response.get("Item")

    def put_new_item(self, item: dict) -> dict:
        """
        Insert an item that must not already exist.

        Raises:
            ConditionFailedError: an item with the same key is already stored
        """
        item = self._convert_floats_to_decimal(item)
        try:
            self.table.put_item(
                Item=item,
                ConditionExpression=f"attribute_not_exists({self.key_name})",
            )
        except ClientError as e:
            self._raise_condition_failed(e, item[self.key_name])
            raise
        logger.info(f"Stored {self.key_name}={item[self.key_name]} in {self.table_name}")
        return item

    def delete_item(self, key_value: str) -> None:
        """Delete an existing item; ConditionFailedError when it is already gone."""
        try:
            self.table.delete_item(
                Key=self._key(key_value),
                ConditionExpression=self._exists_condition(),
            )
        except ClientError as e:
            self._raise_condition_failed(e, key_value)
            raise
        logger.info(f"Deleted {self.key_name}={key_value} from {self.table_name}")

    def update_fields(self, key_value: str, fields: Dict[str, Any], updated_at: str) -> dict:
        """
        Assign each field in ``fields`` and bump ``updatedAt``.

        Returns:
            The full item after the update
        """
        expression, names, values = build_set_update(fields, updated_at)
        return self._update(key_value, expression, names, values)

    def append_to_list(self, key_value: str, attribute: str, entry: dict, updated_at: str) -> dict:
        """Append one entry to a list attribute, creating the list if missing."""
        return self._update(
            key_value,
            "SET #list = list_append(if_not_exists(#list, :empty), :entry), #updatedAt = :now",
            {"#list": attribute, "#updatedAt": "updatedAt"},
            {":empty": [], ":entry": [entry], ":now": updated_at},
        )

    def replace_list(self, key_value: str, attribute: str, entries: List[dict], updated_at: str) -> dict:
        """Overwrite a list attribute with a rebuilt list."""
        return self._update(
            key_value,
            "SET #list = :entries, #updatedAt = :now",
            {"#list": attribute, "#updatedAt": "updatedAt"},
            {":entries": entries, ":now": updated_at},
        )

    def increment_counter(self, key_value: str, attribute: str, updated_at: str) -> dict:
        """Atomically add one to a numeric attribute (missing counts as zero)."""
        return self._update(
            key_value,
            "SET #counter = if_not_exists(#counter, :zero) + :inc, #updatedAt = :now",
            {"#counter": attribute, "#updatedAt": "updatedAt"},
            {":zero": 0, ":inc": 1, ":now": updated_at},
        )

    def scan_page(
        self,
        limit: int,
        exclusive_start_key: Optional[dict] = None,
        filter_expression: Optional[str] = None,
        attribute_names: Optional[Dict[str, str]] = None,
        attribute_values: Optional[Dict[str, Any]] = None,
    ) -> Tuple[List[dict], Optional[dict]]:
        """
        Scan one page of the table.

        ``Limit`` bounds the items evaluated, so a filtered page can hold fewer
        than ``limit`` items while more remain.

        Returns:
            (items, LastEvaluatedKey or None)
        """
        params: Dict[str, Any] = {"Limit": limit}
        if filter_expression:
            params["FilterExpression"] = filter_expression
        if attribute_names:
            params["ExpressionAttributeNames"] = attribute_names
        if attribute_values:
            params["ExpressionAttributeValues"] = attribute_values
        if exclusive_start_key:
            params["ExclusiveStartKey"] = exclusive_start_key

        response = self.table.scan(**params)
        return response.get("Items", []), response.get("LastEvaluatedKey")

    def scan_all(self, projection: Optional[List[str]] = None) -> Iterator[dict]:
        """Yield every item in the table, following LastEvaluatedKey."""
        params: Dict[str, Any] = {}
        if projection:
            params["ProjectionExpression"] = ", ".join(f"#p{i}" for i in range(len(projection)))
            params["ExpressionAttributeNames"] = {f"#p{i}": name for i, name in enumerate(projection)}

        while True:
            response = self.table.scan(**params)
            yield from response.get("Items", [])
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            params["ExclusiveStartKey"] = last_key

    def _update(
        self,
        key_value: str,
        expression: str,
        names: Dict[str, str],
        values: Dict[str, Any],
    ) -> dict:
        try:
            response = self.table.update_item(
                Key=self._key(key_value),
                UpdateExpression=expression,
                ConditionExpression=self._exists_condition(),
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=self._convert_floats_to_decimal(values),
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            self._raise_condition_failed(e, key_value)
            raise
        logger.info(f"Updated {self.key_name}={key_value} in {self.table_name}")
        return response.get("Attributes", {})

    def _raise_condition_failed(self, error: ClientError, key_value: str) -> None:
        if error.response.get("Error", {}).get("Code") == CONDITIONAL_CHECK_FAILED:
            raise ConditionFailedError(self._key(key_value)) from error
        logger.error(f"DynamoDB error on {self.table_name} {self.key_name}={key_value}: {error}")

    @staticmethod
    def _convert_floats_to_decimal(obj):
        """Convert float values to Decimal for DynamoDB."""
        if isinstance(obj, float):
            return Decimal(str(obj))
        elif isinstance(obj, dict):
            return {k: DynamoDBService._convert_floats_to_decimal(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [DynamoDBService._convert_floats_to_decimal(item) for item in obj]
        return obj
