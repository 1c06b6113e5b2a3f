"""Casting jobs table: primary key ``jobId``."""

from typing import Iterator, List, Optional, Tuple

from artisthub.services.dynamodb_service import DynamoDBService

# search type -> FilterExpression
JOB_SEARCH_FILTERS = {
    "category": "jobCategory = :q",
    "title": "contains(jobTitle, :q)",
    "location": "contains(jobLocation, :q)",
    "tags": "contains(tags, :q)",
}

APPLICATION_PROJECTION = ["jobId", "jobTitle", "jobCategory", "appliedBy"]


class CastingRepository(DynamoDBService):
    """Casting job postings."""

    key_name = "jobId"

    def list_page(
        self,
        limit: int,
        start_key: Optional[dict] = None,
        category: Optional[str] = None,
    ) -> Tuple[List[dict], Optional[dict]]:
        if category:
            return self.scan_page(
                limit,
                exclusive_start_key=start_key,
                filter_expression="jobCategory = :category",
                attribute_values={":category": category},
            )
        return self.scan_page(limit, exclusive_start_key=start_key)

    def search(self, query: str, search_type: str, limit: int) -> List[dict]:
        """Single filtered scan page; ``search_type`` must be a JOB_SEARCH_FILTERS key."""
        items, _ = self.scan_page(
            limit,
            filter_expression=JOB_SEARCH_FILTERS[search_type],
            attribute_values={":q": query},
        )
        return items

    def iter_applications(self) -> Iterator[dict]:
        """Every job, projected down to the fields needed to list applications."""
        return self.scan_all(projection=APPLICATION_PROJECTION)
