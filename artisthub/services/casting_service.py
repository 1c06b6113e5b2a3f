"""
Casting job service.
Job postings, applications and attached documents.
"""
import logging
from typing import Any, Dict, List, Optional

from artisthub.core.exceptions import (
    ConditionFailedError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from artisthub.core.pagination import decode_token, encode_token, parse_limit
from artisthub.repositories.casting import CastingRepository
from artisthub.schemas.casting import Application, CastingJob, Document
from artisthub.utils.constants import (
    APPLICATION_STATUSES,
    DOCUMENT_TYPES,
    JOB_CATEGORIES,
    JOB_SEARCH_TYPES,
    JOB_TYPES,
    JOB_UPDATABLE_FIELDS,
)
from artisthub.utils.helpers import utc_now_iso
from artisthub.utils.validators import parse_int, require_choice, require_fields

logger = logging.getLogger(__name__)

INVALID_CATEGORY = f"Invalid jobCategory. Must be one of: {', '.join(JOB_CATEGORIES)}"
INVALID_JOB_TYPE = "Invalid jobType. Must be Online or Offline"
INVALID_DOCUMENT_TYPE = f"Invalid document type. Must be one of: {', '.join(DOCUMENT_TYPES)}"


def _has(entry: Any, key: str, value: Any) -> bool:
    """List entries are loosely typed; anything that is not an object never matches."""
    return isinstance(entry, dict) and entry.get(key) == value


class CastingService:
    """Operations behind the /casting endpoints."""

    def __init__(self, repository: CastingRepository):
        self.repository = repository

    def create_job(self, body: Dict[str, Any]) -> dict:
        """
        Raises:
            ValidationError: required field missing, or category/type outside the allow-list
            ConflictError: the generated jobId already exists
        """
        require_fields(body, ["userId", "jobTitle", "jobDescription", "jobCategory", "jobType"])
        require_choice(body["jobCategory"], JOB_CATEGORIES, INVALID_CATEGORY)
        require_choice(body["jobType"], JOB_TYPES, INVALID_JOB_TYPE)

        job = CastingJob.from_payload(body, utc_now_iso()).model_dump()
        try:
            self.repository.put_new_item(job)
        except ConditionFailedError:
            raise ConflictError("Job already exists")

        logger.info(f"Created casting job {job['jobId']} for recruiter {job['userId']}")
        return job

    def get_job(self, job_id: Optional[str]) -> dict:
        if not job_id:
            raise ValidationError("Missing required parameter: jobId")
        job = self.repository.get_item(job_id)
        if not job:
            raise NotFoundError("Job not found")
        return job

    def list_jobs(self, limit: Any = None, last_key: Optional[str] = None, category: Optional[str] = None) -> dict:
        """One page of jobs, optionally filtered by category after the page is read."""
        page_size = parse_limit(limit)
        items, next_key = self.repository.list_page(page_size, decode_token(last_key), category)
        return {
            "items": items,
            "count": len(items),
            "lastKey": encode_token(next_key),
        }

    def update_job(self, job_id: Optional[str], body: Dict[str, Any]) -> dict:
        """Replace whichever allow-listed top-level fields are present in ``body``."""
        if not job_id:
            raise ValidationError("Missing required parameter: jobId")

        fields = {field: body[field] for field in JOB_UPDATABLE_FIELDS if field in body}
        if not fields:
            raise ValidationError("No fields to update")
        if "jobCategory" in fields:
            require_choice(fields["jobCategory"], JOB_CATEGORIES, INVALID_CATEGORY)
        if "jobType" in fields:
            require_choice(fields["jobType"], JOB_TYPES, INVALID_JOB_TYPE)

        self.get_job(job_id)
        return self._update(job_id, fields)

    def delete_job(self, job_id: Optional[str]) -> str:
        self.get_job(job_id)
        try:
            self.repository.delete_item(job_id)
        except ConditionFailedError:
            raise NotFoundError("Job not found")
        logger.info(f"Deleted casting job {job_id}")
        return job_id

    def apply_for_job(self, job_id: Optional[str], body: Dict[str, Any]) -> tuple:
        """
        Append an application unless this user already applied.

        The duplicate check reads the list before the append, so two concurrent
        applications by the same user can both land.

        Returns:
            (new application, updated job)
        """
        if not job_id:
            raise ValidationError("Missing required parameter: jobId")
        require_fields(body, ["userId"])

        job = self.get_job(job_id)
        user_id = body["userId"]
        if any(_has(app, "userId", user_id) for app in job.get("appliedBy") or []):
            raise ConflictError("You have already applied for this job")

        now = utc_now_iso()
        application = Application(
            userId=user_id,
            avatarUrl=body.get("avatarUrl") or "",
            appliedAt=now,
        ).model_dump()

        try:
            updated = self.repository.append_to_list(job_id, "appliedBy", application, now)
        except ConditionFailedError:
            raise NotFoundError("Job not found")

        logger.info(f"User {user_id} applied for job {job_id}")
        return application, updated

    def get_job_applications(self, job_id: Optional[str]) -> List[dict]:
        return self.get_job(job_id).get("appliedBy") or []

    def update_application_status(self, job_id: Optional[str], user_id: Optional[str], body: Dict[str, Any]) -> dict:
        """
        Set the status of one user's application (1 = Applied, 2 = Shortlisted).

        Read-modify-write of the whole ``appliedBy`` list: a concurrent
        application or status change on the same job can be lost.
        """
        if not job_id or not user_id:
            raise ValidationError("Missing required parameters: jobId, userId")

        status = parse_int(body.get("status"))
        if status not in APPLICATION_STATUSES:
            raise ValidationError("Invalid status. Must be 1 (Applied) or 2 (Shortlisted)")

        job = self.get_job(job_id)
        applied_by = list(job.get("appliedBy") or [])
        index = next((i for i, app in enumerate(applied_by) if _has(app, "userId", user_id)), None)
        if index is None:
            raise NotFoundError("Application not found")

        applied_by[index] = {**applied_by[index], "status": status}
        return self._replace_list(job_id, "appliedBy", applied_by)

    def increment_view(self, job_id: Optional[str]) -> Any:
        if not job_id:
            raise ValidationError("Missing required parameter: jobId")
        try:
            job = self.repository.increment_counter(job_id, "view", utc_now_iso())
        except ConditionFailedError:
            raise NotFoundError("Job not found")
        return job.get("view")

    def add_document(self, job_id: Optional[str], body: Dict[str, Any]) -> tuple:
        """
        Returns:
            (new document, updated job)
        """
        if not job_id:
            raise ValidationError("Missing required parameter: jobId")
        require_fields(body, ["url", "type"])
        require_choice(body["type"], DOCUMENT_TYPES, INVALID_DOCUMENT_TYPE)
        self.get_job(job_id)

        now = utc_now_iso()
        document = Document(url=body["url"], type=body["type"], uploadedAt=now).model_dump()
        try:
            updated = self.repository.append_to_list(job_id, "documents", document, now)
        except ConditionFailedError:
            raise NotFoundError("Job not found")
        return document, updated

    def remove_document(self, job_id: Optional[str], doc_id: Optional[str]) -> dict:
        """Rebuild ``documents`` without ``doc_id``; not-found when nothing was removed."""
        if not job_id or not doc_id:
            raise ValidationError("Missing required parameters: jobId, docId")

        job = self.get_job(job_id)
        existing = job.get("documents") or []
        documents = [doc for doc in existing if not _has(doc, "id", doc_id)]
        if len(documents) == len(existing):
            raise NotFoundError("Document not found")

        return self._replace_list(job_id, "documents", documents)

    def get_user_applications(self, user_id: Optional[str]) -> List[dict]:
        """
        Every application ``user_id`` has made, tagged with the job it belongs to.

        Walks the whole casting table; there is no index from applicant to job.
        """
        if not user_id:
            raise ValidationError("Missing required parameter: userId")

        applications = []
        for job in self.repository.iter_applications():
            for app in job.get("appliedBy") or []:
                if _has(app, "userId", user_id):
                    applications.append({
                        **app,
                        "jobId": job.get("jobId"),
                        "jobTitle": job.get("jobTitle"),
                        "jobCategory": job.get("jobCategory"),
                    })
        return applications

    def search_jobs(self, query: Optional[str], search_type: Optional[str] = None, limit: Any = None) -> dict:
        if not query:
            raise ValidationError("Missing required parameter: q")
        search_type = search_type or "category"
        if search_type not in JOB_SEARCH_TYPES:
            raise ValidationError("Invalid search type. Use: category, title, location, or tags")

        items = self.repository.search(query, search_type, parse_limit(limit))
        return {
            "query": query,
            "type": search_type,
            "count": len(items),
            "items": items,
        }

    def _update(self, job_id: str, fields: Dict[str, Any]) -> dict:
        try:
            return self.repository.update_fields(job_id, fields, utc_now_iso())
        except ConditionFailedError:
            raise NotFoundError("Job not found")

    def _replace_list(self, job_id: str, attribute: str, entries: List[dict]) -> dict:
        try:
            return self.repository.replace_list(job_id, attribute, entries, utc_now_iso())
        except ConditionFailedError:
            raise NotFoundError("Job not found")
