"""Casting job endpoints - jobs, applications and attached documents."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from artisthub.api.deps import envelope, get_casting_service, json_body
from artisthub.core.responses import success_body
from artisthub.services.casting_service import CastingService

router = APIRouter()


@router.post("")
def create_job(
    body: Dict[str, Any] = Depends(json_body),
    service: CastingService = Depends(get_casting_service),
):
    """
    Create a casting job.

    Required: `userId`, `jobTitle`, `jobDescription`, `jobCategory`, `jobType`.
    `jobCategory` must be one of the fixed categories and `jobType` Online or Offline.
    """
    job = service.create_job(body)
    return envelope(201, success_body({"job": job}, "Casting job created successfully"))


@router.get("")
def list_jobs(
    limit: Optional[str] = Query(None, description="Page size (max 100)"),
    last_key: Optional[str] = Query(None, alias="lastKey", description="Continuation token"),
    category: Optional[str] = Query(None, description="Exact jobCategory filter"),
    service: CastingService = Depends(get_casting_service),
):
    return envelope(200, success_body(service.list_jobs(limit, last_key, category)))


@router.get("/search")
def search_jobs(
    q: Optional[str] = Query(None),
    type: Optional[str] = Query(None, description="category, title, location or tags"),
    limit: Optional[str] = Query(None),
    service: CastingService = Depends(get_casting_service),
):
    return envelope(200, success_body(service.search_jobs(q, type, limit)))


@router.get("/user/{user_id}/applications")
def get_user_applications(user_id: str, service: CastingService = Depends(get_casting_service)):
    """Every application a user has made, across all jobs."""
    applications = service.get_user_applications(user_id)
    return envelope(200, success_body({
        "userId": user_id,
        "applications": applications,
        "count": len(applications),
    }))


@router.get("/{job_id}")
def get_job_by_id(job_id: str, service: CastingService = Depends(get_casting_service)):
    return envelope(200, success_body({"job": service.get_job(job_id)}))


@router.put("/{job_id}")
def update_job(
    job_id: str,
    body: Dict[str, Any] = Depends(json_body),
    service: CastingService = Depends(get_casting_service),
):
    job = service.update_job(job_id, body)
    return envelope(200, success_body({"job": job}, "Job updated successfully"))


@router.delete("/{job_id}")
def delete_job(job_id: str, service: CastingService = Depends(get_casting_service)):
    deleted = service.delete_job(job_id)
    return envelope(200, success_body({"deletedJobId": deleted}, "Job deleted successfully"))


@router.post("/{job_id}/apply")
def apply_for_job(
    job_id: str,
    body: Dict[str, Any] = Depends(json_body),
    service: CastingService = Depends(get_casting_service),
):
    application, job = service.apply_for_job(job_id, body)
    return envelope(
        201,
        success_body({"application": application, "job": job}, "Application submitted successfully"),
    )


@router.get("/{job_id}/applications")
def get_job_applications(job_id: str, service: CastingService = Depends(get_casting_service)):
    applications = service.get_job_applications(job_id)
    return envelope(200, success_body({
        "jobId": job_id,
        "applications": applications,
        "count": len(applications),
    }))


@router.put("/{job_id}/applications/{user_id}")
def update_application_status(
    job_id: str,
    user_id: str,
    body: Dict[str, Any] = Depends(json_body),
    service: CastingService = Depends(get_casting_service),
):
    """Set an applicant's status: 1 (Applied) or 2 (Shortlisted)."""
    job = service.update_application_status(job_id, user_id, body)
    return envelope(200, success_body({"job": job}, "Application status updated"))


@router.put("/{job_id}/view")
def increment_job_view(job_id: str, service: CastingService = Depends(get_casting_service)):
    view = service.increment_view(job_id)
    return envelope(200, success_body({"view": view}, "Job view incremented"))


@router.post("/{job_id}/documents")
def add_document(
    job_id: str,
    body: Dict[str, Any] = Depends(json_body),
    service: CastingService = Depends(get_casting_service),
):
    document, job = service.add_document(job_id, body)
    return envelope(201, success_body({"document": document, "job": job}, "Document added"))


@router.delete("/{job_id}/documents/{doc_id}")
def remove_document(job_id: str, doc_id: str, service: CastingService = Depends(get_casting_service)):
    job = service.remove_document(job_id, doc_id)
    return envelope(200, success_body({"job": job}, "Document removed"))
