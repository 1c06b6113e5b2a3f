"""Lambda handlers for /casting."""

import structlog

from artisthub.api.deps import get_casting_service
from artisthub.core.responses import success_body, success_response
from artisthub.handlers.common import lambda_endpoint, parse_body, path_param, query_params
from artisthub.services.casting_service import CastingService

logger = structlog.get_logger(__name__)


@lambda_endpoint("Failed to create job")
def create_job(event, context=None, service: CastingService = None):
    """POST /casting"""
    service = service or get_casting_service()
    job = service.create_job(parse_body(event))
    logger.info("job_created", job_id=job["jobId"], category=job["jobCategory"])
    return success_response(201, success_body({"job": job}, "Casting job created successfully"))


@lambda_endpoint("Failed to fetch job")
def get_job_by_id(event, context=None, service: CastingService = None):
    """GET /casting/{jobId}"""
    service = service or get_casting_service()
    job = service.get_job(path_param(event, "jobId"))
    return success_response(200, success_body({"job": job}))


@lambda_endpoint("Failed to fetch jobs")
def list_jobs(event, context=None, service: CastingService = None):
    """GET /casting?limit=10&lastKey={lastKey}&category=Acting"""
    service = service or get_casting_service()
    params = query_params(event)
    page = service.list_jobs(params.get("limit"), params.get("lastKey"), params.get("category"))
    return success_response(200, success_body(page))


@lambda_endpoint("Failed to update job")
def update_job(event, context=None, service: CastingService = None):
    """PUT /casting/{jobId}"""
    service = service or get_casting_service()
    job = service.update_job(path_param(event, "jobId"), parse_body(event))
    return success_response(200, success_body({"job": job}, "Job updated successfully"))


@lambda_endpoint("Failed to delete job")
def delete_job(event, context=None, service: CastingService = None):
    """DELETE /casting/{jobId}"""
    service = service or get_casting_service()
    job_id = service.delete_job(path_param(event, "jobId"))
    logger.info("job_deleted", job_id=job_id)
    return success_response(200, success_body({"deletedJobId": job_id}, "Job deleted successfully"))


@lambda_endpoint("Failed to apply for job")
def apply_for_job(event, context=None, service: CastingService = None):
    """POST /casting/{jobId}/apply"""
    service = service or get_casting_service()
    application, job = service.apply_for_job(path_param(event, "jobId"), parse_body(event))
    logger.info("application_submitted", job_id=job.get("jobId"), app_id=application["appId"])
    return success_response(
        201,
        success_body({"application": application, "job": job}, "Application submitted successfully"),
    )


@lambda_endpoint("Failed to fetch applications")
def get_job_applications(event, context=None, service: CastingService = None):
    """GET /casting/{jobId}/applications"""
    service = service or get_casting_service()
    job_id = path_param(event, "jobId")
    applications = service.get_job_applications(job_id)
    return success_response(200, success_body({
        "jobId": job_id,
        "applications": applications,
        "count": len(applications),
    }))


@lambda_endpoint("Failed to update application status")
def update_application_status(event, context=None, service: CastingService = None):
    """PUT /casting/{jobId}/applications/{userId}"""
    service = service or get_casting_service()
    job = service.update_application_status(
        path_param(event, "jobId"),
        path_param(event, "userId"),
        parse_body(event),
    )
    return success_response(200, success_body({"job": job}, "Application status updated"))


@lambda_endpoint("Failed to update job view")
def increment_job_view(event, context=None, service: CastingService = None):
    """PUT /casting/{jobId}/view"""
    service = service or get_casting_service()
    view = service.increment_view(path_param(event, "jobId"))
    return success_response(200, success_body({"view": view}, "Job view incremented"))


@lambda_endpoint("Failed to add document")
def add_document(event, context=None, service: CastingService = None):
    """POST /casting/{jobId}/documents"""
    service = service or get_casting_service()
    document, job = service.add_document(path_param(event, "jobId"), parse_body(event))
    return success_response(201, success_body({"document": document, "job": job}, "Document added"))


@lambda_endpoint("Failed to remove document")
def remove_document(event, context=None, service: CastingService = None):
    """DELETE /casting/{jobId}/documents/{docId}"""
    service = service or get_casting_service()
    job = service.remove_document(path_param(event, "jobId"), path_param(event, "docId"))
    return success_response(200, success_body({"job": job}, "Document removed"))


@lambda_endpoint("Failed to fetch user applications")
def get_user_applications(event, context=None, service: CastingService = None):
    """GET /casting/user/{userId}/applications"""
    service = service or get_casting_service()
    user_id = path_param(event, "userId")
    applications = service.get_user_applications(user_id)
    return success_response(200, success_body({
        "userId": user_id,
        "applications": applications,
        "count": len(applications),
    }))


@lambda_endpoint("Failed to search jobs")
def search_jobs(event, context=None, service: CastingService = None):
    """GET /casting/search?q=query&type=category"""
    service = service or get_casting_service()
    params = query_params(event)
    result = service.search_jobs(params.get("q"), params.get("type"), params.get("limit"))
    return success_response(200, success_body(result))
