"""Casting job schemas."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from artisthub.utils.constants import APPLICATION_STATUS_APPLIED
from artisthub.utils.helpers import new_id
from artisthub.utils.validators import is_truthy


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Application(_Record):
    """Entry appended to a job's ``appliedBy`` list."""

    appId: str = Field(default_factory=new_id)
    userId: Any
    avatarUrl: Any = ""
    status: int = APPLICATION_STATUS_APPLIED
    appliedAt: str


class Document(_Record):
    """Entry appended to a job's ``documents`` list."""

    id: str = Field(default_factory=new_id)
    url: Any
    type: Any
    uploadedAt: str


class CastingJob(_Record):
    """A casting job posting as stored in the casting table."""

    jobId: str = Field(default_factory=new_id)
    userId: Any
    jobTitle: Any
    jobDescription: Any
    jobCategory: str
    jobType: str
    jobLocation: Any = Field(default_factory=list)
    tags: Any = Field(default_factory=list)
    view: int = 0
    verified: bool = False
    isExpired: bool = False
    isCollab: Any = False
    isWishlisted: bool = False
    imageUrl: Any = ""
    expiryDate: Any = None
    applicationStatus: int = 0
    appliedBy: list = Field(default_factory=list)
    recruiter: Any = Field(default_factory=list)
    requirements: Any = Field(default_factory=list)
    documents: Any = Field(default_factory=list)
    createdAt: str
    updatedAt: str

    @classmethod
    def from_payload(cls, body: Dict[str, Any], now: str) -> "CastingJob":
        """Build a new posting from a validated create request."""
        optional = {
            key: body[key]
            for key in ("jobLocation", "tags", "recruiter", "requirements", "documents")
            if body.get(key) is not None
        }
        optional.update({
            key: body[key]
            for key in ("isCollab", "imageUrl", "expiryDate")
            if is_truthy(body.get(key))
        })

        return cls(
            userId=body["userId"],
            jobTitle=body["jobTitle"],
            jobDescription=body["jobDescription"],
            jobCategory=body["jobCategory"],
            jobType=body["jobType"],
            createdAt=now,
            updatedAt=now,
            **optional,
        )
