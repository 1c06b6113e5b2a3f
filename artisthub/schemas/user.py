"""User record schemas.

Request bodies are loosely typed: beyond the required-field checks nothing
is validated, so most attributes are ``Any`` with the defaults a new profile
starts from. Unknown keys inside nested objects are dropped on create.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from artisthub.utils.constants import CONNECTION_STATUS_PENDING
from artisthub.utils.helpers import new_id
from artisthub.utils.validators import is_truthy


def present_values(data: Any) -> Dict[str, Any]:
    """Keep only the keys whose values count as present."""
    if not isinstance(data, dict):
        return {}
    return {key: value for key, value in data.items() if is_truthy(value)}


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore")


class BasicDetails(_Record):
    firstName: Any = ""
    lastName: Any = ""
    fullName: Any = ""
    avatarUrl: Any = ""
    gender: Any = ""
    category: Any = Field(default_factory=list)
    birthDate: Any = None
    age: Any = None
    city: Any = ""


class ContactDetails(_Record):
    email: Any = ""
    phone: Any = ""
    instagram: Any = ""
    facebook: Any = ""
    twitter: Any = ""
    youtube: Any = ""


class PhysicalStats(_Record):
    height: Any = ""
    weight: Any = ""
    bust: Any = ""
    waist: Any = ""
    hips: Any = ""
    chest: Any = ""
    biceps: Any = ""
    hairType: Any = ""
    hairLength: Any = ""


class Skills(_Record):
    languages: Any = Field(default_factory=list)
    expertise: Any = Field(default_factory=list)
    hobbies: Any = Field(default_factory=list)


class Subscription(_Record):
    activePlan: Any = "free"
    startDate: str
    renewalDate: Any = None
    status: str = "active"


class Tokens(_Record):
    AccessToken: Any = ""
    RefreshToken: Any = ""
    IdToken: Any = ""


class WorkExperience(_Record):
    """Entry appended to ``workExperience``."""

    id: str = Field(default_factory=new_id)
    workType: Any
    brand: Any
    verified: Any = False
    workLink: Any = ""
    createdAt: str


class PortfolioItem(_Record):
    """Entry appended to ``portfolio``."""

    id: str = Field(default_factory=new_id)
    url: Any
    type: Any
    selected: Any = False
    uploadedAt: str


class Connection(_Record):
    """Entry appended to ``connections``."""

    connectionId: str = Field(default_factory=new_id)
    senderId: Any
    receiverId: Any
    chatId: str = Field(default_factory=new_id)
    connectionStatus: str = CONNECTION_STATUS_PENDING
    connectedAt: str


class User(_Record):
    """A complete user profile as stored in the users table."""

    userId: str = Field(default_factory=new_id)
    username: Any
    email: Any
    privacy: Any = "public"
    currentPlan: Any = "free"
    view: int = 0
    aboutMe: Any = ""
    device_tokens: Any = Field(default_factory=list)
    subscription: Subscription
    tokens: Any = Field(default_factory=lambda: Tokens().model_dump())
    basicDetails: BasicDetails = Field(default_factory=BasicDetails)
    contactDetails: ContactDetails = Field(default_factory=ContactDetails)
    physicalStats: PhysicalStats = Field(default_factory=PhysicalStats)
    skills: Skills = Field(default_factory=Skills)
    workExperience: Any = Field(default_factory=list)
    portfolio: Any = Field(default_factory=list)
    appliedJobs: Any = Field(default_factory=list)
    requestSent: Any = Field(default_factory=list)
    requestReceived: Any = Field(default_factory=list)
    connections: Any = Field(default_factory=list)
    createdAt: str
    updatedAt: str

    @classmethod
    def from_payload(cls, body: Dict[str, Any], now: str) -> "User":
        """
        Build a new profile from a create request.

        Missing or falsy values fall back to the profile defaults; nested
        objects are rebuilt key by key so partial objects are completed.
        """
        top = present_values(body)
        subscription = present_values(body.get("subscription"))
        contact = present_values(body.get("contactDetails"))
        contact.setdefault("email", body.get("email"))

        fields = {
            key: top[key]
            for key in (
                "privacy", "currentPlan", "aboutMe", "device_tokens", "tokens",
                "workExperience", "portfolio", "appliedJobs", "requestSent",
                "requestReceived", "connections",
            )
            if key in top
        }

        return cls(
            username=body.get("username"),
            email=body.get("email"),
            subscription=Subscription(
                activePlan=subscription.get("activePlan", "free"),
                startDate=now,
                renewalDate=subscription.get("renewalDate"),
            ),
            basicDetails=BasicDetails(**present_values(body.get("basicDetails"))),
            contactDetails=ContactDetails(**contact),
            physicalStats=PhysicalStats(**present_values(body.get("physicalStats"))),
            skills=Skills(**present_values(body.get("skills"))),
            createdAt=now,
            updatedAt=now,
            **fields,
        )
