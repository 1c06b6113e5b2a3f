"""Common constants."""

# Casting job categories
JOB_CATEGORIES = [
    "Acting",
    "Singing",
    "Dancing",
    "Modeling",
    "Writing",
    "Editing",
    "Photography",
    "Makeup",
    "Voice Acting",
    "Comedy",
    "Production",
    "Design",
]

# Casting job types
JOB_TYPES = ["Online", "Offline"]

# Casting job document types
DOCUMENT_TYPES = ["pdf", "image", "video", "script"]

# Application statuses (0 = not applied)
APPLICATION_STATUS_APPLIED = 1
APPLICATION_STATUS_SHORTLISTED = 2
APPLICATION_STATUSES = [APPLICATION_STATUS_APPLIED, APPLICATION_STATUS_SHORTLISTED]

# Connection statuses
CONNECTION_STATUS_PENDING = "pending"

# Fields a PUT /users/{userId} may replace
USER_UPDATABLE_FIELDS = [
    "username",
    "email",
    "privacy",
    "currentPlan",
    "view",
    "aboutMe",
    "device_tokens",
    "subscription",
    "tokens",
    "basicDetails",
    "contactDetails",
    "physicalStats",
    "skills",
    "workExperience",
    "portfolio",
    "appliedJobs",
    "requestSent",
    "requestReceived",
    "connections",
]

# Fields a PUT /casting/{jobId} may replace
JOB_UPDATABLE_FIELDS = [
    "jobTitle",
    "jobDescription",
    "jobCategory",
    "jobType",
    "jobLocation",
    "tags",
    "view",
    "verified",
    "isExpired",
    "isCollab",
    "isWishlisted",
    "imageUrl",
    "expiryDate",
    "applicationStatus",
    "appliedBy",
    "recruiter",
    "requirements",
    "documents",
]

# Search types
USER_SEARCH_TYPES = ["category", "skills", "username"]
JOB_SEARCH_TYPES = ["category", "title", "location", "tags"]
