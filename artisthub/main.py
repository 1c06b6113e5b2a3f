"""Main FastAPI application."""

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from artisthub.api.deps import envelope
from artisthub.api.v1 import api_router
from artisthub.config import settings
from artisthub.core.exceptions import AppError
from artisthub.core.logging import setup_logging
from artisthub.core.responses import describe_error, error_body

# Setup logging
setup_logging()
logger = structlog.get_logger(__name__)

# Initialize Sentry for error tracking (only if DSN is properly configured)
if settings.SENTRY_DSN and settings.SENTRY_DSN.startswith("https://"):
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=None,
                event_level="ERROR",  # Only send ERROR and above as events
            ),
        ],
        release=settings.APP_VERSION,
        attach_stacktrace=True,
        send_default_pii=False,
    )
else:
    logger.info("sentry_disabled", reason="SENTRY_DSN not configured")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Artist profiles, casting jobs and account management",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Same paths as the API Gateway deployment
app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness probe."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Expected failures keep their status code and message."""
    logger.warning(
        "request_rejected",
        path=request.url.path,
        status=exc.http_status,
        reason=exc.message,
    )
    return envelope(exc.http_status, error_body(exc.message, exc.details))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error("request_failed", path=request.url.path, error=str(exc), exc_info=exc)
    return envelope(500, error_body("Internal server error", describe_error(exc)))
