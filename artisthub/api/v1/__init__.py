"""API v1 routes."""

from fastapi import APIRouter

from artisthub.api.v1 import auth, casting, users

api_router = APIRouter()

# Include all route modules
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(casting.router, prefix="/casting", tags=["Casting"])
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
