"""Main API router."""

from fastapi import APIRouter

from api.v1 import health, signups

# Main API router; the landing page calls these paths unversioned (/api/signup).
api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(signups.router, tags=["signups"])
