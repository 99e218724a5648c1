"""
Main API router that includes all endpoint groups.
"""
from fastapi import APIRouter

from configui.api.api_v1.endpoints import health, ready

# Create the main API router
api_router = APIRouter()

api_router.include_router(
    health.router,
    prefix="/health",
    tags=["Health"]
)

api_router.include_router(
    ready.router,
    prefix="/ready",
    tags=["Ready"]
)
