"""
API v1 Router - Aggregates all v1 endpoints.
Base Path: /api/v1
"""

from fastapi import APIRouter

from examples_admin.api.v1 import audio, categories, examples, health, session

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(session.router, prefix="/session", tags=["session"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(examples.router, prefix="/examples", tags=["examples"])
api_router.include_router(audio.router, prefix="/audio", tags=["audio"])
