"""Health check endpoint — no dependencies, always available."""

import time

from fastapi import APIRouter

from blog.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "blog",
        "version": settings.app_version,
        "environment": settings.app_env,
        "timestamp": int(time.time()),
    }
