"""Top-level API router: mounts the versioned blog API under /api."""

from fastapi import APIRouter

from blog.presentation.api.v1.router import router as v1_router

router = APIRouter(prefix="/api")
router.include_router(v1_router)
