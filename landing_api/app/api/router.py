"""
Top‑level API router.

This router aggregates the whitelist and content routers.  The
application mounts it under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import content, whitelist

router = APIRouter()

router.include_router(whitelist.router, prefix="/whitelist", tags=["whitelist"])
router.include_router(content.router, prefix="/content", tags=["content"])
