"""
Top-level API router.

Both endpoint modules live under ``/api/users``: ``users`` serves the
collection itself and ``exercises`` the per-user sub-resources.
"""

from fastapi import APIRouter

from .endpoints import exercises, users


router = APIRouter()

router.include_router(users.router, prefix="/api/users", tags=["users"])
router.include_router(exercises.router, prefix="/api/users", tags=["exercises"])
