"""
User endpoints.

Create users and list them.  Store failures are reported with a fixed
generic message; the underlying error is only logged.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from ...core.errors import StoreError, ValidationError
from ...schemas.user import UserRead
from ...services.user_service import UserService
from ...store import ExerciseStore
from ..deps import get_store, read_body


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=UserRead)
async def create_user(request: Request, store: ExerciseStore = Depends(get_store)) -> UserRead:
    """Create a user from the ``username`` body field.

    Responds 400 if the username is missing or blank.
    """
    body = await read_body(request)
    try:
        return await UserService.create_user(store, body.get("username"))
    except ValidationError:
        raise
    except Exception as exc:
        logger.exception("Failed to create user")
        raise StoreError("failed to create user") from exc


@router.get("", response_model=List[UserRead])
async def list_users(store: ExerciseStore = Depends(get_store)) -> List[UserRead]:
    """Return every user as ``{username, id}``."""
    try:
        return await UserService.list_users(store)
    except Exception as exc:
        logger.exception("Failed to fetch users")
        raise StoreError("failed to fetch users") from exc
