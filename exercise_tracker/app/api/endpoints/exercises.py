"""
Exercise endpoints.

``POST /{user_id}/exercises`` records an exercise and
``GET /{user_id}/logs`` returns the filtered log.  Both report an
unknown user as 404 and an unparsable date as 400.

Unexpected failures differ on purpose: adding an exercise answers with
a generic message, while the log endpoint passes the underlying error
message through to the client.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ...core.errors import NotFound, StoreError, ValidationError
from ...schemas.exercise import ExerciseLog, ExerciseRead
from ...services.exercise_service import ExerciseService
from ...store import ExerciseStore
from ..deps import get_store, read_body


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{user_id}/exercises", response_model=ExerciseRead)
async def add_exercise(
    user_id: str,
    request: Request,
    store: ExerciseStore = Depends(get_store),
) -> ExerciseRead:
    """Record an exercise from ``description``, ``duration`` and optional ``date``."""
    body = await read_body(request)
    try:
        return await ExerciseService.add_exercise(
            store,
            user_id,
            description=body.get("description"),
            duration=body.get("duration"),
            date=body.get("date"),
        )
    except (NotFound, ValidationError):
        raise
    except Exception as exc:
        logger.exception("Failed to add exercise for user %s", user_id)
        raise StoreError("failed to add exercise") from exc


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_logs(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from", description="Earliest date, inclusive"),
    date_to: Optional[str] = Query(None, alias="to", description="Latest date, inclusive"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    store: ExerciseStore = Depends(get_store),
) -> ExerciseLog:
    """Return the user's exercise log.

    - **from**, **to**: date bounds (``YYYY-MM-DD``), both inclusive.
    - **limit**: cap on the number of entries; ignored unless it reads
      as a positive integer.
    """
    try:
        return await ExerciseService.get_log(
            store,
            user_id,
            date_from=date_from,
            date_to=date_to,
            limit=limit,
        )
    except (NotFound, ValidationError):
        raise
    except Exception as exc:
        logger.exception("Error in GET /api/users/%s/logs", user_id)
        message = exc.message if isinstance(exc, StoreError) else str(exc)
        raise StoreError(message or "failed to fetch logs") from exc
