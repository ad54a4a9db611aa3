"""
Business logic for exercises and exercise logs.

Exercise dates are plain calendar days.  Dates given with a time or an
offset are reduced to their UTC day, and a missing date means today in
UTC.  Log filters compare whole days, so both ``from`` and ``to`` are
inclusive.
"""

import logging
from typing import Any, Optional

from ..core.errors import ValidationError
from ..core.formats import (
    MAX_INTEGER,
    format_calendar_date,
    parse_calendar_date,
    parse_leading_int,
    today,
)
from ..schemas.exercise import ExerciseLog, ExerciseRead, LogEntry
from ..store import ExerciseFilter, ExerciseStore


logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def resolve_limit(raw: Any) -> Optional[int]:
    """Turn a raw ``limit`` into a cap; unreadable or non-positive means no cap.

    Caps beyond ``MAX_INTEGER`` are clamped to it.
    """
    limit = parse_leading_int(raw)
    if limit is None or limit <= 0:
        return None
    return min(limit, MAX_INTEGER)


class ExerciseService:
    """Record exercises and build filtered exercise logs."""

    @classmethod
    async def add_exercise(
        cls,
        store: ExerciseStore,
        user_id: str,
        description: Any,
        duration: Any,
        date: Any = None,
    ) -> ExerciseRead:
        """Record an exercise for ``user_id``.

        The user is looked up first, so an unknown user is reported as
        ``NotFound`` before any input validation.  ``duration`` is read
        with ``parse_leading_int``; input without a leading integer is
        rejected.
        """
        user = store.find_user_by_id(user_id)

        exercise_date = today() if _is_missing(date) else parse_calendar_date(date)

        if not isinstance(description, str) or not description.strip():
            raise ValidationError("description is required")
        minutes = parse_leading_int(duration)
        if minutes is None or abs(minutes) > MAX_INTEGER:
            raise ValidationError("Invalid duration")

        exercise = store.create_exercise(
            user_id=user.id,
            description=description.strip(),
            duration=minutes,
            date=exercise_date,
        )
        logger.info("User %s logged exercise %s on %s", user.id, exercise.id, exercise.date)
        return ExerciseRead(
            id=str(user.id),
            username=user.username,
            date=format_calendar_date(exercise.date),
            duration=exercise.duration,
            description=exercise.description,
        )

    @classmethod
    async def get_log(
        cls,
        store: ExerciseStore,
        user_id: str,
        date_from: Any = None,
        date_to: Any = None,
        limit: Any = None,
    ) -> ExerciseLog:
        """Return the user's exercises, optionally bounded by date and count."""
        user = store.find_user_by_id(user_id)
        criteria = ExerciseFilter(
            user_id=user.id,
            date_from=None if _is_missing(date_from) else parse_calendar_date(date_from),
            date_to=None if _is_missing(date_to) else parse_calendar_date(date_to),
        )
        exercises = store.find_exercises(criteria, limit=resolve_limit(limit))
        log = [
            LogEntry(
                description=exercise.description,
                duration=exercise.duration,
                date=format_calendar_date(exercise.date),
            )
            for exercise in exercises
        ]
        return ExerciseLog(id=str(user.id), username=user.username, count=len(log), log=log)
