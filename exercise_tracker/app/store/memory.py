"""In-memory store implementation."""

from datetime import date
from typing import Dict, List, Optional, Union

from ..core.errors import NotFound
from .base import ExerciseStore, coerce_user_id, require_username
from .records import Exercise, ExerciseFilter, RecordId, User


class MemoryStore(ExerciseStore):
    """
    Store keeping users and exercises in process.

    Dicts preserve insertion order, which gives the same natural
    ordering as the SQLite store.  Nothing survives a restart.
    """

    def __init__(self) -> None:
        self._users: Dict[RecordId, User] = {}
        self._exercises: Dict[RecordId, Exercise] = {}

    def create_user(self, username: str) -> User:
        user = User(id=RecordId.generate(), username=require_username(username))
        self._users[user.id] = user
        return user

    def list_users(self) -> List[User]:
        return list(self._users.values())

    def find_user_by_id(self, user_id: Union[RecordId, str]) -> User:
        user = self._users.get(coerce_user_id(user_id))
        if user is None:
            raise NotFound("User not found")
        return user

    def create_exercise(
        self,
        user_id: RecordId,
        description: str,
        duration: int,
        date: date,
    ) -> Exercise:
        exercise = Exercise(
            id=RecordId.generate(),
            user_id=user_id,
            description=description,
            duration=duration,
            date=date,
        )
        self._exercises[exercise.id] = exercise
        return exercise

    def find_exercises(self, filter: ExerciseFilter, limit: Optional[int] = None) -> List[Exercise]:
        found: List[Exercise] = []
        for exercise in self._exercises.values():
            if limit is not None and len(found) >= limit:
                break
            if filter.matches(exercise):
                found.append(exercise)
        return found
