"""Base store interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Union

from ..core.errors import NotFound, ValidationError
from .records import Exercise, ExerciseFilter, RecordId, User


class ExerciseStore(ABC):
    """
    Storage for users and their exercises.

    Abstracts data access so the services can run against SQLite in
    production and an in-memory store in tests.  Records are append-only:
    there are no update or delete operations.  Implementations raise
    ``StoreError`` for failures of the underlying database.
    """

    def init(self) -> None:
        """Prepare the backing storage.  Called once at startup."""

    @abstractmethod
    def create_user(self, username: str) -> User:
        """Insert a user.  Raises ``ValidationError`` for blank names."""

    @abstractmethod
    def list_users(self) -> List[User]:
        """Return all users in insertion order."""

    @abstractmethod
    def find_user_by_id(self, user_id: Union[RecordId, str]) -> User:
        """Return the user, or raise ``NotFound`` if absent or malformed."""

    @abstractmethod
    def create_exercise(
        self,
        user_id: RecordId,
        description: str,
        duration: int,
        date: date,
    ) -> Exercise:
        """Insert an exercise for an already verified user."""

    @abstractmethod
    def find_exercises(self, filter: ExerciseFilter, limit: Optional[int] = None) -> List[Exercise]:
        """Return matching exercises in insertion order, capped at ``limit``."""


def require_username(username: str) -> str:
    if not isinstance(username, str) or not username.strip():
        raise ValidationError("username is required")
    return username


def coerce_user_id(user_id: Union[RecordId, str]) -> RecordId:
    """Parse ``user_id``; malformed identifiers are reported as missing users."""
    try:
        return RecordId.parse(user_id)
    except ValueError:
        raise NotFound("User not found") from None
