"""
Business logic for users.

Users only carry a username; names are trimmed but not required to be
unique, so creating the same name twice yields two distinct users.
"""

import logging
from typing import Any, List

from ..core.errors import ValidationError
from ..schemas.user import UserRead
from ..store import ExerciseStore, User


logger = logging.getLogger(__name__)


def to_user_read(user: User) -> UserRead:
    return UserRead(username=user.username, id=str(user.id))


class UserService:
    """Create and list users."""

    @classmethod
    async def create_user(cls, store: ExerciseStore, username: Any) -> UserRead:
        """Create a user from a raw ``username`` value.

        Raises ``ValidationError`` when the value is missing, not text,
        or blank after trimming whitespace.
        """
        if not isinstance(username, str) or not username.strip():
            raise ValidationError("username is required")
        user = store.create_user(username.strip())
        logger.info("Created user %s (%s)", user.id, user.username)
        return to_user_read(user)

    @classmethod
    async def list_users(cls, store: ExerciseStore) -> List[UserRead]:
        """Return all users in store order."""
        return [to_user_read(user) for user in store.list_users()]
