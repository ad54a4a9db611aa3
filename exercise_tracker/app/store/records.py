"""Record types stored by the persistence adapters."""

import re
import secrets
import time
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union


_ID_PATTERN = re.compile(r"^[0-9a-f]{24}$")


@dataclass(frozen=True)
class RecordId:
    """Opaque record identifier.

    Identifiers are 24 lowercase hex characters: a 4-byte creation
    timestamp followed by 8 random bytes.  Callers should only ever
    compare them or render them with ``str()``.
    """

    value: str

    @classmethod
    def generate(cls) -> "RecordId":
        return cls(f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}")

    @classmethod
    def parse(cls, text: Union["RecordId", str]) -> "RecordId":
        """Build an identifier from text, raising ``ValueError`` if malformed."""
        if isinstance(text, RecordId):
            return text
        if not isinstance(text, str) or not _ID_PATTERN.match(text.strip().lower()):
            raise ValueError(f"Malformed identifier: {text!r}")
        return cls(text.strip().lower())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class User:
    id: RecordId
    username: str


@dataclass(frozen=True)
class Exercise:
    id: RecordId
    user_id: RecordId
    description: str
    duration: int
    date: date


@dataclass(frozen=True)
class ExerciseFilter:
    """Constraints for ``find_exercises``; both date bounds are inclusive."""

    user_id: RecordId
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    def matches(self, exercise: Exercise) -> bool:
        if exercise.user_id != self.user_id:
            return False
        if self.date_from is not None and exercise.date < self.date_from:
            return False
        if self.date_to is not None and exercise.date > self.date_to:
            return False
        return True
