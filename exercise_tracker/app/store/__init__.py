"""
Persistence adapters.

``ExerciseStore`` is the interface the services depend on.
``SQLiteStore`` backs the running service; ``MemoryStore`` keeps
records in process and is used by the tests.
"""

from .base import ExerciseStore
from .memory import MemoryStore
from .records import Exercise, ExerciseFilter, RecordId, User
from .sqlite import SQLiteStore

__all__ = [
    "Exercise",
    "ExerciseFilter",
    "ExerciseStore",
    "MemoryStore",
    "RecordId",
    "SQLiteStore",
    "User",
]
