"""
Pydantic models for exercise payloads.

``ExerciseRead`` is the response of the add-exercise endpoint and
``ExerciseLog`` the response of the log endpoint.  In both, ``id`` is
the owning user's identifier and ``date`` is a calendar string such as
``Mon Jan 01 2024``.
"""

from typing import List

from pydantic import BaseModel, Field


class ExerciseRead(BaseModel):
    id: str = Field(..., description="Identifier of the user the exercise belongs to")
    username: str
    date: str = Field(..., examples=["Mon Jan 01 2024"])
    duration: int = Field(..., description="Duration in minutes")
    description: str


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class ExerciseLog(BaseModel):
    id: str
    username: str
    count: int = Field(..., ge=0)
    log: List[LogEntry]
