"""Pydantic models for user payloads."""

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """A user as returned by the API."""

    username: str = Field(..., examples=["fcc_test"])
    id: str = Field(..., examples=["65a1b2c3d4e5f60718293a4b"])
