"""Shared response schemas."""

from pydantic import BaseModel, Field


class ErrorMessage(BaseModel):
    """Body returned for every handled error."""

    message: str = Field(..., examples=["User with ID 1 not found"])
