"""
Pydantic models for user data.

Defines the stored ``User`` record together with the request bodies
for creating and updating users.  Field names are snake_case in Python
and camelCase on the wire (``phoneNumber``, ``createdAt``,
``updatedAt``).  Request bodies accept only the camelCase names.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    # Name and email are declared optional so that a missing field is
    # reported by the service as "Name and Email are required" rather
    # than as a schema error.
    name: Optional[str] = Field(None, examples=["John Doe"], description="User's full name")
    email: Optional[str] = Field(None, examples=["john@example.com"], description="User's email address")
    phone_number: Optional[str] = Field(
        None,
        alias="phoneNumber",
        examples=["555-1234"],
        description="User's phone number (optional)",
    )


class UserCreate(UserBase):
    """Schema for creating a user.

    ``name`` and ``email`` must be present and non-blank; ``email`` must
    not belong to any existing user.
    """


class UserUpdate(UserBase):
    """Schema for updating a user.

    All fields are optional.  A blank or missing ``name``/``email``
    leaves the stored value unchanged.  ``phoneNumber`` is applied
    whenever it is not null, so an empty string clears the number
    while omitting the field keeps it.
    """


class User(BaseModel):
    """A stored user as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Unique identifier for the user")
    name: str
    email: str
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    created_at: datetime = Field(..., alias="createdAt", description="Creation time (UTC)")
    updated_at: datetime = Field(..., alias="updatedAt", description="Last update time (UTC)")
