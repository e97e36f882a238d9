"""
Pydantic models for user data.

``User`` is both the stored record and the response body.  The
request schemas declare every field optional: presence and
"truthiness" of required fields is checked by ``UserService`` so that
a missing ``username`` yields the API's own error message instead of
a validation error.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

# Integers stay integers on the way back out; floats are accepted too.
# Booleans and numeric strings are rejected.
Age = Union[StrictInt, StrictFloat]


class User(BaseModel):
    """A user record as stored and returned by the API."""

    id: str = Field(..., examples=["0b6f1f3e-4f7c-4a52-9a8e-2f1c5e7d9b10"])
    username: str = Field(..., examples=["alice"])
    age: Age = Field(..., examples=[30])
    hobbies: List[str] = Field(default_factory=list, examples=[["chess"]])


class UserCreate(BaseModel):
    """Schema for creating a user.

    ``username`` and ``age`` are required by the service; ``hobbies``
    defaults to an empty list.
    """

    username: Optional[str] = Field(None, examples=["alice"])
    age: Optional[Age] = Field(None, examples=[30])
    hobbies: Optional[List[str]] = Field(None, examples=[["chess"]])


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional; only truthy values overwrite the stored
    record.
    """

    username: Optional[str] = None
    age: Optional[Age] = None
    hobbies: Optional[List[str]] = None
