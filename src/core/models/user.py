"""Shared user model."""

from pydantic import BaseModel, Field, StrictInt, StrictStr


class User(BaseModel):
    """User resource returned by the Users API."""

    id: StrictInt = Field(0, description="Store-assigned identifier (0 until created)")
    name: StrictStr = Field(..., description="Display name")
    email: StrictStr = Field(..., description="Contact email")
    age: StrictInt = Field(..., description="Age in years")
