"""Request models for the Users API."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from core.models.user import User


class UserRequest(BaseModel):
    """Body shared by create and update requests.

    Missing string fields default to empty so the service can report them
    with a single message.
    """

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field("", description="Display name")
    email: StrictStr = Field("", description="Contact email")
    age: StrictInt = Field(0, description="Age in years")

    def to_user(self) -> User:
        return User(name=self.name, email=self.email, age=self.age)


class CreateUserRequest(UserRequest):
    """Body of POST /users."""


class UpdateUserRequest(UserRequest):
    """Body of PUT /users/{user_id}; every field is overwritten."""
