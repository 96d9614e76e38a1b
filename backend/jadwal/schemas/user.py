"""User Schemas — check-in request and user payload."""

from pydantic import BaseModel, ConfigDict


class CheckinRequest(BaseModel):
    email: str | None = None


class UserResponse(BaseModel):
    """Public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
