"""Auth schemas."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from innflow.models.enums import UserRole
from innflow.schemas.base import BaseSchema, IDMixin


class LoginRequest(BaseSchema):
    """Sign in by choosing a role. Name and email default from the role."""

    role: UserRole
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)


class UserResponse(BaseSchema, IDMixin):
    property_id: Optional[UUID] = None
    email: str
    name: str
    role: UserRole


class LoginResponse(BaseSchema):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
