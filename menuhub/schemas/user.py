"""
User Pydantic schemas. Password material never appears in a response model.
"""
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from menuhub.models.user import UserRole
from menuhub.schemas.base import CamelModel, PartialUpdate, blank_to_none


class UserCreate(CamelModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=6)
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    role: UserRole = UserRole.RESTAURANT_ADMIN


class UserUpdate(PartialUpdate):
    """Role is deliberately absent: it is fixed when the user is created."""

    non_nullable = ("username", "name", "email")

    username: Optional[str] = Field(default=None, min_length=1, max_length=100)
    password: Optional[str] = Field(default=None, min_length=6)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None

    @field_validator("password", mode="before")
    @classmethod
    def empty_password_means_unchanged(cls, v):
        return blank_to_none(v)

    def changes(self):
        data = super().changes()
        if data.get("password") is None:
            data.pop("password", None)
        return data


class UserResponse(CamelModel):
    id: int
    username: str
    name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime
