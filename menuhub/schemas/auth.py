"""
Auth-related Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel, Field

from menuhub.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Schema for login request."""
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    """Schema for login response (without password)."""
    user: UserResponse
