"""
Restaurant and provisioning Pydantic schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator, model_validator

from menuhub.models.restaurant import (
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    RestaurantStatus,
)
from menuhub.schemas.base import CamelModel, PartialUpdate, blank_to_none, id_field
from menuhub.schemas.user import UserResponse

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"
OPTIONAL_TEXT_FIELDS = ("description", "logo", "phone", "email", "address")


class RestaurantAttributes(CamelModel):
    """Everything a restaurant carries except its owner."""
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    logo: Optional[str] = Field(default=None, max_length=1024)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(default=None, max_length=512)
    status: RestaurantStatus = RestaurantStatus.SETUP
    primary_color: str = Field(default=DEFAULT_PRIMARY_COLOR, pattern=HEX_COLOR)
    secondary_color: str = Field(default=DEFAULT_SECONDARY_COLOR, pattern=HEX_COLOR)
    rtl: bool = True

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def blank_is_missing(cls, v):
        return blank_to_none(v)


class RestaurantCreate(RestaurantAttributes):
    # Required for super admins; replaced by the caller's id for everyone else
    admin_id: Optional[int] = id_field(default=None)


class RestaurantUpdate(PartialUpdate):
    non_nullable = ("name", "status", "primary_color", "secondary_color", "rtl")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    logo: Optional[str] = Field(default=None, max_length=1024)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(default=None, max_length=512)
    status: Optional[RestaurantStatus] = None
    primary_color: Optional[str] = Field(default=None, pattern=HEX_COLOR)
    secondary_color: Optional[str] = Field(default=None, pattern=HEX_COLOR)
    rtl: Optional[bool] = None
    admin_id: Optional[int] = id_field(default=None)

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def blank_is_missing(cls, v):
        return blank_to_none(v)


class RestaurantResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    logo: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    admin_id: int
    status: RestaurantStatus
    primary_color: str
    secondary_color: str
    rtl: bool
    created_at: datetime
    updated_at: datetime


class ProvisionAdmin(CamelModel):
    """Credentials for the restaurant admin created alongside the restaurant."""
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=6)
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr


class ProvisionRequest(CamelModel):
    restaurant: RestaurantAttributes
    admin: Optional[ProvisionAdmin] = None
    admin_id: Optional[int] = id_field(default=None)

    @model_validator(mode="after")
    def exactly_one_admin_source(self):
        if (self.admin is None) == (self.admin_id is None):
            raise ValueError("Provide either admin credentials or an existing adminId, not both")
        return self


class ProvisionResponse(CamelModel):
    restaurant: RestaurantResponse
    admin: UserResponse
