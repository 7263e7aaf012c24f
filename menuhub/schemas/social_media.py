from datetime import datetime
from typing import Optional

from pydantic import Field

from menuhub.schemas.base import CamelModel, PartialUpdate


class SocialMediaLinkCreate(CamelModel):
    platform: str = Field(min_length=1, max_length=50)
    url: str = Field(min_length=1, max_length=1024)


class SocialMediaLinkUpdate(PartialUpdate):
    non_nullable = ("platform", "url")

    platform: Optional[str] = Field(default=None, min_length=1, max_length=50)
    url: Optional[str] = Field(default=None, min_length=1, max_length=1024)


class SocialMediaLinkResponse(CamelModel):
    id: int
    platform: str
    url: str
    restaurant_id: int
    created_at: datetime
    updated_at: datetime
