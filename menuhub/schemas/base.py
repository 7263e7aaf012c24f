"""
Shared Pydantic building blocks.

The JSON API speaks camelCase (``adminId``, ``displayOrder``) while the
Python side stays snake_case; request bodies accept either spelling.
"""
from typing import Annotated, Any, ClassVar

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

# Integer primary keys are 32-bit on every supported database
MAX_ID = 2**31 - 1

# Path parameter naming a stored row
EntityId = Annotated[int, Path(ge=1, le=MAX_ID)]


def id_field(**kwargs) -> Any:
    """Body field referencing another row by id."""
    return Field(ge=1, le=MAX_ID, **kwargs)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """Base for PUT payloads: every field optional, but required columns may not be nulled."""

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @field_validator("*")
    @classmethod
    def reject_nulls(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None and info.field_name in cls.non_nullable:
            raise ValueError(f"{to_camel(info.field_name)} cannot be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent."""
        return self.model_dump(exclude_unset=True, mode="json")


class MessageResponse(BaseModel):
    message: str


def blank_to_none(value: Any) -> Any:
    """Treat empty form strings as missing optional values."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
