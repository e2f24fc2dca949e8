"""Pydantic schemas for Group API."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from domain.entities.group import GroupStatus


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON while accepting field names too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _not_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


class GroupCreate(CamelModel):
    """Schema for creating a group."""

    parent_uuid: Optional[str] = Field(
        None,
        description="Reference to parent group UUID",
        examples=["123e4567-e89b-12d3-a456-426614174000"],
    )
    name: str = Field(..., min_length=1, max_length=255, examples=["Engineering Team"])
    display_name: Optional[str] = Field(
        None,
        max_length=255,
        description="Public display name (defaults to name)",
        examples=["Engineering Team - US"],
    )
    status: Optional[GroupStatus] = Field(None, description="Defaults to ACTIVE")
    space_id: Optional[str] = Field(None, examples=["space-123"])
    location: Optional[str] = Field(None, examples=["USA"])
    language: Optional[str] = Field(None, examples=["en-US"])
    segments: Optional[List[str]] = Field(None, examples=[["Corporate", "Education"]])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _not_blank(v)  # type: ignore[return-value]


class GroupUpdate(CamelModel):
    """Schema for updating a group. Omitted or null fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    display_name: Optional[str] = Field(None, max_length=255)
    status: Optional[GroupStatus] = None
    space_id: Optional[str] = None
    location: Optional[str] = None
    language: Optional[str] = None
    segments: Optional[List[str]] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        return _not_blank(v)


class GroupResponse(CamelModel):
    """Schema for Group response.

    On reads, inheritable fields left unset on the group carry the value of
    its nearest ancestor that sets them.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "uuid": "123e4567-e89b-12d3-a456-426614174000",
                "parentUuid": "parent-uuid-123",
                "name": "Engineering Team",
                "displayName": "Engineering Team - US",
                "status": "ACTIVE",
                "spaceId": "space-123",
                "location": "USA",
                "language": "en-US",
                "segments": ["Corporate", "Education"],
            }
        },
    )

    uuid: str
    parent_uuid: Optional[str] = None
    name: str
    display_name: Optional[str] = None
    status: GroupStatus
    space_id: Optional[str] = None
    location: Optional[str] = None
    language: Optional[str] = None
    segments: Optional[List[str]] = None


class AddUserRequest(CamelModel):
    """Schema for adding a user to a group."""

    user_id: str = Field(..., min_length=1, examples=["user-123"])

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        return _not_blank(v)  # type: ignore[return-value]


class MoveUserRequest(CamelModel):
    """Schema for moving a user to another group."""

    target_group_uuid: str = Field(..., min_length=1)

    @field_validator("target_group_uuid")
    @classmethod
    def validate_target(cls, v: str) -> str:
        return _not_blank(v)  # type: ignore[return-value]
