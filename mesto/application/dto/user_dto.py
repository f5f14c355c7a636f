# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Local application imports
from ...domain.models.user import User
from .field_checks import check_name, check_url


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    about: str
    avatar: str
    email: str
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            about=user.about,
            avatar=user.avatar,
            email=user.email,
            created_at=user.created_at,
        )


class SignInResponse(BaseModel):
    """DTO returned by a successful sign-in"""
    id: str
    email: str
    name: str


class ProfileUpdateRequest(BaseModel):
    """DTO for profile (name and about) update"""
    model_config = ConfigDict(extra="forbid")

    name: str
    about: str

    @field_validator("name", "about")
    @classmethod
    def validate_profile_text(cls, value: str) -> str:
        return check_name(value)


class AvatarUpdateRequest(BaseModel):
    """DTO for avatar update"""
    model_config = ConfigDict(extra="forbid")

    avatar: str

    @field_validator("avatar")
    @classmethod
    def validate_avatar(cls, value: str) -> str:
        return check_url(value)
