# Standard library imports
from typing import Optional

# External package imports
from pydantic import BaseModel, ConfigDict, field_validator

# Local application imports
from .field_checks import check_email, check_name, check_password, check_url
from .user_dto import SignInResponse, UserResponse


class SignUpRequest(BaseModel):
    """DTO for user registration request"""
    model_config = ConfigDict(extra="forbid")

    email: str
    password: str
    name: Optional[str] = None
    about: Optional[str] = None
    avatar: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password(value)

    @field_validator("name", "about")
    @classmethod
    def validate_profile_text(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else check_name(value)

    @field_validator("avatar")
    @classmethod
    def validate_avatar(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else check_url(value)


class SignInRequest(BaseModel):
    """
    DTO for user login request

    Presence of both fields is checked by the login use case so a missing
    field gets its dedicated message. The password is not held to the
    registration policy here: any mismatch is a 401, never a 400.
    """
    model_config = ConfigDict(extra="forbid")

    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: Optional[str]) -> Optional[str]:
        return value if not value else check_email(value)


class SignUpResult(BaseModel):
    """Registered user plus the session token issued for them"""
    token: str
    user: UserResponse


class SignInResult(BaseModel):
    """Authenticated user summary plus the session token"""
    token: str
    user: SignInResponse
