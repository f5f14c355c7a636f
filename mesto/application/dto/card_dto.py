# Standard library imports
from datetime import datetime
from typing import List, Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Local application imports
from ...domain.models.card import Card
from .field_checks import check_name, check_url


class CardCreateRequest(BaseModel):
    """DTO for card creation request"""
    model_config = ConfigDict(extra="forbid")

    name: str
    link: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return check_name(value)

    @field_validator("link")
    @classmethod
    def validate_link(cls, value: str) -> str:
        return check_url(value)


class CardResponse(BaseModel):
    """DTO for card response"""
    id: str
    name: str
    link: str
    owner: str
    likes: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.id or "",
            name=card.name,
            link=card.link,
            owner=card.owner_id,
            likes=list(card.likes),
            created_at=card.created_at,
        )


class MessageResponse(BaseModel):
    """DTO for plain confirmation messages"""
    message: str
