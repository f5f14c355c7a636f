# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..constants import CardFields
from ..exceptions import DocumentValidationError
from ..rules import name_error, url_error

_FIELD_RULES = {
    CardFields.NAME: name_error,
    CardFields.LINK: url_error,
}


def validate_card_fields(fields: Dict[str, Any]) -> None:
    """Check card fields against the storage rules (partial dicts allowed)"""
    errors = {}
    for name, value in fields.items():
        rule = _FIELD_RULES.get(name)
        if rule is None:
            continue
        message = rule(value)
        if message:
            errors[name] = message
    if errors:
        raise DocumentValidationError(errors)


@dataclass
class Card:
    """
    Pure domain model for Card entity - no external dependencies.

    ``likes`` behaves as a set of user ids: the storage layer only ever adds
    to it with set semantics, so an id appears at most once.
    """
    id: Optional[str]
    name: str
    link: str
    owner_id: str
    likes: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        validate_card_fields({
            CardFields.NAME: self.name,
            CardFields.LINK: self.link,
        })
        if not self.owner_id:
            raise DocumentValidationError({CardFields.OWNER: "Владелец карточки обязателен"})

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id
