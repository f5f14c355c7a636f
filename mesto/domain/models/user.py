from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..constants import UserFields
from ..exceptions import DocumentValidationError
from ..rules import email_error, name_error, url_error

_FIELD_RULES = {
    UserFields.EMAIL: email_error,
    UserFields.NAME: name_error,
    UserFields.ABOUT: name_error,
    UserFields.AVATAR: url_error,
}


def validate_user_fields(fields: Dict[str, Any]) -> None:
    """
    Check the given user fields against the storage rules.

    Only the keys present in ``fields`` are checked, so partial updates
    can be validated the same way as whole documents.

    Raises:
        DocumentValidationError: With one message per invalid field
    """
    errors = {}
    for field, value in fields.items():
        rule = _FIELD_RULES.get(field)
        if rule is None:
            continue
        message = rule(value)
        if message:
            errors[field] = message
    if errors:
        raise DocumentValidationError(errors)


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    email: str
    hashed_password: str
    name: str
    about: str
    avatar: str
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        validate_user_fields({
            UserFields.EMAIL: self.email,
            UserFields.NAME: self.name,
            UserFields.ABOUT: self.about,
            UserFields.AVATAR: self.avatar,
        })
        if not self.hashed_password:
            raise DocumentValidationError({UserFields.PASSWORD: "Пароль обязателен"})
