"""Constants for domain model field names"""

from .user_fields import UserFields
from .card_fields import CardFields
from .profile_defaults import DEFAULT_NAME, DEFAULT_ABOUT, DEFAULT_AVATAR

__all__ = [
    "UserFields",
    "CardFields",
    "DEFAULT_NAME",
    "DEFAULT_ABOUT",
    "DEFAULT_AVATAR",
]
