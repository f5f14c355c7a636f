from .user import User, validate_user_fields
from .card import Card, validate_card_fields

__all__ = ["User", "Card", "validate_user_fields", "validate_card_fields"]
