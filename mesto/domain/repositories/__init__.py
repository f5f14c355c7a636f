from .user_repository import UserRepository
from .card_repository import CardRepository

__all__ = ["UserRepository", "CardRepository"]
