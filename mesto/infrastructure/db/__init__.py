from .mongo_connection import (
    get_database,
    close_database,
    ensure_indexes,
    get_user_collection,
    get_card_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_card_repository import MongoCardRepository

__all__ = [
    "get_database",
    "close_database",
    "ensure_indexes",
    "get_user_collection",
    "get_card_collection",
    "MongoUserRepository",
    "MongoCardRepository",
]
