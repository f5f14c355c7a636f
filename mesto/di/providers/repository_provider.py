from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.card_repository import CardRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_card_repository import MongoCardRepository
from .database_provider import CARD_COLLECTION_KEY, USER_COLLECTION_KEY

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Binds each repository interface to its Mongo implementation"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """Requires the collections registered by DatabaseProvider"""
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get(USER_COLLECTION_KEY)),
        )
        container.register_singleton(
            CardRepository,
            MongoCardRepository(card_collection=container.get(CARD_COLLECTION_KEY)),
        )
