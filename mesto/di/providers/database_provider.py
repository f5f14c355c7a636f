from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    CARDS_COLLECTION,
    USERS_COLLECTION,
    get_database,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer

USER_COLLECTION_KEY = f"{USERS_COLLECTION}_collection"
CARD_COLLECTION_KEY = f"{CARDS_COLLECTION}_collection"


class DatabaseProvider:
    """Registers the collections the repositories read"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        database = get_database()
        for key, collection_name in (
            (USER_COLLECTION_KEY, USERS_COLLECTION),
            (CARD_COLLECTION_KEY, CARDS_COLLECTION),
        ):
            container.register_singleton(key, database[collection_name])
