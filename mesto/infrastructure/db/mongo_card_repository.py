# Standard library imports
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.card_repository import CardRepository
from ...domain.models.card import Card
from ...domain.constants import CardFields
from .mongo_connection import get_card_collection, to_object_id


class MongoCardRepository(CardRepository):
    """
    Cards stored in the ``cards`` collection.

    ``owner`` and every entry of ``likes`` are stored as ObjectIds and
    handed out as 24-hex strings. Like changes use ``$addToSet`` and
    ``$pull`` so repeated calls leave the set unchanged.
    """

    def __init__(self, card_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.card_collection = card_collection if card_collection is not None else get_card_collection()

    async def find_all(self) -> List[Card]:
        try:
            documents = await self.card_collection.find({}).to_list(length=None)
        except PyMongoError as e:
            raise RuntimeError(f"Error listing cards: {e}") from e
        return [self._to_card(document) for document in documents]

    async def find_by_id(self, card_id: str) -> Optional[Card]:
        query = {CardFields.MONGO_ID: to_object_id(card_id)}
        try:
            document = await self.card_collection.find_one(query)
        except PyMongoError as e:
            raise RuntimeError(f"Error reading card {card_id}: {e}") from e
        return None if document is None else self._to_card(document)

    async def create(self, card: Card) -> Card:
        if card.id:
            raise ValueError(f"Card {card.id} is already stored")

        document = self._to_document(card)
        document[CardFields.CREATED_AT] = card.created_at or datetime.now(timezone.utc)

        try:
            result = await self.card_collection.insert_one(document)
        except PyMongoError as e:
            raise RuntimeError(f"Error inserting card: {e}") from e

        stored = await self.find_by_id(str(result.inserted_id))
        if stored is None:
            raise RuntimeError(f"Card {result.inserted_id} vanished right after insert")
        return stored

    async def delete_by_id(self, card_id: str, owner_id: str) -> bool:
        """
        Delete a card only if ``owner_id`` still owns it

        Returns:
            True if a document was removed
        """
        query = {
            CardFields.MONGO_ID: to_object_id(card_id),
            CardFields.OWNER: to_object_id(owner_id),
        }
        try:
            result = await self.card_collection.delete_one(query)
        except PyMongoError as e:
            raise RuntimeError(f"Error deleting card {card_id}: {e}") from e
        return result.deleted_count > 0

    async def add_like(self, card_id: str, user_id: str) -> Optional[Card]:
        return await self._update_likes(card_id, {"$addToSet": {CardFields.LIKES: to_object_id(user_id)}})

    async def remove_like(self, card_id: str, user_id: str) -> Optional[Card]:
        return await self._update_likes(card_id, {"$pull": {CardFields.LIKES: to_object_id(user_id)}})

    async def _update_likes(self, card_id: str, update: Dict[str, Any]) -> Optional[Card]:
        query = {CardFields.MONGO_ID: to_object_id(card_id)}
        try:
            document = await self.card_collection.find_one_and_update(
                query,
                update,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise RuntimeError(f"Error updating likes of card {card_id}: {e}") from e
        return None if document is None else self._to_card(document)

    @staticmethod
    def _to_card(document: dict) -> Card:
        if CardFields.MONGO_ID not in document:
            raise ValueError("Card document has no _id")

        return Card(
            id=str(document[CardFields.MONGO_ID]),
            name=document.get(CardFields.NAME, ""),
            link=document.get(CardFields.LINK, ""),
            owner_id=str(document.get(CardFields.OWNER, "")),
            likes=[str(user_id) for user_id in document.get(CardFields.LIKES, [])],
            created_at=document.get(CardFields.CREATED_AT),
        )

    @staticmethod
    def _to_document(card: Card) -> dict:
        """Stored shape of a card, without _id and createdAt"""
        # dict.fromkeys keeps first-seen order
        likes = list(dict.fromkeys(card.likes))
        return {
            CardFields.NAME: card.name,
            CardFields.LINK: card.link,
            CardFields.OWNER: to_object_id(card.owner_id),
            CardFields.LIKES: [to_object_id(user_id) for user_id in likes],
        }
