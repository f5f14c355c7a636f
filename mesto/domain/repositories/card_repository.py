from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.card import Card


class CardRepository(ABC):
    """Storage contract for cards and their likes"""

    @abstractmethod
    async def find_all(self) -> List[Card]:
        """List every card"""
        pass

    @abstractmethod
    async def find_by_id(self, card_id: str) -> Optional[Card]:
        """Find card by ID; raises InvalidIdError for a malformed ID"""
        pass

    @abstractmethod
    async def create(self, card: Card) -> Card:
        """Insert a new card"""
        pass

    @abstractmethod
    async def delete_by_id(self, card_id: str, owner_id: str) -> bool:
        """Delete the card if it still belongs to owner_id; True if removed"""
        pass

    @abstractmethod
    async def add_like(self, card_id: str, user_id: str) -> Optional[Card]:
        """Add user_id to the likes set; None if the card does not exist"""
        pass

    @abstractmethod
    async def remove_like(self, card_id: str, user_id: str) -> Optional[Card]:
        """Remove user_id from the likes set; None if the card does not exist"""
        pass
