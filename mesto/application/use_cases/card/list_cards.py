# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.card_repository import CardRepository
from ...dto.card_dto import CardResponse


class ListCardsUseCase:
    """Use case for listing every card"""

    def __init__(self, card_repository: CardRepository) -> None:
        self.card_repository = card_repository

    async def execute(self) -> List[CardResponse]:
        cards = await self.card_repository.find_all()
        return [CardResponse.from_card(card) for card in cards]
