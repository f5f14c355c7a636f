# Local application imports
from ....domain.repositories.card_repository import CardRepository
from ....core.exceptions import ApiError, ErrorKind
from ...dto.card_dto import CardResponse
from .delete_card import CARD_NOT_FOUND_MESSAGE


class LikeCardUseCase:
    """Use case for putting the caller's like on a card (idempotent)"""

    def __init__(self, card_repository: CardRepository) -> None:
        self.card_repository = card_repository

    async def execute(self, card_id: str, user_id: str) -> CardResponse:
        card = await self.card_repository.add_like(card_id, user_id)
        if card is None:
            raise ApiError(ErrorKind.NOT_FOUND, CARD_NOT_FOUND_MESSAGE)
        return CardResponse.from_card(card)


class DislikeCardUseCase:
    """Use case for taking the caller's like off a card; no-op if absent"""

    def __init__(self, card_repository: CardRepository) -> None:
        self.card_repository = card_repository

    async def execute(self, card_id: str, user_id: str) -> CardResponse:
        card = await self.card_repository.remove_like(card_id, user_id)
        if card is None:
            raise ApiError(ErrorKind.NOT_FOUND, CARD_NOT_FOUND_MESSAGE)
        return CardResponse.from_card(card)
