# Standard library imports
import logging

# Local application imports
from ....domain.repositories.card_repository import CardRepository
from ....core.exceptions import ApiError, ErrorKind
from ...dto.card_dto import MessageResponse

logger = logging.getLogger(__name__)

CARD_NOT_FOUND_MESSAGE = "Карточка с указанным _id не найдена"
NOT_CARD_OWNER_MESSAGE = "Недостаточно прав для удаления карточки"
CARD_DELETED_MESSAGE = "Карточка удалена"


class DeleteCardUseCase:
    """Use case for deleting a card; only its owner may do so"""

    def __init__(self, card_repository: CardRepository) -> None:
        self.card_repository = card_repository

    async def execute(self, card_id: str, user_id: str) -> MessageResponse:
        """
        Delete a card owned by the caller

        Args:
            card_id: ID of the card
            user_id: Identity of the caller

        Returns:
            MessageResponse confirming the deletion

        Raises:
            ApiError: NOT_FOUND if the card does not exist,
                FORBIDDEN if the caller is not the owner
        """
        card = await self.card_repository.find_by_id(card_id)
        if card is None:
            raise ApiError(ErrorKind.NOT_FOUND, CARD_NOT_FOUND_MESSAGE)

        if not card.is_owned_by(user_id):
            raise ApiError(ErrorKind.FORBIDDEN, NOT_CARD_OWNER_MESSAGE)

        deleted = await self.card_repository.delete_by_id(card_id, owner_id=user_id)
        if not deleted:
            # Removed by a concurrent request after the lookup
            raise ApiError(ErrorKind.NOT_FOUND, CARD_NOT_FOUND_MESSAGE)

        logger.info(f"User {user_id} deleted card {card_id}")
        return MessageResponse(message=CARD_DELETED_MESSAGE)
