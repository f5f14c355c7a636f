# Standard library imports
import logging

# Local application imports
from ....domain.repositories.card_repository import CardRepository
from ....domain.models.card import Card
from ...dto.card_dto import CardCreateRequest, CardResponse

logger = logging.getLogger(__name__)


class CreateCardUseCase:
    """Use case for creating a new card"""

    def __init__(self, card_repository: CardRepository) -> None:
        self.card_repository = card_repository

    async def execute(self, request: CardCreateRequest, owner_user_id: str) -> CardResponse:
        """
        Create a new card

        Args:
            request: Card creation request
            owner_user_id: ID of the user creating the card

        Returns:
            CardResponse with the created card

        Raises:
            DocumentValidationError: If storage rejects the card fields
        """
        new_card = Card(
            id=None,  # Will be set by repository
            name=request.name,
            link=request.link,
            owner_id=owner_user_id,
        )

        saved_card = await self.card_repository.create(new_card)
        logger.info(f"User {owner_user_id} created card {saved_card.id}")
        return CardResponse.from_card(saved_card)
