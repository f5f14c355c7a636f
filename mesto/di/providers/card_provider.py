from typing import TYPE_CHECKING
from ...domain.repositories.card_repository import CardRepository
from ...application.use_cases.card.list_cards import ListCardsUseCase
from ...application.use_cases.card.create_card import CreateCardUseCase
from ...application.use_cases.card.delete_card import DeleteCardUseCase
from ...application.use_cases.card.like_card import LikeCardUseCase, DislikeCardUseCase
from .use_case_binding import bind_use_cases

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CardProvider:
    """Card listing, creation, deletion and like use cases"""

    USE_CASES = (
        ListCardsUseCase,
        CreateCardUseCase,
        DeleteCardUseCase,
        LikeCardUseCase,
        DislikeCardUseCase,
    )

    @staticmethod
    def register(container: "BaseContainer") -> None:
        bind_use_cases(container, CardProvider.USE_CASES, CardRepository, "card_repository")
