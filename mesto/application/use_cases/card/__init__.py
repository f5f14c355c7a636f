from .list_cards import ListCardsUseCase
from .create_card import CreateCardUseCase
from .delete_card import DeleteCardUseCase
from .like_card import LikeCardUseCase, DislikeCardUseCase

__all__ = [
    "ListCardsUseCase",
    "CreateCardUseCase",
    "DeleteCardUseCase",
    "LikeCardUseCase",
    "DislikeCardUseCase",
]
