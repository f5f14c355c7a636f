from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
)
from .user import (
    ListUsersUseCase,
    GetCurrentUserUseCase,
    GetUserUseCase,
    UpdateProfileUseCase,
    UpdateAvatarUseCase,
)
from .card import (
    ListCardsUseCase,
    CreateCardUseCase,
    DeleteCardUseCase,
    LikeCardUseCase,
    DislikeCardUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "ListUsersUseCase",
    "GetCurrentUserUseCase",
    "GetUserUseCase",
    "UpdateProfileUseCase",
    "UpdateAvatarUseCase",
    "ListCardsUseCase",
    "CreateCardUseCase",
    "DeleteCardUseCase",
    "LikeCardUseCase",
    "DislikeCardUseCase",
]
