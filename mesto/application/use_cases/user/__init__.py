from .list_users import ListUsersUseCase
from .get_current_user import GetCurrentUserUseCase
from .get_user import GetUserUseCase
from .update_profile import UpdateProfileUseCase
from .update_avatar import UpdateAvatarUseCase

__all__ = [
    "ListUsersUseCase",
    "GetCurrentUserUseCase",
    "GetUserUseCase",
    "UpdateProfileUseCase",
    "UpdateAvatarUseCase",
]
