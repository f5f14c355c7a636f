from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_current_user import GetCurrentUserUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_profile import UpdateProfileUseCase
from ...application.use_cases.user.update_avatar import UpdateAvatarUseCase
from .use_case_binding import bind_use_cases

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """Profile read and update use cases"""

    USE_CASES = (
        ListUsersUseCase,
        GetCurrentUserUseCase,
        GetUserUseCase,
        UpdateProfileUseCase,
        UpdateAvatarUseCase,
    )

    @staticmethod
    def register(container: "BaseContainer") -> None:
        bind_use_cases(container, UserProvider.USE_CASES, UserRepository, "user_repository")
