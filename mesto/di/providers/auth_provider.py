from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from .use_case_binding import bind_use_cases

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Sign-up and sign-in use cases, both backed by the user repository"""

    USE_CASES = (RegisterUserUseCase, LoginUserUseCase)

    @staticmethod
    def register(container: "BaseContainer") -> None:
        bind_use_cases(container, AuthProvider.USE_CASES, UserRepository, "user_repository")
