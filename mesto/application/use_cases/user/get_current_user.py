# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import ApiError, ErrorKind
from ...dto.user_dto import UserResponse

CURRENT_USER_NOT_FOUND_MESSAGE = "Пользователь не найден"


class GetCurrentUserUseCase:
    """Use case for reading the authenticated user's own record"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get the caller's user record

        Args:
            user_id: Identity resolved from the session token

        Returns:
            UserResponse with user information

        Raises:
            ApiError: NOT_FOUND if the record no longer exists
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ApiError(ErrorKind.NOT_FOUND, CURRENT_USER_NOT_FOUND_MESSAGE)
        return UserResponse.from_user(user)
