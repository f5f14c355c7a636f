# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import ApiError, ErrorKind
from ...dto.user_dto import UserResponse

USER_NOT_FOUND_MESSAGE = "Пользователь по указанному _id не найден."


class GetUserUseCase:
    """Use case for getting any user by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID

        Raises:
            ApiError: NOT_FOUND if no user has this ID
            InvalidIdError: If the ID cannot be cast (translated upstream)
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ApiError(ErrorKind.NOT_FOUND, USER_NOT_FOUND_MESSAGE)
        return UserResponse.from_user(user)
