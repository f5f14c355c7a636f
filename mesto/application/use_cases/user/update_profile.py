# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.exceptions import ApiError, ErrorKind
from ...dto.user_dto import ProfileUpdateRequest, UserResponse

UPDATE_TARGET_NOT_FOUND_MESSAGE = "Пользователь с указанным _id не найден"


class UpdateProfileUseCase:
    """Use case for changing the caller's name and about text"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: ProfileUpdateRequest) -> UserResponse:
        """
        Update name and about of the caller's own record

        Raises:
            ApiError: NOT_FOUND if the caller's record does not exist
            DocumentValidationError: If storage rejects the values
        """
        updated_user = await self.user_repository.update_by_id(
            user_id,
            {UserFields.NAME: request.name, UserFields.ABOUT: request.about},
        )
        if updated_user is None:
            raise ApiError(ErrorKind.NOT_FOUND, UPDATE_TARGET_NOT_FOUND_MESSAGE)
        return UserResponse.from_user(updated_user)
