# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.exceptions import ApiError, ErrorKind
from ...dto.user_dto import AvatarUpdateRequest, UserResponse
from .update_profile import UPDATE_TARGET_NOT_FOUND_MESSAGE


class UpdateAvatarUseCase:
    """Use case for changing the caller's avatar"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: AvatarUpdateRequest) -> UserResponse:
        updated_user = await self.user_repository.update_by_id(
            user_id,
            {UserFields.AVATAR: request.avatar},
        )
        if updated_user is None:
            raise ApiError(ErrorKind.NOT_FOUND, UPDATE_TARGET_NOT_FOUND_MESSAGE)
        return UserResponse.from_user(updated_user)
