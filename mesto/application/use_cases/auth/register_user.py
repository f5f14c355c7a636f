# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import DEFAULT_NAME, DEFAULT_ABOUT, DEFAULT_AVATAR
from ....core.exceptions import ApiError, ErrorKind
from ....core.security import hash_password, issue_token
from ...dto.auth_dto import SignUpRequest, SignUpResult
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "Пользователь с таким email уже существует"


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: SignUpRequest) -> SignUpResult:
        """
        Register a new user and open a session for them

        Args:
            request: Registration request with user details

        Returns:
            SignUpResult with the created user (no password) and a session token

        Raises:
            ApiError: CONFLICT if a user with this email already exists
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ApiError(ErrorKind.CONFLICT, EMAIL_TAKEN_MESSAGE)

        # Create domain user entity, filling in the profile defaults
        new_user = User(
            id=None,  # Will be set by repository
            email=request.email,
            hashed_password=hash_password(request.password),
            name=request.name or DEFAULT_NAME,
            about=request.about or DEFAULT_ABOUT,
            avatar=request.avatar or DEFAULT_AVATAR,
        )

        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.id}")

        return SignUpResult(
            token=issue_token(saved_user.id or ""),
            user=UserResponse.from_user(saved_user),
        )
