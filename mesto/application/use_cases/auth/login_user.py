# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import ApiError, ErrorKind
from ....core.security import verify_password, issue_token
from ...dto.auth_dto import SignInRequest, SignInResult
from ...dto.user_dto import SignInResponse

CREDENTIALS_REQUIRED_MESSAGE = "Email и пароль обязательны для заполнения"
# Shared by "no such user" and "wrong password" so the two are indistinguishable
WRONG_CREDENTIALS_MESSAGE = "Неправильные почта или пароль"


class LoginUserUseCase:
    """Use case for authenticating a user and issuing a session token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: SignInRequest) -> SignInResult:
        """
        Authenticate user and generate session token

        Args:
            request: Login request with email and password

        Returns:
            SignInResult with id/email/name and the token

        Raises:
            ApiError: BAD_REQUEST if a credential is missing,
                UNAUTHORIZED if the email or password is wrong
        """
        if not request.email or not request.password:
            raise ApiError(ErrorKind.BAD_REQUEST, CREDENTIALS_REQUIRED_MESSAGE)

        # Find user by email
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            raise ApiError(ErrorKind.UNAUTHORIZED, WRONG_CREDENTIALS_MESSAGE)

        # Verify password
        if not verify_password(request.password, user.hashed_password):
            raise ApiError(ErrorKind.UNAUTHORIZED, WRONG_CREDENTIALS_MESSAGE)

        return SignInResult(
            token=issue_token(user.id or ""),
            user=SignInResponse(id=user.id or "", email=user.email, name=user.name),
        )
