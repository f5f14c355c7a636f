# External package imports
from fastapi import APIRouter, Response, status

# Local application imports
from ...application.dto.auth_dto import SignUpRequest, SignInRequest
from ...application.dto.user_dto import UserResponse, SignInResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import get_container
from .session import set_session_cookie


router = APIRouter(tags=["authentication"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(request: SignUpRequest, response: Response) -> UserResponse:
    """
    Register a new user and open a session

    Args:
        request: User registration request
        response: Outgoing response, receives the session cookie

    Returns:
        UserResponse with created user information (no password)
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    result = await register_use_case.execute(request)
    set_session_cookie(response, result.token)
    return result.user


@router.post("/signin", response_model=SignInResponse)
async def sign_in(request: SignInRequest, response: Response) -> SignInResponse:
    """
    Authenticate user and open a session

    Args:
        request: User login request
        response: Outgoing response, receives the session cookie

    Returns:
        SignInResponse with id, email and name
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    result = await login_use_case.execute(request)
    set_session_cookie(response, result.token)
    return result.user
