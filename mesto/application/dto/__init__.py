from .auth_dto import SignUpRequest, SignInRequest, SignUpResult, SignInResult
from .user_dto import UserResponse, SignInResponse, ProfileUpdateRequest, AvatarUpdateRequest
from .card_dto import CardCreateRequest, CardResponse, MessageResponse

__all__ = [
    "SignUpRequest",
    "SignInRequest",
    "SignUpResult",
    "SignInResult",
    "UserResponse",
    "SignInResponse",
    "ProfileUpdateRequest",
    "AvatarUpdateRequest",
    "CardCreateRequest",
    "CardResponse",
    "MessageResponse",
]
