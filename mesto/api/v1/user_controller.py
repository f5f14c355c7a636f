# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.user_dto import UserResponse, ProfileUpdateRequest, AvatarUpdateRequest
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_current_user import GetCurrentUserUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_profile import UpdateProfileUseCase
from ...application.use_cases.user.update_avatar import UpdateAvatarUseCase
from ...di.container import get_container
from .dependencies import Identity, get_current_identity
from .fallback import add_authenticated_fallback
from .path_params import user_id_path


router = APIRouter(tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users(
    identity: Identity = Depends(get_current_identity),
) -> List[UserResponse]:
    """List every user; any authenticated caller may do so"""
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute()


@router.get("/me", response_model=UserResponse)
async def get_me(
    identity: Identity = Depends(get_current_identity),
) -> UserResponse:
    """
    Get current authenticated user information

    Args:
        identity: Current authenticated caller (from dependency)

    Returns:
        UserResponse with user information
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(identity.user_id)


@router.patch("/me", response_model=UserResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    identity: Identity = Depends(get_current_identity),
) -> UserResponse:
    """
    Update name and about of the current user

    Args:
        request: New name and about
        identity: Current authenticated caller (from dependency)

    Returns:
        UserResponse with the updated record
    """
    container = get_container()
    update_profile_use_case = container.get(UpdateProfileUseCase)
    return await update_profile_use_case.execute(identity.user_id, request)


@router.patch("/me/avatar", response_model=UserResponse)
async def update_avatar(
    request: AvatarUpdateRequest,
    identity: Identity = Depends(get_current_identity),
) -> UserResponse:
    """Update the avatar of the current user"""
    container = get_container()
    update_avatar_use_case = container.get(UpdateAvatarUseCase)
    return await update_avatar_use_case.execute(identity.user_id, request)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    identity: Identity = Depends(get_current_identity),
    user_id: str = Depends(user_id_path),
) -> UserResponse:
    """
    Get a user by ID

    Args:
        identity: Current authenticated caller (from dependency)
        user_id: 24-hex ID of the user

    Returns:
        UserResponse with user information
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    return await get_user_use_case.execute(user_id)


add_authenticated_fallback(router)
