# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.card_dto import CardCreateRequest, CardResponse, MessageResponse
from ...application.use_cases.card.list_cards import ListCardsUseCase
from ...application.use_cases.card.create_card import CreateCardUseCase
from ...application.use_cases.card.delete_card import DeleteCardUseCase
from ...application.use_cases.card.like_card import LikeCardUseCase, DislikeCardUseCase
from ...di.container import get_container
from .dependencies import Identity, get_current_identity
from .fallback import add_authenticated_fallback
from .path_params import card_id_path


router = APIRouter(tags=["cards"])


@router.get("", response_model=List[CardResponse])
async def list_cards(
    identity: Identity = Depends(get_current_identity),
) -> List[CardResponse]:
    """List every card"""
    container = get_container()
    list_cards_use_case = container.get(ListCardsUseCase)
    return await list_cards_use_case.execute()


@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
async def create_card(
    request: CardCreateRequest,
    identity: Identity = Depends(get_current_identity),
) -> CardResponse:
    """
    Create a new card owned by the caller

    Args:
        request: Card creation request
        identity: Current authenticated caller (from dependency)

    Returns:
        CardResponse with created card information
    """
    container = get_container()
    create_card_use_case = container.get(CreateCardUseCase)
    return await create_card_use_case.execute(request=request, owner_user_id=identity.user_id)


@router.delete("/{card_id}", response_model=MessageResponse)
async def delete_card(
    identity: Identity = Depends(get_current_identity),
    card_id: str = Depends(card_id_path),
) -> MessageResponse:
    """
    Delete a card; only its owner may do so

    Args:
        identity: Current authenticated caller (from dependency)
        card_id: 24-hex ID of the card

    Returns:
        MessageResponse confirming the deletion
    """
    container = get_container()
    delete_card_use_case = container.get(DeleteCardUseCase)
    return await delete_card_use_case.execute(card_id=card_id, user_id=identity.user_id)


@router.put("/{card_id}/likes", response_model=CardResponse)
async def like_card(
    identity: Identity = Depends(get_current_identity),
    card_id: str = Depends(card_id_path),
) -> CardResponse:
    """Put the caller's like on a card"""
    container = get_container()
    like_card_use_case = container.get(LikeCardUseCase)
    return await like_card_use_case.execute(card_id=card_id, user_id=identity.user_id)


@router.delete("/{card_id}/likes", response_model=CardResponse)
async def dislike_card(
    identity: Identity = Depends(get_current_identity),
    card_id: str = Depends(card_id_path),
) -> CardResponse:
    """Take the caller's like off a card"""
    container = get_container()
    dislike_card_use_case = container.get(DislikeCardUseCase)
    return await dislike_card_use_case.execute(card_id=card_id, user_id=identity.user_id)


add_authenticated_fallback(router)
