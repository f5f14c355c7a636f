"""
Unit tests for card use cases, run against the in-memory repository.
"""
from unittest.mock import AsyncMock

import pytest
from mesto.core.exceptions import ApiError, ErrorKind
from mesto.application.dto.card_dto import CardCreateRequest
from mesto.application.use_cases.card.list_cards import ListCardsUseCase
from mesto.application.use_cases.card.create_card import CreateCardUseCase
from mesto.application.use_cases.card.delete_card import DeleteCardUseCase
from mesto.application.use_cases.card.like_card import LikeCardUseCase, DislikeCardUseCase
from mesto.domain.models.card import Card

OWNER = "64b7f0c2a1b2c3d4e5f60718"
OTHER = "64b7f0c2a1b2c3d4e5f60719"
MISSING_CARD = "0123456789abcdef01234567"


async def _create(repo, owner=OWNER, name="Ridge"):
    return await CreateCardUseCase(repo).execute(
        CardCreateRequest(name=name, link="https://example.com/a.jpg"),
        owner_user_id=owner,
    )


class TestCreateAndListCards:
    @pytest.mark.asyncio
    async def test_created_card_is_listed(self, card_repository):
        created = await _create(card_repository)
        assert created.owner == OWNER
        assert created.likes == []

        cards = await ListCardsUseCase(card_repository).execute()
        assert [card.id for card in cards] == [created.id]
        assert cards[0].name == "Ridge"
        assert cards[0].link == "https://example.com/a.jpg"


class TestDeleteCardUseCase:
    @pytest.mark.asyncio
    async def test_owner_deletes(self, card_repository):
        card = await _create(card_repository)
        result = await DeleteCardUseCase(card_repository).execute(card.id, OWNER)
        assert result.message == "Карточка удалена"
        assert await card_repository.find_by_id(card.id) is None

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, card_repository):
        card = await _create(card_repository)
        with pytest.raises(ApiError) as exc_info:
            await DeleteCardUseCase(card_repository).execute(card.id, OTHER)
        assert exc_info.value.kind is ErrorKind.FORBIDDEN
        assert exc_info.value.message == "Недостаточно прав для удаления карточки"
        assert await card_repository.find_by_id(card.id) is not None

    @pytest.mark.asyncio
    async def test_missing_card(self, card_repository):
        with pytest.raises(ApiError) as exc_info:
            await DeleteCardUseCase(card_repository).execute(MISSING_CARD, OWNER)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.message == "Карточка с указанным _id не найдена"

    @pytest.mark.asyncio
    async def test_card_deleted_concurrently(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = Card(
            id=MISSING_CARD, name="Ridge", link="https://example.com/a.jpg", owner_id=OWNER
        )
        repo.delete_by_id.return_value = False
        with pytest.raises(ApiError) as exc_info:
            await DeleteCardUseCase(repo).execute(MISSING_CARD, OWNER)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        repo.delete_by_id.assert_awaited_once_with(MISSING_CARD, owner_id=OWNER)


class TestLikes:
    @pytest.mark.asyncio
    async def test_like_is_idempotent(self, card_repository):
        card = await _create(card_repository)
        like = LikeCardUseCase(card_repository)
        await like.execute(card.id, OTHER)
        result = await like.execute(card.id, OTHER)
        assert result.likes == [OTHER]

    @pytest.mark.asyncio
    async def test_dislike_removes_like(self, card_repository):
        card = await _create(card_repository)
        await LikeCardUseCase(card_repository).execute(card.id, OTHER)
        await LikeCardUseCase(card_repository).execute(card.id, OWNER)
        result = await DislikeCardUseCase(card_repository).execute(card.id, OTHER)
        assert result.likes == [OWNER]

    @pytest.mark.asyncio
    async def test_dislike_without_like_is_noop(self, card_repository):
        card = await _create(card_repository)
        await LikeCardUseCase(card_repository).execute(card.id, OWNER)
        result = await DislikeCardUseCase(card_repository).execute(card.id, OTHER)
        assert result.likes == [OWNER]

    @pytest.mark.asyncio
    async def test_like_missing_card(self, card_repository):
        with pytest.raises(ApiError) as exc_info:
            await LikeCardUseCase(card_repository).execute(MISSING_CARD, OWNER)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_dislike_missing_card(self, card_repository):
        with pytest.raises(ApiError) as exc_info:
            await DislikeCardUseCase(card_repository).execute(MISSING_CARD, OWNER)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
