"""
Unit tests for user use cases, run against the in-memory repository.
"""
import pytest
from mesto.core.exceptions import ApiError, ErrorKind
from mesto.application.dto.user_dto import AvatarUpdateRequest, ProfileUpdateRequest
from mesto.application.use_cases.user.list_users import ListUsersUseCase
from mesto.application.use_cases.user.get_current_user import GetCurrentUserUseCase
from mesto.application.use_cases.user.get_user import GetUserUseCase
from mesto.application.use_cases.user.update_profile import UpdateProfileUseCase
from mesto.application.use_cases.user.update_avatar import UpdateAvatarUseCase
from mesto.domain.exceptions import DocumentValidationError, InvalidIdError
from mesto.domain.models.user import User

MISSING_ID = "0123456789abcdef01234567"


async def _add_user(repo, email="user@example.com") -> User:
    return await repo.create(
        User(
            id=None,
            email=email,
            hashed_password="$2b$10$hash",
            name="Жак-Ив Кусто",
            about="Исследователь",
            avatar="https://example.com/avatar.png",
        )
    )


class TestListUsersUseCase:
    @pytest.mark.asyncio
    async def test_lists_everyone(self, user_repository):
        await _add_user(user_repository, "a@example.com")
        await _add_user(user_repository, "b@example.com")

        result = await ListUsersUseCase(user_repository).execute()
        assert sorted(user.email for user in result) == ["a@example.com", "b@example.com"]

    @pytest.mark.asyncio
    async def test_empty(self, user_repository):
        assert await ListUsersUseCase(user_repository).execute() == []


class TestGetUserUseCases:
    @pytest.mark.asyncio
    async def test_get_current_user(self, user_repository):
        user = await _add_user(user_repository)
        result = await GetCurrentUserUseCase(user_repository).execute(user.id)
        assert result.id == user.id
        assert result.created_at is not None

    @pytest.mark.asyncio
    async def test_current_user_vanished(self, user_repository):
        with pytest.raises(ApiError) as exc_info:
            await GetCurrentUserUseCase(user_repository).execute(MISSING_ID)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.message == "Пользователь не найден"

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, user_repository):
        with pytest.raises(ApiError) as exc_info:
            await GetUserUseCase(user_repository).execute(MISSING_ID)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.message == "Пользователь по указанному _id не найден."

    @pytest.mark.asyncio
    async def test_get_by_malformed_id_propagates_cast_failure(self, user_repository):
        with pytest.raises(InvalidIdError):
            await GetUserUseCase(user_repository).execute("not-an-id")


class TestUpdateUseCases:
    @pytest.mark.asyncio
    async def test_update_profile(self, user_repository):
        user = await _add_user(user_repository)
        result = await UpdateProfileUseCase(user_repository).execute(
            user.id, ProfileUpdateRequest(name="Анна", about="Фотограф")
        )
        assert result.name == "Анна"
        assert result.about == "Фотограф"
        assert result.email == user.email

    @pytest.mark.asyncio
    async def test_update_profile_missing_user(self, user_repository):
        with pytest.raises(ApiError) as exc_info:
            await UpdateProfileUseCase(user_repository).execute(
                MISSING_ID, ProfileUpdateRequest(name="Анна", about="Фотограф")
            )
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.message == "Пользователь с указанным _id не найден"

    @pytest.mark.asyncio
    async def test_update_profile_storage_validation(self, user_repository):
        user = await _add_user(user_repository)
        request = ProfileUpdateRequest.model_construct(name="A", about="Фотограф")
        with pytest.raises(DocumentValidationError) as exc_info:
            await UpdateProfileUseCase(user_repository).execute(user.id, request)
        assert "name" in exc_info.value.errors

    @pytest.mark.asyncio
    async def test_update_avatar(self, user_repository):
        user = await _add_user(user_repository)
        result = await UpdateAvatarUseCase(user_repository).execute(
            user.id, AvatarUpdateRequest(avatar="https://example.com/new.png")
        )
        assert result.avatar == "https://example.com/new.png"
        assert result.name == user.name
