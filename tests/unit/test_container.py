"""
Unit tests for the dependency container and use case providers.
"""
from unittest.mock import MagicMock, patch

import pytest

from mesto.application.use_cases.auth.login_user import LoginUserUseCase
from mesto.application.use_cases.card.delete_card import DeleteCardUseCase
from mesto.application.use_cases.card.like_card import DislikeCardUseCase, LikeCardUseCase
from mesto.application.use_cases.user.update_avatar import UpdateAvatarUseCase
from mesto.di import container as container_module
from mesto.di.base_container import BaseContainer
from mesto.di.container import get_container, register_use_cases, reset_container
from mesto.domain.repositories.card_repository import CardRepository
from mesto.domain.repositories.user_repository import UserRepository


@pytest.fixture
def wired_container(user_repository, card_repository):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(CardRepository, card_repository)
    register_use_cases(container)
    return container


class TestBaseContainer:
    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_later_registration_replaces_earlier(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        container.register_singleton("thing", 42)
        assert container.get("thing") == 42

    def test_missing_key(self):
        with pytest.raises(ValueError, match="UserRepository"):
            BaseContainer().get(UserRepository)


class TestUseCaseProviders:
    def test_use_cases_bound_to_registered_repositories(self, wired_container, user_repository, card_repository):
        assert wired_container.get(LoginUserUseCase).user_repository is user_repository
        assert wired_container.get(UpdateAvatarUseCase).user_repository is user_repository
        # Each loop-registered factory builds its own class
        assert isinstance(wired_container.get(LikeCardUseCase), LikeCardUseCase)
        assert isinstance(wired_container.get(DislikeCardUseCase), DislikeCardUseCase)
        assert wired_container.get(DeleteCardUseCase).card_repository is card_repository

    def test_fresh_use_case_per_get(self, wired_container):
        assert wired_container.get(DeleteCardUseCase) is not wired_container.get(DeleteCardUseCase)


class TestGlobalContainer:
    def test_get_container_is_cached_until_reset(self):
        reset_container()
        with patch.object(container_module, "DIContainer", side_effect=lambda: MagicMock()) as factory:
            first = get_container()
            assert get_container() is first
            reset_container()
            assert get_container() is not first
        assert factory.call_count == 2
        reset_container()
