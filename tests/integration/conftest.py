"""
Fixtures for API integration tests.

The app runs against in-memory repositories wired through the real use
case providers; the lifespan (and with it MongoDB) is never started.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from mesto.di.base_container import BaseContainer
from mesto.di.container import register_use_cases
from mesto.domain.repositories.card_repository import CardRepository
from mesto.domain.repositories.user_repository import UserRepository
from mesto.main import app
from tests.integration.helpers import STRONG_PASSWORD


@pytest.fixture
def container(user_repository, card_repository):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(CardRepository, card_repository)
    register_use_cases(container)
    return container


@pytest.fixture
def client(container, mock_settings):
    """Create test client backed by the in-memory container."""
    with patch("mesto.di.container._container", container):
        yield TestClient(app)


@pytest.fixture
def register(client):
    """Sign up a user and return (user id, session token); leaves no cookie behind."""

    def _register(email: str, **profile) -> tuple:
        response = client.post("/signup", json={"email": email, "password": STRONG_PASSWORD, **profile})
        assert response.status_code == 201, response.text
        token = response.cookies.get("jwt")
        client.cookies.clear()
        return response.json()["id"], token

    return _register
