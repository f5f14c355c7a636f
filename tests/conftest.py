"""
Shared pytest fixtures for mesto tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from tests.fakes import InMemoryCardRepository, InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_mesto_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "APP_ENV": "test",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.jwt_expire_days = 7
    mock.session_max_age_seconds = 7 * 24 * 60 * 60
    mock.auth_cookie_name = "jwt"
    mock.is_production = False

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("mesto.core.config.get_settings", return_value=mock), patch(
        "mesto.core.security.get_settings", return_value=mock
    ), patch("mesto.api.v1.session.get_settings", return_value=mock), patch(
        "mesto.api.v1.dependencies.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def card_repository():
    return InMemoryCardRepository()
