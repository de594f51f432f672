"""
Fixtures for API tests.

Services are real; their repositories are replaced with mocks or the
in-memory favorites store, and the auth service signs with the test secret.
"""

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from api import create_app
from api.dependencies import (
    get_auth_service,
    get_favorite_service,
    get_product_service,
    get_user_service,
)
from modules.auth.models import TokenConfig
from modules.auth.policies import AccessPolicy
from modules.auth.service import AuthService
from modules.favorites.service import FavoriteService
from modules.products.repository import ProductRepository
from modules.products.service import ProductService
from modules.users.repository import UserRepository
from modules.users.service import UserService
from tests.conftest import TEST_TOKEN_SECRET, InMemoryFavoriteRepository


@pytest.fixture
def users_repo():
    return MagicMock(spec=UserRepository)


@pytest.fixture
def products_repo():
    return MagicMock(spec=ProductRepository)


@pytest.fixture
def favorites_repo():
    return InMemoryFavoriteRepository()


@pytest.fixture
def app(users_repo, products_repo, favorites_repo):
    application = create_app()
    policy = AccessPolicy()
    auth = AuthService(TokenConfig(secret=TEST_TOKEN_SECRET), users_repo)
    users = UserService(users_repo, policy)
    products = ProductService(products_repo, policy)
    favorites = FavoriteService(favorites_repo)

    application.dependency_overrides[get_auth_service] = lambda: auth
    application.dependency_overrides[get_user_service] = lambda: users
    application.dependency_overrides[get_product_service] = lambda: products
    application.dependency_overrides[get_favorite_service] = lambda: favorites
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)
