"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from itertools import count
from typing import Any, Optional
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.models import TokenConfig
from modules.favorites.exceptions import FavoriteAlreadyExistsError
from modules.favorites.models import Favorite


# Test signing secret (only for testing)
TEST_TOKEN_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: int = 1,
    role: str = "user",
    expired: bool = False,
    secret: str = TEST_TOKEN_SECRET,
) -> str:
    """
    Create a test bearer token.

    Args:
        user_id: User ID to put in the subject claim
        role: Role claim
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    if expired:
        iat = now - timedelta(hours=2)
        exp = now - timedelta(hours=1)
    else:
        iat = now
        exp = now + timedelta(hours=1)

    payload = {
        "sub": str(user_id),
        "role": role,
        "iat": int(iat.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def create_user_row(
    user_id: int = 1,
    email: str = "a@x.com",
    password_hash: str = "$2b$10$invalidinvalidinvalidinvalidinvalidinvalidinvalidinva",
    name: str = "Test User",
    role: str = "user",
) -> dict:
    """Helper to create a users table row."""
    now = datetime.now(timezone.utc).isoformat()
    return {
        "id": user_id,
        "email": email,
        "password_hash": password_hash,
        "name": name,
        "role": role,
        "created_at": now,
        "updated_at": now,
    }


class InMemoryFavoriteRepository:
    """
    Dict-backed favorites storage.

    Enforces uniqueness of (user_id, product_id) on insert the way the
    database constraint does, so service behavior can be exercised
    without Supabase.
    """

    def __init__(self) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self._ids = count(1)

    def create(self, user_id: int, data: dict[str, Any]) -> Favorite:
        for row in self.rows.values():
            if row["user_id"] == user_id and row["product_id"] == data["product_id"]:
                raise FavoriteAlreadyExistsError(user_id, data["product_id"])
        now = datetime.now(timezone.utc)
        row = {**data, "id": next(self._ids), "user_id": user_id, "created_at": now, "updated_at": now}
        self.rows[row["id"]] = row
        return Favorite(**row)

    def get(self, user_id: int, favorite_id: int) -> Optional[Favorite]:
        row = self.rows.get(favorite_id)
        if row is None or row["user_id"] != user_id:
            return None
        return Favorite(**row)

    def find_by_product(self, user_id: int, product_id: int) -> Optional[Favorite]:
        for row in self.rows.values():
            if row["user_id"] == user_id and row["product_id"] == product_id:
                return Favorite(**row)
        return None

    def list_for_user(self, user_id: int) -> list[Favorite]:
        return [Favorite(**row) for row in self.rows.values() if row["user_id"] == user_id]

    def update(self, user_id: int, favorite_id: int, data: dict[str, Any]) -> Optional[Favorite]:
        row = self.rows.get(favorite_id)
        if row is None or row["user_id"] != user_id:
            return None
        row.update(data)
        row["updated_at"] = datetime.now(timezone.utc)
        return Favorite(**row)

    def delete(self, user_id: int, favorite_id: int) -> bool:
        row = self.rows.get(favorite_id)
        if row is None or row["user_id"] != user_id:
            return False
        del self.rows[favorite_id]
        return True

    def delete_by_product(self, user_id: int, product_id: int) -> bool:
        for favorite_id, row in list(self.rows.items()):
            if row["user_id"] == user_id and row["product_id"] == product_id:
                del self.rows[favorite_id]
                return True
        return False


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def token_config() -> TokenConfig:
    """Signing configuration matching create_test_token()."""
    return TokenConfig(secret=TEST_TOKEN_SECRET)


@pytest.fixture
def test_user_id() -> int:
    """Provide a consistent test user ID."""
    return 1


@pytest.fixture
def auth_token(test_user_id: int) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Authorization headers for an admin (user ID 99)."""
    return {"Authorization": f"Bearer {create_test_token(user_id=99, role='admin')}"}
