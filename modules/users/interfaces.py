"""
Users module interface.

Routes depend on IUserService, not the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import User, UserCreate, UserUpdate


@runtime_checkable
class IUserService(Protocol):
    """Interface for user account operations."""

    async def register(self, request: UserCreate) -> User:
        """
        Create a new account.

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        ...

    async def list_users(self) -> list[User]:
        """List all users."""
        ...

    async def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    async def update_user(
        self,
        actor: AuthenticatedUser,
        user_id: int,
        request: UserUpdate,
    ) -> User:
        """
        Update a user's account.

        Raises:
            UserNotFoundError: If the user does not exist
            AccessDeniedError: If the actor may not modify this account
        """
        ...

    async def delete_user(self, actor: AuthenticatedUser, user_id: int) -> None:
        """
        Delete a user's account and, via cascade, their favorites.

        Raises:
            UserNotFoundError: If the user does not exist
            AccessDeniedError: If the actor may not delete this account
        """
        ...
