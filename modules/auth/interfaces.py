"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from modules.users.models import UserRecord


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def login(self, email: str, password: str) -> str:
        """
        Verify email and password and issue a bearer credential.

        Raises:
            UnknownEmailError: If no user has this email
            WrongPasswordError: If the password does not match
        """
        ...

    def issue_token(self, user: UserRecord) -> str:
        """Sign a credential carrying the user's ID and role."""
        ...

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a bearer credential and return the authenticated user.

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...
