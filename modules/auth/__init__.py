"""
Authentication module.

Issues and verifies bearer credentials and decides who may do what.

Public API:
- IAuthService: Interface for auth operations
- TokenConfig: Immutable signing configuration
- AccessPolicy: Role and ownership rules
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import TokenConfig, TokenPayload, LoginRequest, TokenCheckRequest
from .policies import AccessPolicy
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    UnknownEmailError,
    WrongPasswordError,
    AccessDeniedError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "TokenConfig",
    "TokenPayload",
    "LoginRequest",
    "TokenCheckRequest",
    # Policy
    "AccessPolicy",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "UnknownEmailError",
    "WrongPasswordError",
    "AccessDeniedError",
]
